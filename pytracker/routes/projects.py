from fastapi import APIRouter, Depends, HTTPException, Query, status

from pytracker.dependencies import get_service
from pytracker.errors import DuplicateProjectKey, NotFound
from pytracker.schemas import Project, ProjectCreate, Ticket, TicketStatus
from pytracker.service import TrackingService
from pytracker.store import suggest_key

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("/", response_model=list[Project])
async def list_projects(service: TrackingService = Depends(get_service)):
    """List all projects."""
    return await service.list_projects()


@router.get("/key-suggestion")
async def key_suggestion(name: str = Query(min_length=1)):
    """Suggest a project key from a project name"""
    return {"key": suggest_key(name)}


@router.get("/{project_id}", response_model=Project, status_code=status.HTTP_200_OK)
async def get_project(project_id: str, service: TrackingService = Depends(get_service)):
    """Get project by ID"""
    try:
        return await service.get_project(project_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Project not found"
        )


@router.get("/{project_id}/board", response_model=dict[TicketStatus, list[Ticket]])
async def get_board(project_id: str, service: TrackingService = Depends(get_service)):
    """Get a project's tickets grouped by status"""
    try:
        return await service.board(project_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Project not found"
        )


@router.post("/", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectCreate, service: TrackingService = Depends(get_service)):
    """Create new project"""
    try:
        return await service.create_project(payload)
    except DuplicateProjectKey as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
