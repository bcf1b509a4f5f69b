from fastapi import APIRouter, Depends

from pytracker.dependencies import get_service
from pytracker.schemas import User
from pytracker.service import TrackingService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/", response_model=list[User])
async def list_users(service: TrackingService = Depends(get_service)):
    """List all known users."""
    return await service.list_users()
