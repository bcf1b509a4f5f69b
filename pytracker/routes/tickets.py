from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pytracker.dependencies import get_service
from pytracker.errors import NotFound
from pytracker.schemas import Ticket, TicketCreate, TicketUpdate
from pytracker.service import TrackingService

router = APIRouter(prefix="/api/v1/tickets", tags=["tickets"])


@router.get("/", response_model=list[Ticket])
async def list_tickets(
    project_id: Optional[str] = Query(None, alias="projectId"),
    service: TrackingService = Depends(get_service),
):
    """List tickets, optionally only those of one project."""
    return await service.list_tickets(project_id)


@router.get("/{ticket_id}", response_model=Ticket, status_code=status.HTTP_200_OK)
async def get_ticket(ticket_id: str, service: TrackingService = Depends(get_service)):
    """Get ticket by ID"""
    try:
        return await service.get_ticket(ticket_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found"
        )


@router.post("/", response_model=Ticket, status_code=status.HTTP_201_CREATED)
async def create_ticket(payload: TicketCreate, service: TrackingService = Depends(get_service)):
    """Create new ticket"""
    try:
        return await service.create_ticket(payload)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Project not found"
        )


@router.patch("/{ticket_id}", response_model=Ticket, status_code=status.HTTP_200_OK)
async def update_ticket(
    ticket_id: str,
    payload: TicketUpdate,
    service: TrackingService = Depends(get_service),
):
    """Update ticket by ID"""
    try:
        return await service.update_ticket(ticket_id, payload)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found"
        )


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket(ticket_id: str, service: TrackingService = Depends(get_service)):
    """Delete ticket by ID"""
    try:
        await service.delete_ticket(ticket_id)
    except NotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Ticket not found"
        )
