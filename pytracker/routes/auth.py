from fastapi import APIRouter, Depends, HTTPException, status

from pytracker.dependencies import get_service
from pytracker.errors import InvalidCredentials
from pytracker.schemas import LoginRequest, RegisterRequest, User
from pytracker.service import TrackingService

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login", response_model=User, status_code=status.HTTP_200_OK)
async def login(payload: LoginRequest, service: TrackingService = Depends(get_service)):
    """Log in with email and password"""
    try:
        return await service.login(payload.email, payload.password)
    except InvalidCredentials as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)
        )


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, service: TrackingService = Depends(get_service)):
    """Register a new user"""
    return await service.register(payload.name, payload.email, payload.password)
