from fastapi import Request

from pytracker.service import TrackingService


def get_service(request: Request) -> TrackingService:
    """Dependency returning the tracking service built at startup."""
    return request.app.state.tracker
