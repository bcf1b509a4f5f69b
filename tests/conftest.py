"""
Pytest configuration and fixtures for the PyTracker test suite.

Provides:
- A seeded tracking service with simulated latency switched off
- A deterministic clock that advances one second per reading
- A FastAPI test client wired to that service
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from pytracker.config import Settings
from pytracker.dependencies import get_service
from pytracker.service import TrackingService


class StepClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def settings():
    return Settings(latency_scale=0)


@pytest.fixture
def service(settings, clock):
    return TrackingService.from_settings(settings, clock=clock)


@pytest.fixture
def sarah(service):
    return service.users.find_by_id("1")


@pytest.fixture
def maya(service):
    return service.users.find_by_id("3")


@pytest.fixture
def client(service):
    from main import app

    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
