import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pytracker.config import Settings
from pytracker.middleware.timing import timing_middleware
from pytracker.routes import auth_router, projects_router, tickets_router, users_router
from pytracker.service import TrackingService

# Load environment variables from .env file
load_dotenv()

settings = Settings.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the stores and load seed data
    app.state.tracker = TrackingService.from_settings(settings)

    yield

    # Shutdown: in-memory state is discarded with the process
    app.state.tracker = None

app = FastAPI(title="PyTracker", lifespan=lifespan)

app.middleware("http")(timing_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logging.basicConfig(
    level=settings.log_level,
    format="%(levelname)s | %(name)s | %(message)s",
)

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(projects_router)
app.include_router(tickets_router)
