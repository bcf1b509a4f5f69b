"""Tracking service: the single entry point for login, project and ticket operations."""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from pytracker import seed
from pytracker.auth import CredentialVerifier, SharedSecretVerifier, get_credential_verifier
from pytracker.config import OPERATION_LATENCY_MS, Settings
from pytracker.errors import InvalidCredentials, NotFound
from pytracker.schemas import (
    Project,
    ProjectCreate,
    Ticket,
    TicketCreate,
    TicketStatus,
    TicketUpdate,
    User,
)
from pytracker.store import ProjectRegistry, TicketStore, UserDirectory
from pytracker.utils import utc_now

logger = logging.getLogger(__name__)


class TrackingService:
    """
    Façade over the user, project and ticket stores.

    Every operation waits a fixed, per-operation delay before it touches the
    stores, so callers always see a pending state. A caller that abandons the
    call during the delay leaves the stores unchanged. Once a write reaches a
    store it runs to completion.
    """

    def __init__(
        self,
        users: UserDirectory,
        projects: ProjectRegistry,
        tickets: TicketStore,
        verifier: Optional[CredentialVerifier] = None,
        latency_ms: Optional[dict[str, float]] = None,
        latency_scale: float = 1.0,
        seed_password: str = seed.SHARED_DEMO_PASSWORD,
    ):
        self.users = users
        self.projects = projects
        self.tickets = tickets
        self.verifier = verifier or SharedSecretVerifier(seed_password)
        self.latency_ms = dict(OPERATION_LATENCY_MS if latency_ms is None else latency_ms)
        self.latency_scale = latency_scale
        self.seed_password = seed_password

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: Callable[[], datetime] = utc_now,
    ) -> "TrackingService":
        """Build the stores and verifier from settings and load the seed data."""
        service = cls(
            users=UserDirectory(),
            projects=ProjectRegistry(clock=clock),
            tickets=TicketStore(clock=clock, id_policy=settings.ticket_id_policy),
            verifier=get_credential_verifier(settings),
            latency_scale=settings.latency_scale,
            seed_password=settings.shared_password,
        )
        service.seed()
        return service

    def seed(self) -> None:
        """Load the fixed boot data into the stores."""
        users = seed.seed_users()
        self.users.load(users)
        for user in users:
            self.verifier.enroll(user, self.seed_password)
        self.projects.load(seed.seed_projects())
        self.tickets.load(seed.seed_tickets(users))

    def reset(self) -> None:
        """
        Drop everything and reload the seed data.

        All three store locks are held for the whole reset, so a concurrent
        read of any store sees either the old contents or the fresh seed.
        """
        with self.users.lock, self.projects.lock, self.tickets.lock:
            self.tickets.clear()
            self.projects.clear()
            self.users.clear()
            self.verifier.clear()
            self.seed()
        logger.info("Stores reset to seed data")

    async def _simulate_latency(self, operation: str) -> None:
        delay = self.latency_ms.get(operation, 0) * self.latency_scale / 1000
        await asyncio.sleep(delay)

    # Auth

    async def login(self, email: str, password: str) -> User:
        await self._simulate_latency("login")
        user = self.users.find_by_email(email)
        # Hashing runs off the event loop.
        if user is None or not await asyncio.to_thread(self.verifier.verify, user, password):
            logger.warning("Login rejected", extra={"email": email})
            raise InvalidCredentials()

        logger.info("Login succeeded", extra={"user_id": user.id})
        return user

    async def register(self, name: str, email: str, password: str) -> User:
        await self._simulate_latency("register")
        return await asyncio.shield(self._enroll_and_add(name, email, password))

    async def _enroll_and_add(self, name: str, email: str, password: str) -> User:
        # Enroll before the user is visible in the directory.
        user = self.users.new_user(name, email)
        await asyncio.to_thread(self.verifier.enroll, user, password)
        return self.users.add(user)

    async def list_users(self) -> list[User]:
        await self._simulate_latency("list_users")
        return self.users.list()

    # Projects

    async def list_projects(self) -> list[Project]:
        await self._simulate_latency("list_projects")
        return self.projects.list()

    async def get_project(self, project_id: str) -> Project:
        await self._simulate_latency("get_project")
        return self._require_project(project_id)

    async def create_project(self, fields: ProjectCreate) -> Project:
        await self._simulate_latency("create_project")
        return self.projects.create(
            name=fields.name,
            key=fields.key,
            description=fields.description,
            avatar=fields.avatar,
        )

    # Tickets

    async def list_tickets(self, project_id: Optional[str] = None) -> list[Ticket]:
        await self._simulate_latency("list_tickets")
        return self.tickets.list(project_id)

    async def get_ticket(self, ticket_id: str) -> Ticket:
        await self._simulate_latency("get_ticket")
        return self.tickets.get(ticket_id)

    async def create_ticket(self, fields: TicketCreate) -> Ticket:
        """
        Create a ticket in an existing project.

        Raises:
            NotFound: If fields.project_id does not resolve to a project
        """
        await self._simulate_latency("create_ticket")
        project = self._require_project(fields.project_id)
        return self.tickets.create(project, fields)

    async def update_ticket(self, ticket_id: str, update: TicketUpdate) -> Ticket:
        await self._simulate_latency("update_ticket")
        return self.tickets.update(ticket_id, update)

    async def delete_ticket(self, ticket_id: str) -> None:
        await self._simulate_latency("delete_ticket")
        self.tickets.delete(ticket_id)

    async def board(self, project_id: str) -> dict[TicketStatus, list[Ticket]]:
        """A project's tickets grouped into kanban columns, in workflow order."""
        await self._simulate_latency("board")
        self._require_project(project_id)
        tickets = self.tickets.list(project_id)
        return {
            status: [ticket for ticket in tickets if ticket.status == status]
            for status in TicketStatus
        }

    def _require_project(self, project_id: str) -> Project:
        project = self.projects.find_by_id(project_id)
        if project is None:
            logger.warning("Project not found", extra={"project_id": project_id})
            raise NotFound("project", project_id)
        return project
