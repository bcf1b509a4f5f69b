from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, Iterable, Optional

from pytracker.errors import NotFound
from pytracker.schemas import Project, Ticket, TicketCreate, TicketUpdate
from pytracker.utils import utc_now

logger = logging.getLogger(__name__)


class TicketStore:
    """
    Tickets, in creation order.

    Ticket IDs are "<project key>-<sequence>". How the sequence is chosen
    depends on the id policy:

    - "monotonic": a per-project counter that only ever grows, so an ID is
      never handed out twice, even after the ticket holding it is deleted.
    - "count": the number of tickets currently stored for the project plus
      one. Deleting a ticket lets its number (or a later one) be issued again.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_policy: str = "monotonic",
    ):
        if id_policy not in ("monotonic", "count"):
            raise ValueError(f"Unknown ticket id policy: {id_policy}")
        self._tickets: list[Ticket] = []
        self._sequences: dict[str, int] = {}
        self._lock = threading.RLock()
        self._clock = clock
        self.id_policy = id_policy

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._tickets)

    def list(self, project_id: Optional[str] = None) -> list[Ticket]:
        with self._lock:
            return [
                ticket.model_copy(deep=True)
                for ticket in self._tickets
                if project_id is None or ticket.project_id == project_id
            ]

    def get(self, ticket_id: str) -> Ticket:
        with self._lock:
            return self._tickets[self._index_of(ticket_id)].model_copy(deep=True)

    def create(self, project: Project, fields: TicketCreate) -> Ticket:
        """Store a new ticket in the given project and return it."""
        with self._lock:
            sequence = self._next_sequence(project.id)
            now = self._clock()
            ticket = Ticket(
                id=f"{project.key}-{sequence}",
                title=fields.title,
                description=fields.description,
                status=fields.status,
                priority=fields.priority,
                assignee=fields.assignee.model_copy() if fields.assignee else None,
                reporter=fields.reporter.model_copy(),
                project_id=project.id,
                tags=list(fields.tags),
                created_at=now,
                updated_at=now,
            )
            self._tickets.append(ticket)

        logger.info(
            "Ticket created",
            extra={"ticket_id": ticket.id, "project_id": project.id},
        )
        return ticket.model_copy(deep=True)

    def update(self, ticket_id: str, update: TicketUpdate) -> Ticket:
        """
        Shallow-merge the fields set on the update onto the ticket.

        updated_at is always refreshed and never goes backwards, even if the
        clock does not advance between two writes.

        Raises:
            NotFound: If no ticket has this id
        """
        changes = update.model_copy(deep=True).changes()

        with self._lock:
            index = self._index_of(ticket_id)
            current = self._tickets[index]

            now = self._clock()
            if now <= current.updated_at:
                now = current.updated_at + timedelta(microseconds=1)

            updated = current.model_copy(update={**changes, "updated_at": now}, deep=True)
            self._tickets[index] = updated

        logger.info(
            "Ticket updated",
            extra={"ticket_id": ticket_id, "fields": sorted(changes)},
        )
        return updated.model_copy(deep=True)

    def delete(self, ticket_id: str) -> None:
        """
        Remove a ticket permanently.

        Raises:
            NotFound: If no ticket has this id
        """
        with self._lock:
            del self._tickets[self._index_of(ticket_id)]

        logger.info("Ticket deleted", extra={"ticket_id": ticket_id})

    def load(self, tickets: Iterable[Ticket]) -> None:
        """Append existing tickets and prime the per-project counters from their ids."""
        with self._lock:
            for ticket in tickets:
                self._tickets.append(ticket.model_copy(deep=True))
                sequence = int(ticket.id.rsplit("-", 1)[1])
                self._sequences[ticket.project_id] = max(
                    self._sequences.get(ticket.project_id, 0), sequence
                )

    def clear(self) -> None:
        with self._lock:
            self._tickets.clear()
            self._sequences.clear()

    def _next_sequence(self, project_id: str) -> int:
        if self.id_policy == "count":
            return sum(1 for ticket in self._tickets if ticket.project_id == project_id) + 1

        sequence = self._sequences.get(project_id, 0) + 1
        self._sequences[project_id] = sequence
        return sequence

    def _index_of(self, ticket_id: str) -> int:
        for index, ticket in enumerate(self._tickets):
            if ticket.id == ticket_id:
                return index
        raise NotFound("ticket", ticket_id)
