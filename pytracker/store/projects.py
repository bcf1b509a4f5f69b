from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime
from typing import Callable, Iterable, Optional

from pytracker.errors import DuplicateProjectKey
from pytracker.schemas import Project, validate_project_key
from pytracker.utils import utc_now

logger = logging.getLogger(__name__)


def suggest_key(name: str) -> str:
    """First letter of each word of a project name, upper-cased, at most 4 long."""
    return "".join(word[0] for word in name.split()).upper()[:4]


class ProjectRegistry:
    """Projects, in creation order. Keys are unique across the registry."""

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._projects: list[Project] = []
        self._lock = threading.RLock()
        self._clock = clock

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)

    def list(self) -> list[Project]:
        with self._lock:
            return [project.model_copy(deep=True) for project in self._projects]

    def find_by_id(self, project_id: str) -> Optional[Project]:
        with self._lock:
            for project in self._projects:
                if project.id == project_id:
                    return project.model_copy(deep=True)
        return None

    def find_by_key(self, key: str) -> Optional[Project]:
        with self._lock:
            for project in self._projects:
                if project.key == key:
                    return project.model_copy(deep=True)
        return None

    def create(
        self,
        name: str,
        key: str,
        description: str = "",
        avatar: Optional[str] = None,
    ) -> Project:
        """
        Create a project.

        Raises:
            InvalidProjectKey: If the key is not 2-4 letters
            DuplicateProjectKey: If another project already uses the key
        """
        key = validate_project_key(key)

        with self._lock:
            if any(project.key == key for project in self._projects):
                raise DuplicateProjectKey(key)

            project = Project(
                id=str(uuid.uuid4()),
                name=name,
                key=key,
                description=description,
                avatar=avatar,
                created_at=self._clock(),
            )
            self._projects.append(project)

        logger.info("Project created", extra={"project_id": project.id, "key": key})
        return project.model_copy(deep=True)

    def load(self, projects: Iterable[Project]) -> None:
        with self._lock:
            self._projects.extend(project.model_copy(deep=True) for project in projects)

    def clear(self) -> None:
        with self._lock:
            self._projects.clear()
