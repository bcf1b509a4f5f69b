from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable, Optional

from pytracker.schemas import User
from pytracker.utils import initials

logger = logging.getLogger(__name__)


class UserDirectory:
    """Known users, in registration order."""

    def __init__(self):
        self._users: list[User] = []
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list(self) -> list[User]:
        with self._lock:
            return [user.model_copy(deep=True) for user in self._users]

    def find_by_email(self, email: str) -> Optional[User]:
        """Exact, case-sensitive lookup. The first registered match wins."""
        with self._lock:
            for user in self._users:
                if user.email == email:
                    return user.model_copy(deep=True)
        return None

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user.model_copy(deep=True)
        return None

    def new_user(self, name: str, email: str) -> User:
        """Build a user with a fresh id and initials avatar, without storing it."""
        return User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            avatar=initials(name) or None,
        )

    def register(self, name: str, email: str) -> User:
        """
        Add a new user.

        Always succeeds: emails are not checked for duplicates. The avatar is
        derived from the initials of the name.
        """
        return self.add(self.new_user(name, email))

    def add(self, user: User) -> User:
        user = user.model_copy(deep=True)
        with self._lock:
            self._users.append(user)

        logger.info("User registered", extra={"user_id": user.id})
        return user.model_copy(deep=True)

    def load(self, users: Iterable[User]) -> None:
        with self._lock:
            self._users.extend(user.model_copy(deep=True) for user in users)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()
