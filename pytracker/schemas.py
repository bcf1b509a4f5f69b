import re
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from pytracker.errors import InvalidProjectKey

PROJECT_KEY_PATTERN = re.compile(r"[A-Z]{2,4}")


class TicketStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    DONE = "DONE"


class TicketPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


def normalize_tags(tags: list[str]) -> list[str]:
    """Upper-case tags, drop blanks and case-insensitive duplicates, keep order."""
    normalized: list[str] = []
    for tag in tags:
        tag = tag.strip().upper()
        if tag and tag not in normalized:
            normalized.append(tag)
    return normalized


def validate_project_key(key: str) -> str:
    """
    Normalize a project key and check it is 2-4 uppercase letters.

    Raises:
        InvalidProjectKey: If the normalized key does not match
    """
    normalized = key.strip().upper()
    if not PROJECT_KEY_PATTERN.fullmatch(normalized):
        raise InvalidProjectKey(f"Project key must be 2-4 letters, got {key!r}")
    return normalized


class TrackerModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class User(TrackerModel):
    id: str
    name: str
    email: str
    avatar: Optional[str] = None


class Project(TrackerModel):
    id: str
    name: str
    key: str
    description: str = ""
    avatar: Optional[str] = None
    created_at: datetime


class Ticket(TrackerModel):
    id: str
    title: str
    description: str = ""
    status: TicketStatus
    priority: TicketPriority
    assignee: Optional[User] = None
    reporter: User
    project_id: str
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)


class LoginRequest(TrackerModel):
    email: str
    password: str


class RegisterRequest(TrackerModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)


class ProjectCreate(TrackerModel):
    name: str = Field(min_length=1, max_length=100)
    key: str
    description: str = ""
    avatar: Optional[str] = None

    @field_validator("key")
    @classmethod
    def _validate_key(cls, value: str) -> str:
        return validate_project_key(value)


class TicketCreate(TrackerModel):
    project_id: str
    title: str = Field(min_length=1, max_length=200)
    description: str = ""
    status: TicketStatus
    priority: TicketPriority
    assignee: Optional[User] = None
    reporter: User
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)


class TicketUpdate(TrackerModel):
    """
    Partial update of a ticket's mutable fields.

    Each field is either unset (left untouched) or set to a value. Which
    fields were set is tracked by pydantic and exposed through changes().
    Only assignee may be set to None, which unassigns the ticket. Any other
    field, including id, projectId, reporter and the timestamps, is rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None
    assignee: Optional[User] = None
    tags: Optional[list[str]] = None

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return None if value is None else normalize_tags(value)

    @model_validator(mode="after")
    def _reject_nulls(self) -> "TicketUpdate":
        for name in self.model_fields_set:
            if name != "assignee" and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the caller explicitly set."""
        return {name: getattr(self, name) for name in self.model_fields_set}
