"""Domain errors raised by the stores and the tracking service."""


class TrackerError(Exception):
    """Base class for tracking service errors."""

    pass


class InvalidCredentials(TrackerError):
    """Login with an unknown email or a rejected password."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotFound(TrackerError):
    """An operation referenced a project, ticket or user that does not exist."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} {entity_id} not found")


class InvalidProjectKey(TrackerError, ValueError):
    pass


class DuplicateProjectKey(TrackerError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Project key {key} is already in use")
