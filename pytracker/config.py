import os
from dataclasses import dataclass, field

# Simulated completion delay per façade operation, in milliseconds.
# Reads are shorter than writes.
OPERATION_LATENCY_MS = {
    "login": 1000,
    "register": 1000,
    "list_users": 400,
    "list_projects": 500,
    "get_project": 500,
    "create_project": 800,
    "list_tickets": 600,
    "get_ticket": 500,
    "board": 600,
    "create_ticket": 800,
    "update_ticket": 700,
    "delete_ticket": 700,
}

TICKET_ID_POLICIES = ("monotonic", "count")
AUTH_POLICIES = ("shared", "hashed")


@dataclass
class Settings:
    """Runtime configuration, read from environment variables."""

    ticket_id_policy: str = "monotonic"
    auth_policy: str = "shared"
    shared_password: str = "password"
    latency_scale: float = 1.0
    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"

    def __post_init__(self):
        if self.ticket_id_policy not in TICKET_ID_POLICIES:
            raise ValueError(f"Unknown TICKET_ID_POLICY: {self.ticket_id_policy}")
        if self.auth_policy not in AUTH_POLICIES:
            raise ValueError(f"Unknown AUTH_POLICY: {self.auth_policy}")
        if self.latency_scale < 0:
            raise ValueError("LATENCY_SCALE must not be negative")

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        Reads:
        - TICKET_ID_POLICY: "monotonic" (default) or "count"
        - AUTH_POLICY: "shared" (default) or "hashed"
        - SHARED_PASSWORD: demo secret accepted for every user
        - LATENCY_SCALE: multiplier for simulated delays (0 disables them)
        - CORS_ORIGINS: comma-separated list of allowed origins
        - LOG_LEVEL: logging level name
        """
        origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
        return cls(
            ticket_id_policy=os.getenv("TICKET_ID_POLICY", "monotonic").lower().strip(),
            auth_policy=os.getenv("AUTH_POLICY", "shared").lower().strip(),
            shared_password=os.getenv("SHARED_PASSWORD", "password"),
            latency_scale=float(os.getenv("LATENCY_SCALE", "1.0")),
            cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
