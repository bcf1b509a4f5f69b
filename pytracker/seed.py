"""Fixed boot data: 3 users, 2 projects (PT, MA) and 5 tickets."""

from datetime import datetime, timezone

from pytracker.schemas import Project, Ticket, TicketPriority, TicketStatus, User

SHARED_DEMO_PASSWORD = "password"


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def seed_users() -> list[User]:
    return [
        User(id="1", name="Sarah Chen", email="sarah@pytracker.com", avatar="SC"),
        User(id="2", name="Alex Rodriguez", email="alex@pytracker.com", avatar="AR"),
        User(id="3", name="Maya Patel", email="maya@pytracker.com", avatar="MP"),
    ]


def seed_projects() -> list[Project]:
    return [
        Project(
            id="1",
            name="PyTracker Platform",
            key="PT",
            description="Main project management platform",
            created_at=_day(2024, 1, 15),
        ),
        Project(
            id="2",
            name="Mobile App",
            key="MA",
            description="iOS and Android mobile application",
            created_at=_day(2024, 2, 1),
        ),
    ]


def seed_tickets(users: list[User]) -> list[Ticket]:
    """Seed tickets, with assignee and reporter snapshots taken from users."""
    sarah, alex, maya = users[0], users[1], users[2]
    return [
        Ticket(
            id="PT-1",
            title="Create User Authentication System",
            description="Implement login, logout, and user session management",
            status=TicketStatus.IN_PROGRESS,
            priority=TicketPriority.HIGH,
            assignee=sarah,
            reporter=alex,
            project_id="1",
            tags=["AUTHENTICATION", "BACKEND"],
            created_at=_day(2024, 1, 20),
            updated_at=_day(2024, 1, 22),
        ),
        Ticket(
            id="PT-2",
            title="Design Dashboard UI",
            description="Create modern and intuitive dashboard interface",
            status=TicketStatus.TODO,
            priority=TicketPriority.MEDIUM,
            assignee=maya,
            reporter=sarah,
            project_id="1",
            tags=["UI/UX", "FRONTEND"],
            created_at=_day(2024, 1, 21),
            updated_at=_day(2024, 1, 21),
        ),
        Ticket(
            id="PT-3",
            title="Setup CI/CD Pipeline",
            description="Configure automated testing and deployment",
            status=TicketStatus.DONE,
            priority=TicketPriority.HIGH,
            assignee=alex,
            reporter=sarah,
            project_id="1",
            tags=["DEVOPS", "AUTOMATION"],
            created_at=_day(2024, 1, 18),
            updated_at=_day(2024, 1, 25),
        ),
        Ticket(
            id="PT-4",
            title="Email Verification Process",
            description="Add email verification for new user registrations",
            status=TicketStatus.IN_REVIEW,
            priority=TicketPriority.MEDIUM,
            assignee=sarah,
            reporter=maya,
            project_id="1",
            tags=["AUTHENTICATION", "EMAIL"],
            created_at=_day(2024, 1, 19),
            updated_at=_day(2024, 1, 24),
        ),
        Ticket(
            id="MA-1",
            title="Mobile App Wireframes",
            description="Create initial wireframes for mobile application",
            status=TicketStatus.TODO,
            priority=TicketPriority.LOW,
            assignee=maya,
            reporter=alex,
            project_id="2",
            tags=["MOBILE", "DESIGN"],
            created_at=_day(2024, 2, 1),
            updated_at=_day(2024, 2, 1),
        ),
    ]
