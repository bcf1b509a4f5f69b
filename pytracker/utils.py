from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def initials(name: str) -> str:
    """Upper-cased first letter of each space-separated word ("Maya Patel" -> "MP")."""
    return "".join(word[0] for word in name.split(" ") if word).upper()
