"""In-memory entity stores composed by the tracking service."""

from pytracker.store.projects import ProjectRegistry, suggest_key
from pytracker.store.tickets import TicketStore
from pytracker.store.users import UserDirectory

__all__ = ["ProjectRegistry", "TicketStore", "UserDirectory", "suggest_key"]
