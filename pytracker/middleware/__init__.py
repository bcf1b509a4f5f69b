"""HTTP middleware."""

from pytracker.middleware.timing import timing_middleware

__all__ = ["timing_middleware"]
