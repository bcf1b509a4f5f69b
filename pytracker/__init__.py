"""PyTracker issue-tracking backend.

A FastAPI application for managing kanban-style tickets with:
- In-memory stores for users, projects and tickets
- Project-scoped ticket identifiers (PT-1, PT-2, ...)
- A tracking service façade with simulated request latency
- Pluggable credential verification
"""
