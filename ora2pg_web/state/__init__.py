"""
State Layer - Runtime Data Models

Defines the ephemeral per-page-view state of the migration workspace.
"""

from ora2pg_web.state.models import SessionState

__all__ = [
    "SessionState",
]
