"""
State Layer - Runtime Data Models

This module defines the state of a single migration workspace: the two text
panels, the selected migration kind and the flags gating the spinner, the
error overlay and the insights panel. It lives in memory only and is thrown
away when the page view ends.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from ..data.samples import DEFAULT_ORACLE_CODE
from ..domain.models import MigrationType


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionState(BaseModel):
    """
    The state for a single page view.
    """
    session_id: str
    source_text: str = DEFAULT_ORACLE_CODE
    target_text: str = ""
    migration_type: MigrationType = MigrationType.SCHEMA

    is_translating: bool = False
    is_explaining: bool = False

    explanation: Optional[str] = None
    error: Optional[str] = None

    updated_at: datetime = Field(default_factory=_utcnow)

    @property
    def can_translate(self) -> bool:
        return bool(self.source_text) and not self.is_translating

    @property
    def can_explain(self) -> bool:
        # The insights panel is only shown for a trusted translation
        return (
            bool(self.target_text)
            and self.error is None
            and not self.is_translating
            and not self.is_explaining
        )

    def touch(self):
        self.updated_at = _utcnow()
