"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..domain.models import MigrationType


class CreateSessionResponse(BaseModel):
    session_id: str


class MigrationTypeRead(BaseModel):
    value: MigrationType
    label: str


class UpdateInput(BaseModel):
    """User edits. Fields left out are not changed."""
    source_text: Optional[str] = None
    migration_type: Optional[MigrationType] = None


class SessionRead(BaseModel):
    session_id: str
    source_text: str
    target_text: str
    migration_type: MigrationType
    is_translating: bool
    is_explaining: bool
    explanation: Optional[str] = None
    error: Optional[str] = None
    can_translate: bool
    can_explain: bool
    updated_at: datetime
