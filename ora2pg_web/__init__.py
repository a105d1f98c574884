"""
Ora2PG-Web

A browser workspace that migrates Oracle SQL and PL/SQL to PostgreSQL by
delegating the translation to a hosted large-language-model.
"""

from ora2pg_web.domain import (
    MIGRATION_LABELS,
    MigrationType,
)
from ora2pg_web.state import SessionState
from ora2pg_web.migration import MigrationTranslator, strip_code_fences

__all__ = [
    # Domain Layer
    "MIGRATION_LABELS",
    "MigrationType",
    # State Layer
    "SessionState",
    # Migration Layer
    "MigrationTranslator",
    "strip_code_fences",
]
