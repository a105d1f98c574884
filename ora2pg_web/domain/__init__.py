"""
Domain Layer - Migration Kinds

Defines the closed set of migration kinds the user can pick and their labels.
"""

from ora2pg_web.domain.models import MIGRATION_LABELS, MigrationType

__all__ = [
    "MIGRATION_LABELS",
    "MigrationType",
]
