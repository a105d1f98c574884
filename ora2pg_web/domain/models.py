"""
Domain Layer - Migration Kinds

The migration kind describes the category of Oracle code the user pasted.
It carries no behaviour of its own: it is forwarded to the model as context,
both as its value and as its human readable label.
"""

from enum import Enum
from typing import Dict


class MigrationType(str, Enum):
    """
    Category of the source code being migrated.

    SCHEMA: Table/Schema DDL (tables, sequences, constraints).
    FUNCTION: A single stored procedure or function.
    QUERY: An ad-hoc SQL statement.
    FULL_PACKAGE: A complete PL/SQL package.
    """
    SCHEMA = "SCHEMA"
    FUNCTION = "FUNCTION"
    QUERY = "QUERY"
    FULL_PACKAGE = "FULL_PACKAGE"

    @property
    def label(self) -> str:
        return MIGRATION_LABELS[self]


MIGRATION_LABELS: Dict[MigrationType, str] = {
    MigrationType.SCHEMA: "Table/Schema DDL",
    MigrationType.FUNCTION: "Stored Procedure/Function",
    MigrationType.QUERY: "Ad-hoc SQL Query",
    MigrationType.FULL_PACKAGE: "Full Package (PL/SQL)",
}
