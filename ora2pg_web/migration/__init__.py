"""
Migration Layer - Model Requests and Response Cleanup

Defines the MigrationTranslator that builds prompts, calls the hosted model
and normalizes its replies.
"""

from ora2pg_web.migration.postprocess import strip_code_fences
from ora2pg_web.migration.translator import (
    EXPLANATION_EMPTY,
    EXPLANATION_FALLBACK,
    MigrationTranslator,
)

__all__ = [
    "EXPLANATION_EMPTY",
    "EXPLANATION_FALLBACK",
    "MigrationTranslator",
    "strip_code_fences",
]
