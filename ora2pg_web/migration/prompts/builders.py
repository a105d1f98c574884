"""
Prompt building for the migration calls.

Assembly logic for the two requests sent to the model: the translation of
Oracle code into PostgreSQL, and the comparison of both snippets.
"""

from ...domain.models import MigrationType
from .loader import render
from .templates import PromptTemplate

# Only the head of each snippet is sent for the comparison
EXPLANATION_PREFIX_LENGTH = 1000


def build_system_instruction() -> str:
    """The fixed instruction describing the Oracle to PostgreSQL conventions."""
    return render(PromptTemplate.SYSTEM_INSTRUCTION)


def build_translation_prompt(source_code: str, migration_type: MigrationType) -> str:
    """Embed the migration kind and the verbatim source code."""
    return render(
        PromptTemplate.TRANSLATION_REQUEST,
        migration_type=migration_type.value,
        migration_label=migration_type.label,
        source_code=source_code,
    )


def build_explanation_prompt(source_code: str, target_code: str) -> str:
    return render(
        PromptTemplate.EXPLANATION_REQUEST,
        source_code=source_code[:EXPLANATION_PREFIX_LENGTH],
        target_code=target_code[:EXPLANATION_PREFIX_LENGTH],
    )
