"""
Prompt templates for the migration calls.
"""

from ora2pg_web.migration.prompts.builders import (
    EXPLANATION_PREFIX_LENGTH,
    build_explanation_prompt,
    build_system_instruction,
    build_translation_prompt,
)

__all__ = [
    "EXPLANATION_PREFIX_LENGTH",
    "build_explanation_prompt",
    "build_system_instruction",
    "build_translation_prompt",
]
