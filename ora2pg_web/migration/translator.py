"""
Translator - Migration Request Orchestration

This module defines the MigrationTranslator, a stateless class that wraps the
LLM for the two calls the workspace makes: translating Oracle code into
PostgreSQL, and explaining the differences between both snippets.
The actual migration is performed entirely by the hosted model.
"""

import logging

from ..domain.models import MigrationType
from ..llm.interface import LLMProvider
from ..services.exceptions import TranslationError
from .postprocess import strip_code_fences
from .prompts import (
    build_explanation_prompt,
    build_system_instruction,
    build_translation_prompt,
)

logger = logging.getLogger(__name__)

EXPLANATION_FALLBACK = "Could not generate explanation."
EXPLANATION_EMPTY = "No explanation available."


class MigrationTranslator:
    # DEPENDENCY INJECTION: We ask for the generic Provider
    def __init__(
        self,
        llm_provider: LLMProvider,
        translation_model: str,
        explanation_model: str,
        reasoning_effort: str | None = None,
    ):
        self.llm = llm_provider
        self.translation_model = translation_model
        self.explanation_model = explanation_model
        self.reasoning_effort = reasoning_effort

    async def translate(self, source_code: str, migration_type: MigrationType) -> str:
        """
        Converts Oracle code to PostgreSQL.

        Raises:
            TranslationError: on any failure of the outbound call. No retry is attempted.
        """
        messages = [
            {"role": "system", "content": build_system_instruction()},
            {"role": "user", "content": build_translation_prompt(source_code, migration_type)},
        ]

        try:
            text = await self.llm.generate_text(
                messages=messages,
                model_name=self.translation_model,
                reasoning_effort=self.reasoning_effort,
                plain_text=True,
            )
        except Exception as e:
            logger.error(f"Migration failed: {e}")
            raise TranslationError() from e

        logger.info(f"Translated {len(source_code)} chars of {migration_type.value} code")
        return strip_code_fences(text or "")

    async def explain(self, source_code: str, target_code: str) -> str:
        """
        Summarizes the changes between the Oracle and PostgreSQL snippets.
        Never raises: failures are replaced by a fallback text.
        """
        messages = [
            {"role": "user", "content": build_explanation_prompt(source_code, target_code)},
        ]

        try:
            text = await self.llm.generate_text(
                messages=messages,
                model_name=self.explanation_model,
            )
        except Exception as e:
            logger.warning(f"Explanation failed: {e}")
            return EXPLANATION_FALLBACK

        return text or EXPLANATION_EMPTY
