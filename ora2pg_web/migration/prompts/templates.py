"""
Names of the prompt templates sent to the model.

Each member maps to a `<value>.jinja2` file next to this package:
the fixed Oracle -> PostgreSQL instruction, the translation request and the
comparison request behind "Refresh Analysis".
"""

from enum import Enum


class PromptTemplate(str, Enum):
    SYSTEM_INSTRUCTION = "system_instruction"
    TRANSLATION_REQUEST = "translation_request"
    EXPLANATION_REQUEST = "explanation_request"

    @property
    def filename(self) -> str:
        return f"{self.value}.jinja2"
