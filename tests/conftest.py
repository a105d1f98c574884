from __future__ import annotations

from typing import List, Optional

import pytest

from ora2pg_web.llm.interface import LLMProvider
from ora2pg_web.migration.translator import MigrationTranslator
from ora2pg_web.repositories.session import InMemorySessionRepository
from ora2pg_web.services.workspace import WorkspaceService


class FakeLLMProvider(LLMProvider):
    """Records every call and answers with a canned reply or raises a canned error."""

    def __init__(self, reply: str = "SELECT 1;", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls: List[dict] = []

    async def generate_text(self, messages, model_name=None, reasoning_effort=None, plain_text=False):
        self.calls.append(
            {
                "messages": messages,
                "model_name": model_name,
                "reasoning_effort": reasoning_effort,
                "plain_text": plain_text,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def llm() -> FakeLLMProvider:
    return FakeLLMProvider()


@pytest.fixture
def translator(llm) -> MigrationTranslator:
    return MigrationTranslator(
        llm_provider=llm,
        translation_model="translate-model",
        explanation_model="explain-model",
        reasoning_effort="medium",
    )


@pytest.fixture
def repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def service(repository, translator) -> WorkspaceService:
    return WorkspaceService(session_repository=repository, translator=translator)
