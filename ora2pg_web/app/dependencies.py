"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the Singleton services (Repository, LLM Adapter, Translator).
2. Wiring them together (e.g., injecting the LLM Adapter into the Translator).
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

Tests replace the LLM provider through app.dependency_overrides, so the
translator and the workspace never know whether they talk to the real API.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..llm.interface import LLMProvider
from ..llm.adapters.openai_adapter import OpenAIAdapter
from ..migration.translator import MigrationTranslator
from ..repositories.session import SessionRepository, InMemorySessionRepository
from ..services.workspace import WorkspaceService

# LLM Provider (Singleton)
@lru_cache()
def get_llm_provider() -> LLMProvider:
    return OpenAIAdapter(
        api_key=settings.OPENAI_API_KEY,
        model_name=settings.TRANSLATION_MODEL,
        base_url=settings.OPENAI_BASE_URL,
        max_retries=settings.MAX_RETRIES,
    )

# Session Repository (Singleton)
# Note: In-memory storage must be a singleton so data persists across requests!
@lru_cache()
def get_session_repository() -> SessionRepository:
    return InMemorySessionRepository(ttl_seconds=settings.SESSION_TTL_SECONDS)

# The Translator (Singleton Service)
@lru_cache()
def get_migration_translator(
    llm: LLMProvider = Depends(get_llm_provider),
) -> MigrationTranslator:
    return MigrationTranslator(
        llm_provider=llm,
        translation_model=settings.TRANSLATION_MODEL,
        explanation_model=settings.EXPLANATION_MODEL,
        reasoning_effort=settings.TRANSLATION_REASONING_EFFORT,
    )

# The Workspace Service (Singleton Service)
@lru_cache()
def get_workspace_service(
    session_repo: SessionRepository = Depends(get_session_repository),
    translator: MigrationTranslator = Depends(get_migration_translator),
) -> WorkspaceService:
    """
    Injects the session storage and the translator into the WorkspaceService.
    """
    return WorkspaceService(
        session_repository=session_repo,
        translator=translator,
    )
