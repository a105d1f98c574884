"""
Workspace Service - Application Orchestration Layer

This service is the entry point for all workspace operations. It owns the
UI state machine of a session:

    Idle -> Translating -> {Success, Failed}
    Success -> Explaining -> ExplanationReady   (repeatable)

Re-entrant requests are refused while the matching flag is set; nothing is
ever cancelled. The translator does the outbound calls, this class only
decides which flags and panels change.
"""

import logging
from typing import Optional

from ..domain.models import MigrationType
from ..migration.translator import MigrationTranslator
from ..repositories.session import SessionRepository
from ..state.models import SessionState
from .exceptions import (
    OperationInProgressError,
    SessionNotFoundError,
    TranslationError,
)

logger = logging.getLogger(__name__)


class WorkspaceService:
    def __init__(
        self,
        session_repository: SessionRepository,
        translator: MigrationTranslator,
    ):
        self.session_repo = session_repository
        self.translator = translator

    def create_session(self) -> SessionState:
        """Creates a new session seeded with the default schema."""
        session = self.session_repo.create()
        logger.info(f"Created session {session.session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[SessionState]:
        return self.session_repo.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        return self.session_repo.delete(session_id)

    def update_input(
        self,
        session_id: str,
        source_text: Optional[str] = None,
        migration_type: Optional[MigrationType] = None,
    ) -> SessionState:
        """
        Applies direct user edits. Output, error and explanation are untouched.
        """
        session = self._load(session_id)
        if source_text is not None:
            session.source_text = source_text
        if migration_type is not None:
            session.migration_type = migration_type
        self.session_repo.save(session)
        return session

    def clear_source(self, session_id: str) -> SessionState:
        return self.update_input(session_id, source_text="")

    def dismiss_error(self, session_id: str) -> SessionState:
        """Hides the error overlay. Does not retry."""
        session = self._load(session_id)
        session.error = None
        self.session_repo.save(session)
        return session

    async def translate(
        self,
        session_id: str,
        source_text: Optional[str] = None,
        migration_type: Optional[MigrationType] = None,
    ) -> SessionState:
        """
        Runs one translation of the session's source text.

        Edits sent along with the request are applied only once the request
        is accepted. On success the output panel is replaced. On failure the
        error is set and the previous output is kept as it was.
        """
        session = self._load(session_id)

        if session.is_translating:
            raise OperationInProgressError(f"Session {session_id} is already translating")

        if source_text is not None or migration_type is not None:
            session = self.update_input(session_id, source_text, migration_type)

        if not session.source_text.strip():
            return session

        session.is_translating = True
        session.error = None
        session.explanation = None
        self.session_repo.save(session)

        try:
            session.target_text = await self.translator.translate(
                session.source_text, session.migration_type
            )
        except TranslationError as e:
            logger.warning(f"Translation failed for session {session_id}")
            session.error = e.message
        finally:
            session.is_translating = False
            self.session_repo.save(session)

        return session

    async def explain(self, session_id: str) -> SessionState:
        """
        Refreshes the migration insights. Failures end up as fallback text,
        never as an error state.

        Only a settled translation can be explained: the request is refused
        while a translation runs, and a result is dropped if the output it
        describes was replaced in the meantime.
        """
        session = self._load(session_id)

        if not session.source_text or not session.target_text:
            return session

        if session.is_translating:
            raise OperationInProgressError(f"Session {session_id} is translating")

        if session.is_explaining:
            raise OperationInProgressError(f"Session {session_id} is already explaining")

        session.is_explaining = True
        self.session_repo.save(session)

        source_text, target_text = session.source_text, session.target_text
        try:
            explanation = await self.translator.explain(source_text, target_text)
        finally:
            session.is_explaining = False
            self.session_repo.save(session)

        if session.is_translating or session.target_text != target_text:
            logger.info(f"Dropped outdated explanation for session {session_id}")
            return session

        session.explanation = explanation
        self.session_repo.save(session)
        return session

    def _load(self, session_id: str) -> SessionState:
        session = self.session_repo.get(session_id)
        if not session:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session
