import logging
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Request, status
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from ..config import settings
from ..domain.models import MIGRATION_LABELS
from ..services.exceptions import OperationInProgressError, SessionNotFoundError
from ..services.workspace import WorkspaceService
from ..state.models import SessionState
from .dependencies import get_workspace_service
from .schemas import (
    CreateSessionResponse,
    MigrationTypeRead,
    SessionRead,
    UpdateInput,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Ora2PG-Web")

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")


def _to_read(session: SessionState) -> SessionRead:
    # Explicit Map: SessionState (State) -> SessionRead (API)
    return SessionRead(
        session_id=session.session_id,
        source_text=session.source_text,
        target_text=session.target_text,
        migration_type=session.migration_type,
        is_translating=session.is_translating,
        is_explaining=session.is_explaining,
        explanation=session.explanation,
        error=session.error,
        can_translate=session.can_translate,
        can_explain=session.can_explain,
        updated_at=session.updated_at,
    )


# --- Page ---

@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    """The migration workspace. The page drives the JSON API below."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"migration_labels": MIGRATION_LABELS},
    )


# --- Endpoints ---

@app.get("/api/migration-types", response_model=List[MigrationTypeRead])
def list_migration_types():
    return [
        MigrationTypeRead(value=kind, label=label)
        for kind, label in MIGRATION_LABELS.items()
    ]


@app.post(
    "/api/sessions",
    response_model=CreateSessionResponse,
    status_code=status.HTTP_201_CREATED
)
def create_session(
    service: WorkspaceService = Depends(get_workspace_service)
):
    """Starts a new session seeded with the default schema."""
    session = service.create_session()
    return CreateSessionResponse(session_id=session.session_id)


@app.get("/api/sessions/{session_id}", response_model=SessionRead)
def get_session(
    session_id: str,
    service: WorkspaceService = Depends(get_workspace_service)
):
    session = service.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return _to_read(session)


@app.patch("/api/sessions/{session_id}", response_model=SessionRead)
def update_session(
    session_id: str,
    edits: UpdateInput,
    service: WorkspaceService = Depends(get_workspace_service)
):
    """Applies user edits to the source panel and the migration kind."""
    try:
        session = service.update_input(
            session_id,
            source_text=edits.source_text,
            migration_type=edits.migration_type,
        )
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_read(session)


@app.delete("/api/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    service: WorkspaceService = Depends(get_workspace_service)
):
    """
    Deletes a session. Returns 204 No Content on success.
    """
    success = service.delete_session(session_id)
    if not success:
        raise HTTPException(status_code=404, detail="Session not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/api/sessions/{session_id}/translate", response_model=SessionRead)
async def translate(
    session_id: str,
    edits: Optional[UpdateInput] = None,
    service: WorkspaceService = Depends(get_workspace_service)
):
    """
    Translates the session's source code. A failed translation is reported
    through the 'error' field of the session, not as an HTTP error.
    """
    # A refused request leaves the edits unapplied
    edits = edits or UpdateInput()
    try:
        session = await service.translate(
            session_id,
            source_text=edits.source_text,
            migration_type=edits.migration_type,
        )
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OperationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _to_read(session)


@app.post("/api/sessions/{session_id}/explain", response_model=SessionRead)
async def explain(
    session_id: str,
    service: WorkspaceService = Depends(get_workspace_service)
):
    try:
        session = await service.explain(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OperationInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _to_read(session)


@app.post("/api/sessions/{session_id}/clear", response_model=SessionRead)
def clear_source(
    session_id: str,
    service: WorkspaceService = Depends(get_workspace_service)
):
    try:
        session = service.clear_source(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_read(session)


@app.post("/api/sessions/{session_id}/dismiss-error", response_model=SessionRead)
def dismiss_error(
    session_id: str,
    service: WorkspaceService = Depends(get_workspace_service)
):
    try:
        session = service.dismiss_error(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_read(session)
