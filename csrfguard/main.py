# csrfguard/main.py
"""
FastAPI integration for csrf-guard.

Wires the framework-free core into a FastAPI app: signed cookie sessions,
the token endpoint, error rendering, and a small notes resource whose
state-changing operations are CSRF protected.
"""

from fastapi import FastAPI, HTTPException, Depends, Request, Body
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from typing import Dict, Any, Optional
from contextlib import asynccontextmanager
import logging
import os
import secrets
import uvicorn

from csrfguard.core.config import Settings, configure, get_config
from csrfguard.core.exceptions import CsrfError
from csrfguard.core.logging_config import setup_logging
from csrfguard.core.security import validate_csrf
from csrfguard.middleware.csrf_protection import with_csrf_protection
from csrfguard.resources.csrf_token import create_csrf_router, request_context

logger = logging.getLogger(__name__)


def get_session_secret(settings: Settings) -> str:
    """Session secret from settings, or a temporary one for development"""
    if settings.SESSION_SECRET:
        return settings.SESSION_SECRET
    logger.warning("⚠️ No SESSION_SECRET set. Generated temporary secret, sessions will not survive a restart.")
    return secrets.token_urlsafe(32)


async def csrf_protect(request: Request) -> None:
    """FastAPI dependency: validates the CSRF header of a request"""
    validate_csrf(request_context(request))


class NotesHandler:
    """In-memory notes store used as the protected example resource"""

    def __init__(self):
        self.notes: Dict[str, Dict[str, Any]] = {}

    async def create(self, target: str, data: Optional[Dict[str, Any]], request: Any) -> Dict[str, Any]:
        if target in self.notes:
            raise HTTPException(status_code=409, detail=f"Note '{target}' already exists")
        self.notes[target] = dict(data or {})
        return {"id": target, **self.notes[target]}

    async def replace(self, target: str, data: Optional[Dict[str, Any]], request: Any) -> Dict[str, Any]:
        if target not in self.notes:
            raise HTTPException(status_code=404, detail=f"Note '{target}' not found")
        self.notes[target] = dict(data or {})
        return {"id": target, **self.notes[target]}

    async def remove(self, target: str, data: Any, request: Any) -> Dict[str, Any]:
        if self.notes.pop(target, None) is None:
            raise HTTPException(status_code=404, detail=f"Note '{target}' not found")
        return {"deleted": target}

    def get(self, target: str) -> Dict[str, Any]:
        if target not in self.notes:
            raise HTTPException(status_code=404, detail=f"Note '{target}' not found")
        return {"id": target, **self.notes[target]}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application"""
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 {settings.APP_NAME} starting...")
        config = configure(settings.csrf_options())
        logger.info(f"📋 CSRF configuration: {config.model_dump(by_alias=True)}")
        yield
        logger.info(f"🛑 {settings.APP_NAME} shutting down...")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Session-bound CSRF tokens for state-changing requests",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.add_middleware(SessionMiddleware, secret_key=get_session_secret(settings))

    @app.exception_handler(CsrfError)
    async def csrf_error_handler(request: Request, exc: CsrfError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    app.include_router(create_csrf_router())

    notes = NotesHandler()
    protected_notes = with_csrf_protection(notes)
    app.state.notes = notes

    @app.get("/health")
    async def health():
        return {"status": "ok", "header_name": get_config().header_name}

    @app.get("/notes/{note_id}")
    async def get_note(note_id: str):
        return protected_notes.get(note_id)

    @app.post("/notes/{note_id}")
    async def create_note(note_id: str, request: Request, data: Optional[Dict[str, Any]] = Body(default=None)):
        return await protected_notes.create(note_id, data, request_context(request))

    @app.put("/notes/{note_id}")
    async def replace_note(note_id: str, request: Request, data: Optional[Dict[str, Any]] = Body(default=None)):
        return await protected_notes.replace(note_id, data, request_context(request))

    @app.delete("/notes/{note_id}")
    async def delete_note(note_id: str, request: Request):
        return await protected_notes.remove(note_id, None, request_context(request))

    @app.delete("/notes", dependencies=[Depends(csrf_protect)])
    async def clear_notes():
        count = len(notes.notes)
        notes.notes.clear()
        return {"deleted": count}

    return app


setup_logging()
app = create_app()


def run():
    """Serve the app with uvicorn (PORT env, default 8000)"""
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"🌐 Server listening on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
