"""FastAPI application for the reminder notes local JSON API."""

import logging
import secrets
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Security
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .. import __version__
from ..tools import TOOLS, handle_tool_call

logger = logging.getLogger(__name__)


def create_app(runtime: Any, token: str | None = None, enable_cors: bool = False) -> FastAPI:
    """
    Create FastAPI application with runtime injected.

    Args:
        runtime: Runtime instance with notebook and config
        token: Bearer token for authentication (None to disable auth)
        enable_cors: Enable CORS middleware

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Reminder Notes API",
        description="Local JSON API for structured reminder notes",
        version=__version__,
        docs_url="/docs" if token is None else None,
        redoc_url="/redoc" if token is None else None,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if token:
        security_scheme = HTTPBearer(auto_error=False)

        async def verify_token(
            credentials: HTTPAuthorizationCredentials | None = Security(security_scheme),  # noqa: B008
        ) -> None:
            """Verify bearer token."""
            if credentials is None or credentials.credentials != token:
                raise HTTPException(status_code=401, detail="Invalid or missing token")
    else:

        async def verify_token() -> None:
            """No-op when auth is disabled."""
            return None

    @app.get("/health")
    async def health(auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    @app.get("/tools")
    async def list_tools(auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Available tool definitions."""
        return {"tools": TOOLS}

    @app.post("/tools/call")
    def call_tool(
        payload: dict[str, Any] = Body(...),  # noqa: B008
        auth: None = Depends(verify_token),
    ) -> dict[str, Any]:
        """Dispatch a tool call; tool failures come back with isError set."""
        name = payload.get("name")
        if not isinstance(name, str):
            raise HTTPException(status_code=422, detail="Tool name must be a string")
        arguments = payload.get("arguments") or {}
        if not isinstance(arguments, dict):
            raise HTTPException(status_code=422, detail="Tool arguments must be an object")

        logger.info("Tool call %s", name)
        return handle_tool_call(name, arguments, runtime).to_dict()

    @app.get("/reminders/{reminder_id}/notes")
    def get_notes(reminder_id: str, auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Get the decoded notes of a reminder."""
        reminder = runtime.notebook.get(reminder_id)
        if reminder is None:
            raise HTTPException(status_code=404, detail=f"Reminder {reminder_id} not found")

        components = runtime.notebook.codec.decode(reminder.notes)
        return {
            "id": reminder.id,
            "title": reminder.title,
            "raw": reminder.notes or "",
            "notes": components.to_dict(),
        }

    return app


def generate_token() -> str:
    """Generate a random bearer token."""
    return secrets.token_urlsafe(32)
