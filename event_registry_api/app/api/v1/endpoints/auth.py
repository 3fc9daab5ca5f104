"""
Login endpoint.

Exchanges operator credentials for a signed token.  The token must be
sent in the ``Authorization`` header of every other request.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from pydantic import ValidationError as PydanticValidationError

from event_registry_api.app.core.db import Database, get_db
from event_registry_api.app.core.errors import Unauthorized
from event_registry_api.app.core.security import create_access_token
from event_registry_api.app.schemas.user import LoginRequest, TokenResponse
from event_registry_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    request: Request,
    payload: Any = Body(None),
    db: Database = Depends(get_db),
) -> TokenResponse:
    """Authenticate an operator and return a token.

    The token embeds ``{"username": ...}`` and expires after
    ``ACCESS_TOKEN_EXPIRE_MINUTES``.  A missing body or credentials of
    the wrong shape are rejected like a wrong password.
    """
    try:
        credentials = LoginRequest.model_validate(payload or {})
    except PydanticValidationError as exc:
        raise Unauthorized("Invalid credentials") from exc
    user = await UserService.authenticate(db, credentials.username, credentials.password)
    if not user:
        raise Unauthorized("Invalid credentials")
    app_settings = request.app.state.settings
    token = create_access_token(
        {"username": user.username},
        expires_delta=app_settings.access_token_expire_minutes * 60,
        secret_key=app_settings.secret_key,
    )
    return TokenResponse(token=token)
