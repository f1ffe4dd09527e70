from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from weatherstation.api.deps import CurrentUser, authenticate_user, get_settings
from weatherstation.core.config import Settings
from weatherstation.core.security import grant_scopes, issue_token
from weatherstation.schemas.auth import Token, User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.post("/token", response_model=Token)
def issue_access_token(
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Token:
    user = authenticate_user(
        username=form_data.username, password=form_data.password, settings=settings
    )
    if not user:
        logger.info("Rejected token request for user %r", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    issued = issue_token(
        subject=user.username,
        scopes=grant_scopes(form_data.scopes, user.scopes),
        settings=settings,
    )

    response.headers["Cache-Control"] = "no-store"
    response.headers["Pragma"] = "no-cache"
    return Token(
        access_token=issued.access_token,
        expires_in=issued.expires_in,
        scope=" ".join(issued.scopes),
    )


@router.get("/me", response_model=User)
def read_current_user(user: CurrentUser) -> User:
    return user
