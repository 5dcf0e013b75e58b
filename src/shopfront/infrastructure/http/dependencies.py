"""FastAPI dependencies: container lookup and bearer-token checks."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from shopfront.application.ports import Identity
from shopfront.domain.exceptions import AuthenticationError
from shopfront.infrastructure.bootstrap import Container

BEARER_PREFIX = "Bearer "


def get_container(request: Request) -> Container:
    return request.app.state.container


def current_identity(
    authorization: Optional[str] = Header(default=None),
    container: Container = Depends(get_container),
) -> Identity:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Missing or invalid Authorization header")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError("Missing or invalid Authorization header")
    return container.tokens.verify(token)


def require_admin(
    identity: Identity = Depends(current_identity),
    container: Container = Depends(get_container),
) -> Identity:
    container.admin_policy.require_admin(identity)
    return identity
