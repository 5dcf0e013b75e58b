"""Signed bearer tokens (HS256 JWT) via python-jose.

Claims: ``sub`` (user id), ``email``, optional ``username``, plus ``iat``
and ``exp``. A token is only accepted if it verifies against the
configured secret, is unexpired and carries string ``sub``/``email``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from shopfront.application.ports import Identity, TokenService
from shopfront.domain.exceptions import AuthenticationError, ConfigurationError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class JwtTokenService(TokenService):

    def __init__(self, secret: str | None, expires_minutes: int = 60) -> None:
        self._secret = secret
        self._expires = timedelta(minutes=expires_minutes)

    def issue(self, subject: str, email: str, username: str | None = None) -> str:
        if not self._secret:
            logger.error("JWT_SECRET is not set; cannot issue tokens")
            raise ConfigurationError("JWT secret not configured")

        now = datetime.now(timezone.utc)
        claims = {"sub": subject, "email": email, "iat": now, "exp": now + self._expires}
        if username is not None:
            claims["username"] = username
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Identity:
        if not self._secret:
            logger.error("JWT_SECRET is not set; rejecting bearer token")
            raise AuthenticationError("Invalid or expired token")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.warning("Rejected bearer token: %s", exc)
            raise AuthenticationError("Invalid or expired token") from exc

        subject = payload.get("sub")
        email = payload.get("email")
        if not isinstance(subject, str) or not isinstance(email, str):
            raise AuthenticationError("Invalid token payload")

        username = payload.get("username")
        return Identity(
            subject=subject,
            email=email,
            username=username if isinstance(username, str) else None,
        )
