"""Application service: Issue Token (login) use case."""

from __future__ import annotations

import logging

from shopfront.application.ports import PasswordHasher, TokenService
from shopfront.domain.exceptions import AuthenticationError, ValidationError
from shopfront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class IssueTokenHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._tokens = tokens

    async def handle(self, email: str, password: str) -> str:
        """Check credentials and return a signed bearer token.

        Unknown email and wrong password fail identically so the
        response does not reveal which accounts exist.
        """
        if not email or not password:
            raise ValidationError("Missing credentials")

        user = await self._user_repo.get_by_email(email.strip())
        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.warning("Rejected login attempt")
            raise AuthenticationError("Invalid credentials")

        token = self._tokens.issue(user.id, user.email, user.username)
        logger.info("Issued token for user %s", user.id)
        return token
