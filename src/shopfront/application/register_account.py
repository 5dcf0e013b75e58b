"""Application service: Register Account use case."""

from __future__ import annotations

import logging
from typing import Callable

from shopfront.application.ports import PasswordHasher
from shopfront.domain.exceptions import ConflictError, ValidationError
from shopfront.domain.model.user import User
from shopfront.domain.model.value_objects import now_ms
from shopfront.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RegisterAccountHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._clock = clock

    async def handle(self, username: str, firstname: str, email: str, password: str) -> User:
        """Create a new account.

        The early email lookup only avoids hashing for a doomed request;
        the repository re-checks uniqueness when it writes.
        """
        if not all(v and v.strip() for v in (username, firstname, email)) or not password:
            raise ValidationError("Missing required fields")

        if await self._user_repo.get_by_email(email.strip()) is not None:
            raise ConflictError("Email already exists")

        user = User.register(
            username=username,
            firstname=firstname,
            email=email,
            password_hash=self._hasher.hash(password),
            at=self._clock(),
        )
        await self._user_repo.add(user)
        logger.info("Account created for user %s", user.id)
        return user
