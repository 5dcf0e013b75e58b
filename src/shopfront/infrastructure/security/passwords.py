"""bcrypt password hashing via passlib."""

from __future__ import annotations

from passlib.context import CryptContext

from shopfront.application.ports import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = 12) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, plain: str) -> str:
        return self._context.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return self._context.verify(plain, hashed)
        except ValueError:
            # Stored value is not a recognizable hash.
            return False
