"""Abstract repository for the User aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopfront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User | None:
        """Return a user by id, or None if not found."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Return the user registered with ``email``, or None."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user in registration order."""

    @abstractmethod
    async def add(self, user: User) -> None:
        """Persist a new user.

        Raises ConflictError if the email is already registered; nothing
        is written in that case.
        """
