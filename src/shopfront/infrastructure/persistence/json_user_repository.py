"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from shopfront.domain.exceptions import ConflictError
from shopfront.domain.model.user import User
from shopfront.domain.repository.user_repository import UserRepository
from shopfront.infrastructure.persistence.json_keyed_repository import JsonKeyedRepository


class JsonUserRepository(JsonKeyedRepository[User], UserRepository):

    not_found_message = "User not found"

    # --- UserRepository interface ---------------------------------------------

    async def get_by_id(self, user_id: str) -> User | None:
        return await self._find(user_id)

    async def get_by_email(self, email: str) -> User | None:
        for raw in await self._store.load():
            if raw["email"] == email:
                return self._to_domain(raw)
        return None

    async def list_all(self) -> list[User]:
        return await self._list()

    async def add(self, user: User) -> None:
        def build(records: list[dict]) -> User:
            if any(raw["email"] == user.email for raw in records):
                raise ConflictError("Email already exists")
            return user

        await self._append(build)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _key_of(raw: dict) -> str:
        return raw["id"]

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "firstname": user.firstname,
            "email": user.email,
            "passwordHash": user.password_hash,
            "createdAt": user.created_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            firstname=raw["firstname"],
            email=raw["email"],
            password_hash=raw["passwordHash"],
            created_at=raw["createdAt"],
        )
