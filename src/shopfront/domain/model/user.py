"""User aggregate.

Users are created once through account registration and never deleted.
The email is the natural key used at login; uniqueness is checked by the
repository when the user is written.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from shopfront.domain.exceptions import ValidationError
from shopfront.domain.model.value_objects import now_ms


@dataclass
class User:

    id: str
    username: str
    firstname: str
    email: str
    password_hash: str
    created_at: int

    @staticmethod
    def register(
        username: str,
        firstname: str,
        email: str,
        password_hash: str,
        at: int | None = None,
    ) -> User:
        """Build a brand-new user with a random id."""
        for label, value in (
            ("username", username),
            ("firstname", firstname),
            ("email", email),
        ):
            if not value or not value.strip():
                raise ValidationError(f"User {label} is required")
        if not password_hash:
            raise ValidationError("User password hash is required")

        return User(
            id=str(uuid.uuid4()),
            username=username.strip(),
            firstname=firstname.strip(),
            email=email.strip(),
            password_hash=password_hash,
            created_at=now_ms() if at is None else at,
        )
