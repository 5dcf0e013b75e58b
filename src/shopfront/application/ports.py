"""Identity & access collaborators consumed by the use cases.

The application layer only depends on these interfaces; hashing, token
signing and the admin rule are wired in by the composition root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shopfront.domain.exceptions import PermissionDeniedError


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as decoded from a bearer token."""

    subject: str
    email: str
    username: str | None = None


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, plain: str) -> str:
        """Return a salted one-way hash of ``plain``."""

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        """Return True iff ``plain`` matches ``hashed``."""


class TokenService(ABC):

    @abstractmethod
    def issue(self, subject: str, email: str, username: str | None = None) -> str:
        """Sign a time-bounded token for the given identity.

        Raises ConfigurationError if no signing secret is configured.
        """

    @abstractmethod
    def verify(self, token: str) -> Identity:
        """Decode a token.

        Raises AuthenticationError if the token is malformed, expired,
        forged, lacks the expected claims, or cannot be checked because
        no secret is configured.
        """


class AdminPolicy(ABC):

    @abstractmethod
    def is_admin(self, identity: Identity) -> bool:
        """Return True iff ``identity`` may manage the catalog."""

    def require_admin(self, identity: Identity) -> None:
        if not self.is_admin(identity):
            raise PermissionDeniedError("Forbidden")
