"""Runtime settings read from the environment.

Every knob has a default so the API starts with no configuration at all,
except ``JWT_SECRET``: without it no token can be issued or verified.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

# Resolve the data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    users_path: Path | None = None
    products_path: Path | None = None
    carts_path: Path | None = None
    wishlists_path: Path | None = None
    jwt_secret: str | None = None
    jwt_expires_minutes: int = 60
    admin_emails: tuple[str, ...] = ("admin@admin.com",)
    bcrypt_rounds: int = 12
    serialize_writes: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3001
    cors_origins: tuple[str, ...] = field(default=("*",))

    # --- Resolved file locations ----------------------------------------------

    def path_for(self, kind: str) -> Path:
        """Location of the JSON file for ``kind`` (users, products, ...)."""
        override = getattr(self, f"{kind}_path")
        if override is not None:
            return Path(override)
        return Path(self.data_dir) / f"{kind}.json"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        def path(name: str) -> Path | None:
            value = env.get(name)
            return Path(value) if value else None

        return Settings(
            data_dir=path("DATA_DIR") or DEFAULT_DATA_DIR,
            users_path=path("USERS_PATH"),
            products_path=path("PRODUCTS_PATH"),
            carts_path=path("CARTS_PATH"),
            wishlists_path=path("WISHLISTS_PATH"),
            jwt_secret=env.get("JWT_SECRET") or None,
            jwt_expires_minutes=int(env.get("JWT_EXPIRES_MINUTES", "60")),
            admin_emails=_split(env.get("ADMIN_EMAILS", "admin@admin.com")),
            bcrypt_rounds=int(env.get("BCRYPT_ROUNDS", "12")),
            serialize_writes=env.get("SERIALIZE_WRITES", "").strip().lower() in _TRUTHY,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            host=env.get("HOST", "127.0.0.1"),
            port=int(env.get("PORT", "3001")),
            cors_origins=_split(env.get("CORS_ORIGINS", "*")),
        )


def _split(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())
