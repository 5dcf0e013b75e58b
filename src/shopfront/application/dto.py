"""Data Transfer Objects — plain containers that cross layer boundaries.

The HTTP schemas and CLI options are translated into these before a use
case runs, so handlers never see framework types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: a new catalog entry as requested by an administrator."""

    name: str
    category: str
    price: float
    quantity: int
    description: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class ProductChanges:
    """Input: a partial product update; ``None`` fields are left alone."""

    name: str | None = None
    description: str | None = None
    image: str | None = None
    category: str | None = None
    price: float | None = None
    quantity: int | None = None
