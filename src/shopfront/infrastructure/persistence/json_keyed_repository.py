"""Keyed read-modify-write operations shared by the JSON repositories.

Every mutation follows the same cycle against a JsonRecordStore:

    records = await store.load()     # read the whole file
    ...locate / create, mutate...    # in memory
    await store.replace(records)     # write the whole file

Both awaits yield to the event loop. Without a guard, two overlapping
cycles on the same collection both start from the same snapshot and the
one that finishes last overwrites the other: a lost update. This holds
for different keys too, since the unit of storage is the whole file.

Passing an ``asyncio.Lock`` as ``guard`` serializes the cycles of that
repository. All repositories for one file must then share the lock; the
composition root creates one repository per file.
"""

from __future__ import annotations

import asyncio
import contextlib
from abc import ABC, abstractmethod
from typing import Callable, Generic, Hashable, TypeVar

from shopfront.domain.exceptions import EntityNotFoundError
from shopfront.infrastructure.persistence.json_record_store import JsonRecordStore

T = TypeVar("T")


class JsonKeyedRepository(ABC, Generic[T]):

    not_found_message = "Record not found"

    def __init__(self, store: JsonRecordStore, guard: asyncio.Lock | None = None) -> None:
        self._store = store
        self._guard = guard

    # --- Mapping hooks --------------------------------------------------------

    @staticmethod
    @abstractmethod
    def _key_of(raw: dict) -> Hashable:
        """Extract the identifying field from a persisted record."""

    @staticmethod
    @abstractmethod
    def _to_raw(entity: T) -> dict:
        """Serialize an entity to its persisted shape."""

    @staticmethod
    @abstractmethod
    def _to_domain(raw: dict) -> T:
        """Rebuild an entity from its persisted shape."""

    def _new(self, key: Hashable) -> T:
        """Default entity for a key seen for the first time."""
        raise EntityNotFoundError(self.not_found_message)

    # --- Keyed operations -----------------------------------------------------

    async def _find(self, key: Hashable) -> T | None:
        for raw in await self._store.load():
            if self._key_of(raw) == key:
                return self._to_domain(raw)
        return None

    async def _list(self) -> list[T]:
        return [self._to_domain(raw) for raw in await self._store.load()]

    async def _upsert(self, key: Hashable, mutator: Callable[[T], None]) -> T:
        """Locate (or create via ``_new``) the record for ``key``, mutate it
        in place and persist the full collection.

        Not atomic across concurrent calls unless a guard is configured.
        If ``mutator`` raises, nothing is written.
        """
        async with self._cycle():
            records = await self._store.load()
            index = self._index_of(records, key)
            if index is None:
                entity = self._new(key)
                mutator(entity)
                records.append(self._to_raw(entity))
            else:
                entity = self._to_domain(records[index])
                mutator(entity)
                records[index] = self._to_raw(entity)
            await self._store.replace(records)
            return entity

    async def _append(self, build: Callable[[list[dict]], T]) -> T:
        """Build a new entity from the current snapshot and append it."""
        async with self._cycle():
            records = await self._store.load()
            entity = build(records)
            records.append(self._to_raw(entity))
            await self._store.replace(records)
            return entity

    async def _remove(self, key: Hashable) -> bool:
        async with self._cycle():
            records = await self._store.load()
            index = self._index_of(records, key)
            if index is None:
                return False
            del records[index]
            await self._store.replace(records)
            return True

    async def _rewrite_each(self, mutator: Callable[[T], bool]) -> int:
        """Apply ``mutator`` to every entity; persist only if one changed."""
        async with self._cycle():
            records = await self._store.load()
            changed = 0
            for i, raw in enumerate(records):
                entity = self._to_domain(raw)
                if mutator(entity):
                    records[i] = self._to_raw(entity)
                    changed += 1
            if changed:
                await self._store.replace(records)
            return changed

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, records: list[dict], key: Hashable) -> int | None:
        for i, raw in enumerate(records):
            if self._key_of(raw) == key:
                return i
        return None

    def _cycle(self):
        if self._guard is None:
            return contextlib.nullcontext()
        return self._guard
