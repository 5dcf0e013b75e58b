"""Whole-file JSON storage for one homogeneous collection.

Each store owns a single file holding a JSON array. ``load`` reads the
whole array and ``replace`` rewrites it; nothing is cached, so every
call sees the file as it is on disk. File I/O runs in a worker thread,
which makes each call an await point where other requests can run.

The store does no locking. Callers that load, mutate and replace are
responsible for whatever ordering they need.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from shopfront.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonRecordStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- Async interface ------------------------------------------------------

    async def load(self) -> list[dict]:
        """Return every record in persisted order.

        A missing file is created as an empty array first.
        """
        return await asyncio.to_thread(self.load_sync)

    async def replace(self, records: list[dict]) -> None:
        """Overwrite the collection with ``records`` as one atomic unit."""
        await asyncio.to_thread(self.replace_sync, records)

    # --- Blocking implementation ----------------------------------------------

    def load_sync(self) -> list[dict]:
        self._ensure_file()
        try:
            raw = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

        # A file caught between creation and its first write reads as empty.
        if not raw.strip():
            return []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Malformed JSON in {self._file_path}: {exc}") from exc

        if not isinstance(records, list):
            raise StorageError(f"{self._file_path} does not hold a JSON array")

        logger.debug("Loaded %d records from %s", len(records), self._file_path)
        return records

    def replace_sync(self, records: list[dict]) -> None:
        self._ensure_file()
        try:
            payload = json.dumps(records, indent=2, allow_nan=False) + "\n"
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialize records for {self._file_path}: {exc}") from exc

        # Write next to the target and rename over it: readers see either
        # the old array or the new one, never a truncated file.
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._file_path.name}.", suffix=".tmp", dir=self._file_path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            _discard(tmp_name)
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

        logger.debug("Wrote %d records to %s", len(records), self._file_path)

    # --- File helpers ---------------------------------------------------------

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        # Exclusive create: a concurrent first write is never clobbered.
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._file_path, "x", encoding="utf-8") as fh:
                fh.write("[]")
        except FileExistsError:
            return
        except OSError as exc:
            raise StorageError(f"Cannot initialize {self._file_path}: {exc}") from exc
        logger.debug("Initialized empty collection at %s", self._file_path)


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
