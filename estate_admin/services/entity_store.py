"""Keyed-collection persistence over a pluggable key-value backend.

Every collection lives under one fixed key as a JSON array of records.
Repositories read the whole collection, mutate it in memory and write the
whole collection back. There is no locking: two writers racing on the same
key resolve as last-write-wins. A transactional backend can be swapped in
behind ``KeyValueBackend`` without touching repository code.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from estate_admin.services.supabase_client import (
    delete_kv_payload,
    get_kv_payload,
    upsert_kv_payload,
)
from estate_admin.utils.errors import StoreError
from estate_admin.utils.logging import get_structured_logger
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class KeyValueBackend(ABC):
    """Durable string payloads addressed by key."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the payload for key, or None if it was never written."""

    @abstractmethod
    async def set(self, key: str, payload: str) -> None:
        """Overwrite the payload for key."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove key if present."""


class InMemoryBackend(KeyValueBackend):
    """Process-local backend for tests and throwaway runs."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    async def set(self, key: str, payload: str) -> None:
        self.data[key] = payload

    async def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileBackend(KeyValueBackend):
    """One ``<key>.json`` file per key inside a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    async def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Failed to read {path}: {e}")

    async def set(self, key: str, payload: str) -> None:
        """Write to a temporary file beside the target, then swap it in."""
        path = self._path(key)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.directory, prefix=f".{key}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Failed to write {path}: {e}")

    async def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            raise StoreError(f"Failed to delete {key}: {e}")


class SupabaseBackend(KeyValueBackend):
    """Rows of a ``key``/``value`` table in Supabase."""

    def __init__(self, table: str = StoreConfig.STORE_TABLE):
        self.table = table

    async def get(self, key: str) -> Optional[str]:
        return await get_kv_payload(self.table, key)

    async def set(self, key: str, payload: str) -> None:
        await upsert_kv_payload(self.table, key, payload)

    async def delete(self, key: str) -> None:
        await delete_kv_payload(self.table, key)


def build_backend(kind: Optional[str] = None) -> KeyValueBackend:
    """Create the backend named by STORE_BACKEND (or ``kind``)."""
    kind = (kind or StoreConfig.STORE_BACKEND).lower()
    if kind == "memory":
        return InMemoryBackend()
    if kind == "file":
        return JsonFileBackend(StoreConfig.STORE_DIR)
    if kind == "supabase":
        return SupabaseBackend(StoreConfig.STORE_TABLE)
    raise StoreError(f"Unknown store backend: {kind}")


class EntityStore(Generic[ModelT]):
    """Persistence for one entity collection with one-time seeding."""

    def __init__(
        self,
        backend: KeyValueBackend,
        key: str,
        model: type[ModelT],
        seed: Callable[[], list[ModelT]],
    ):
        self.backend = backend
        self.key = key
        self.model = model
        self.seed = seed
        self.log = logger.bind(store_key=key)

    async def load(self) -> list[ModelT]:
        """
        Load the collection.

        Seeds and persists the default collection when the key is missing.
        A payload that cannot be decoded is logged and replaced by the seed.
        """
        payload = await self.backend.get(self.key)
        if payload is None:
            self.log.info("Seeding empty collection")
            return await self.reseed()

        try:
            return self._decode(payload)
        except (ValueError, TypeError, ValidationError) as e:
            self.log.warning("Corrupted collection payload, reseeding", error=str(e))
            return await self.reseed()

    async def save(self, records: list[ModelT]) -> None:
        """Overwrite the stored collection."""
        payload = json.dumps([record.model_dump(mode="json") for record in records])
        await self.backend.set(self.key, payload)
        self.log.debug("Collection saved", record_count=len(records))

    async def reseed(self) -> list[ModelT]:
        """Replace the stored collection with the seed collection."""
        records = self.seed()
        await self.save(records)
        return records

    def _decode(self, payload: str) -> list[ModelT]:
        raw = json.loads(payload)
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
        # Validation revives ISO date strings into datetimes
        return [self.model.model_validate(item) for item in raw]


class SnapshotStore(Generic[ModelT]):
    """Persistence for a single document, same recovery rules as EntityStore."""

    def __init__(
        self,
        backend: KeyValueBackend,
        key: str,
        model: type[ModelT],
        default: Callable[[], ModelT],
    ):
        self.backend = backend
        self.key = key
        self.model = model
        self.default = default
        self.log = logger.bind(store_key=key)

    async def load(self) -> ModelT:
        payload = await self.backend.get(self.key)
        if payload is not None:
            try:
                return self.model.model_validate_json(payload)
            except (ValueError, ValidationError) as e:
                self.log.warning("Corrupted snapshot payload, resetting", error=str(e))
        snapshot = self.default()
        await self.save(snapshot)
        return snapshot

    async def save(self, snapshot: ModelT) -> None:
        await self.backend.set(self.key, snapshot.model_dump_json())
