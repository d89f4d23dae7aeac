"""CRUD use cases for collection resources and the profile singleton."""

from __future__ import annotations

import logging
from typing import Callable

from vitaapp.core.utils import new_record_id
from vitaapp.domain.resources import PROFILE_LABEL, ResourceSpec
from vitaapp.repositories.json_storage import JsonFileStore

logger = logging.getLogger(__name__)


class VitaError(Exception):
    """Base class for errors surfaced to API clients as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class RecordNotFoundError(VitaError):
    status_code = 404


class PersistenceError(VitaError):
    status_code = 500


def _find_index(records: list[dict], record_id: str) -> int:
    for idx, item in enumerate(records):
        if isinstance(item, dict) and item.get("id") == record_id:
            return idx
    return -1


class ResourceService:
    """
    Read-modify-write over one resource file.

    Every call starts from a fresh read; mutations hold the store lock until
    the whole array has been written back.
    """

    def __init__(
        self,
        spec: ResourceSpec,
        store: JsonFileStore,
        id_factory: Callable[[], str] = new_record_id,
    ) -> None:
        self.spec = spec
        self.store = store
        self._id_factory = id_factory

    def list(self) -> list[dict]:
        return self.store.read_array()

    def create(self, body: dict) -> dict:
        with self.store.lock:
            records = self.store.read_array()
            record = {**body, "id": self._id_factory()}
            records.append(record)
            if not self.store.write(records):
                raise PersistenceError(self.spec.failure_message("salvataggio"))
        logger.debug("%s: creato %s", self.spec.key, record["id"])
        return record

    def update(self, record_id: str, body: dict) -> dict:
        with self.store.lock:
            records = self.store.read_array()
            idx = _find_index(records, record_id)
            if idx == -1:
                raise RecordNotFoundError(self.spec.not_found_message)
            # id is immutable even when the body carries one
            records[idx] = {**records[idx], **body, "id": records[idx]["id"]}
            if not self.store.write(records):
                raise PersistenceError(self.spec.failure_message("aggiornamento"))
        logger.debug("%s: aggiornato %s", self.spec.key, record_id)
        return records[idx]

    def delete(self, record_id: str) -> dict:
        with self.store.lock:
            records = self.store.read_array()
            idx = _find_index(records, record_id)
            if idx == -1:
                raise RecordNotFoundError(self.spec.not_found_message)
            deleted = records[idx]
            remaining = [
                item for item in records
                if not (isinstance(item, dict) and item.get("id") == record_id)
            ]
            if not self.store.write(remaining):
                raise PersistenceError(self.spec.failure_message("eliminazione"))
        logger.debug("%s: eliminato %s", self.spec.key, record_id)
        return deleted


class ProfileService:
    """Singleton profile: one JSON object, shallow-merged on update."""

    def __init__(self, store: JsonFileStore) -> None:
        self.store = store

    def get(self) -> dict:
        return self.store.read_singleton()

    def update(self, body: dict) -> dict:
        with self.store.lock:
            profile = {**self.store.read_singleton(), **body}
            if not self.store.write(profile):
                raise PersistenceError(f"Errore aggiornamento {PROFILE_LABEL.lower()}")
        return profile
