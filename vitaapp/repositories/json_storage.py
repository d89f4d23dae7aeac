"""
JSON-file persistence adapter.

Each resource lives in its own file holding one JSON value (an array for
collections, an object for the profile). Every read re-parses the file and
every write replaces it whole. Failures never escape: reads degrade to the
empty default and writes report False, both logged with the file path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import logging
import threading

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Read/write one JSON document stored at ``path``."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        # Held by services across read-modify-write; reads alone don't take it.
        self.lock = threading.RLock()

    def _load(self, default: Any) -> Any:
        if not self.path.exists():
            return default
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Errore lettura file %s: %s", self.path, exc)
            return default
        if not raw.strip():
            return default
        try:
            return json.loads(raw)
        except ValueError as exc:
            logger.error("Errore lettura file %s: %s", self.path, exc)
            return default

    def read_array(self) -> list[dict]:
        data = self._load([])
        if not isinstance(data, list):
            logger.warning("File %s non contiene un array JSON; uso []", self.path)
            return []
        return data

    def read_singleton(self) -> dict:
        data = self._load({})
        if not isinstance(data, dict):
            logger.warning("File %s non contiene un oggetto JSON; uso {}", self.path)
            return {}
        return data

    def write(self, value: Any) -> bool:
        try:
            payload = json.dumps(value, ensure_ascii=False, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Errore scrittura file %s: %s", self.path, exc)
            return False
        return True
