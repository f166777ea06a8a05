from __future__ import annotations

"""Keyed persistence for saved palettes.

All records live as one JSON array under a single key of a
:class:`KeyValueBackend`. Every mutation reads the whole list, changes it
and writes it back; an in-process lock serializes those sequences.

Storage layout (:class:`JsonFileBackend`): ``<state_dir>/<key>.json``.
The directory defaults to ``PALGEN_STORE_DIR``, then the config value
``palette_store.state_dir``, then ``./data/palettes``.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from util.paths import ensure_palette_store_dir
from util.utils import config_section

from .palette import Palette


logger = logging.getLogger(__name__)

STORAGE_KEY = "savedPalettes"


class KeyValueBackend(Protocol):
    """Minimal string key-value store."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryBackend:
    """In-process backend, mainly for tests and ephemeral sessions."""

    def __init__(self, items: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileBackend:
    """Durable backend storing each key as ``<directory>/<key>.json``."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self._directory = Path(directory) if directory is not None else None

    @property
    def directory(self) -> Path:
        if self._directory is None:
            self._directory = ensure_palette_store_dir()
        return self._directory

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Atomic replace via a sibling temp file.
        fd, tmp = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=str(path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


def _default_key() -> str:
    key = config_section("palette_store").get("key")
    if isinstance(key, str) and key.strip():
        return key.strip()
    return STORAGE_KEY


class PaletteStore:
    """Save, list and delete palettes kept under one storage key."""

    def __init__(
        self,
        backend: Optional[KeyValueBackend] = None,
        *,
        key: Optional[str] = None,
    ) -> None:
        self.backend: KeyValueBackend = backend if backend is not None else JsonFileBackend()
        self.key = key or _default_key()
        self._lock = threading.RLock()

    def save(self, palette: Palette) -> None:
        """Append ``palette`` to the stored list."""
        with self._lock:
            records = self._read_records()
            records.append(palette.to_record())
            self._write(records)
            logger.debug("saved palette %s (%d stored)", palette.id, len(records))

    def list(self) -> List[Palette]:
        """Return all stored palettes in save order.

        A missing key yields an empty list. An unreadable or undecodable blob
        is logged and also yields an empty list. Individual records that fail
        validation are logged and skipped; they stay in storage untouched.
        """
        palettes: List[Palette] = []
        for index, item in enumerate(self._read_records()):
            try:
                palettes.append(Palette.from_record(item))
            except ValueError as exc:
                logger.error(
                    "Error parsing saved palette #%d under %r: %s", index, self.key, exc
                )
        return palettes

    def delete(self, palette_id: str) -> None:
        """Remove every palette whose id equals ``palette_id``."""
        with self._lock:
            records = self._read_records()
            remaining = [r for r in records if not _has_id(r, palette_id)]
            self._write(remaining)
            logger.debug(
                "deleted palette %s (%d removed)", palette_id, len(records) - len(remaining)
            )

    def clear(self) -> None:
        """Remove the storage key entirely."""
        with self._lock:
            self.backend.remove_item(self.key)

    def _read_records(self) -> List[Any]:
        """Return the raw stored records, or ``[]`` when the blob is unusable."""
        try:
            raw = self.backend.get_item(self.key)
            if not raw:
                return []
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return data
        except (OSError, ValueError) as exc:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.error("Error parsing saved palettes under %r: %s", self.key, exc)
            return []

    def _write(self, records: List[Any]) -> None:
        payload = json.dumps(records, ensure_ascii=False)
        self.backend.set_item(self.key, payload)


def _has_id(record: Any, palette_id: str) -> bool:
    return isinstance(record, dict) and record.get("id") == palette_id


__all__ = [
    "STORAGE_KEY",
    "KeyValueBackend",
    "MemoryBackend",
    "JsonFileBackend",
    "PaletteStore",
]
