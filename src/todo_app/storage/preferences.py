# src/todo_app/storage/preferences.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class PreferencesError(OSError):
    """Preferences file could not be written."""


class PreferencesStore:
    """
    JSON-file key-value store (one flat object: key -> string value).

    Every write replaces the whole file:
    - serialize the full mapping
    - write it to a temporary sibling
    - os.replace() it over the real file

    A missing or corrupt file reads as an empty mapping.
    """

    def __init__(self, path: str | Path = "preferences.json") -> None:
        self._path = Path(path)
        self._values: dict[str, str] = self._read_file()
        logger.info("PreferencesStore ready path=%s keys=%d", self._path, len(self._values))

    @property
    def path(self) -> Path:
        return self._path

    def _read_file(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError, RecursionError):
            logger.warning("Preferences file %s is unreadable; starting empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Preferences file %s is not a JSON object; starting empty.", self._path)
            return {}
        values = {k: v for k, v in data.items() if isinstance(v, str)}
        dropped = sorted(k for k in data if k not in values)
        if dropped:
            logger.warning(
                "Preferences file %s has non-text values for keys %s; they will be dropped on next write.",
                self._path,
                dropped,
            )
        return values

    def _write_file(self) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(self._values, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except (OSError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PreferencesError(f"failed to write preferences to {self._path}: {e}") from e

    # ---- public API ----

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any prior value, and flush to disk."""
        previous = self._values.get(key)
        self._values[key] = value
        try:
            self._write_file()
        except PreferencesError:
            # Keep memory consistent with what is on disk.
            if previous is None:
                self._values.pop(key, None)
            else:
                self._values[key] = previous
            raise
        logger.debug("Preference saved key=%s bytes=%d", key, len(value))

    def remove(self, key: str) -> None:
        if key not in self._values:
            return
        previous = self._values.pop(key)
        try:
            self._write_file()
        except PreferencesError:
            self._values[key] = previous
            raise

    def keys(self) -> list[str]:
        return list(self._values)
