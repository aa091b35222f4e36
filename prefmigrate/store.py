"""Preference stores — the key-value mappings that upgrades operate on.

Upgrades only ever see the `PreferenceStore` protocol. Two implementations
ship with the package: an in-memory store and a JSON file store that
rewrites its file on every mutation, so a write is durable once the call
returns.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, TypeAlias

from prefmigrate.exceptions import PreferenceStoreError, PreferenceTypeError

logger = logging.getLogger(__name__)

PreferenceValue: TypeAlias = int | bool | str

_MISSING = object()


class PreferenceStore(Protocol):
    def get_int(self, key: str, default: int) -> int: ...
    def get_bool(self, key: str, default: bool) -> bool: ...
    def get_str(self, key: str, default: str) -> str: ...
    def set_int(self, key: str, value: int) -> None: ...
    def set_bool(self, key: str, value: bool) -> None: ...
    def set_str(self, key: str, value: str) -> None: ...
    def contains(self, key: str) -> bool: ...
    def remove(self, key: str) -> None: ...
    def clear(self) -> None: ...


class MemoryPreferenceStore:
    """Dict-backed preference store.

    Typed getters are strict: a bool is never read back as an int, and a
    value of the wrong type raises PreferenceTypeError instead of being
    coerced.
    """

    def __init__(self, values: dict[str, PreferenceValue] | None = None) -> None:
        self._values: dict[str, PreferenceValue] = dict(values or {})

    def _get(self, key: str, default: PreferenceValue, expected: type) -> PreferenceValue:
        value = self._values.get(key, _MISSING)
        if value is _MISSING:
            return default
        if type(value) is not expected:
            raise PreferenceTypeError(
                f"Preference '{key}' holds {type(value).__name__}, "
                f"not {expected.__name__}"
            )
        return value

    def get_int(self, key: str, default: int) -> int:
        return self._get(key, default, int)

    def get_bool(self, key: str, default: bool) -> bool:
        return self._get(key, default, bool)

    def get_str(self, key: str, default: str) -> str:
        return self._get(key, default, str)

    def set_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)
        self._commit()

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = bool(value)
        self._commit()

    def set_str(self, key: str, value: str) -> None:
        self._values[key] = str(value)
        self._commit()

    def contains(self, key: str) -> bool:
        return key in self._values

    def remove(self, key: str) -> None:
        if self._values.pop(key, _MISSING) is not _MISSING:
            self._commit()

    def clear(self) -> None:
        self._values.clear()
        self._commit()

    def as_dict(self) -> dict[str, PreferenceValue]:
        return dict(self._values)

    def _commit(self) -> None:
        """Called after every mutation. Persistent subclasses write here."""


class JsonFilePreferenceStore(MemoryPreferenceStore):
    """Preference store persisted as a single JSON object.

    A missing file is an empty store. Each mutation writes a temporary
    sibling file and replaces the original with it.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        super().__init__(self._load())

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, PreferenceValue]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PreferenceStoreError(
                f"Cannot read preferences from {self._path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise PreferenceStoreError(
                f"Preferences file {self._path} does not hold a JSON object"
            )
        for key, value in data.items():
            if not isinstance(value, (int, bool, str)):
                raise PreferenceStoreError(
                    f"Preference '{key}' in {self._path} is not a scalar value"
                )
        logger.debug("Loaded %d preferences from %s", len(data), self._path)
        return data

    def _commit(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(
            json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8"
        )
        tmp.replace(self._path)
