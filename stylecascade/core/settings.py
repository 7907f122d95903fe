"""Settings stores backing the override/base cascade.

A store answers ``get_string`` and ``get_string_list`` lookups by
(section, key). Two on-disk formats are understood:

- keyfiles (``filetypes.<name>``), INI style with ``[styling]``,
  ``[keywords]`` and ``[settings]`` groups; list values separated by ``;``
  or ``,``
- JSON documents (``filetypes.<name>.json``) holding the same groups as
  objects, list values either as arrays or as separated strings; an array
  read as a plain string (keyword lists) is joined with spaces

Unreadable or unparsable files are logged and yield an empty store, so a
broken file degrades to the next tier of the cascade instead of failing.
"""

from __future__ import annotations

import configparser
import json
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol, Union

from ..logging import get_logger

logger = get_logger(__name__)


SETTINGS_DIR = Path.home() / ".config" / "stylecascade"
USER_FILEDEFS_DIR = SETTINGS_DIR / "filedefs"
SYSTEM_FILEDEFS_DIR = Path(sys.prefix) / "share" / "stylecascade" / "filedefs"

_LIST_SEPARATOR = re.compile(r'[;,]')


class SettingsStore(Protocol):
    """Read-only (section, key) lookup."""

    def get_string(self, section: str, key: str) -> Optional[str]:
        ...

    def get_string_list(self, section: str, key: str) -> Optional[list[str]]:
        ...


def split_list(text: str) -> list[str]:
    """Split a keyfile list value. A trailing separator adds no element."""
    parts = [part.strip() for part in _LIST_SEPARATOR.split(text)]
    if parts and parts[-1] == '':
        parts.pop()
    return parts


class MappingStore:
    """Settings store over nested mappings: ``{section: {key: value}}``.

    Values may be strings or sequences of strings.
    """

    def __init__(self, data: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self._data: dict[str, dict[str, Any]] = {
            str(section): dict(values)
            for section, values in (data or {}).items()
            if isinstance(values, Mapping)
        }

    def _raw(self, section: str, key: str) -> Any:
        return self._data.get(section, {}).get(key)

    def get_string(self, section: str, key: str) -> Optional[str]:
        value = self._raw(section, key)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return ' '.join(str(item).strip() for item in value)
        return str(value)

    def get_string_list(self, section: str, key: str) -> Optional[list[str]]:
        value = self._raw(section, key)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value]
        return split_list(str(value))

    def sections(self) -> list[str]:
        return list(self._data)

    def is_empty(self) -> bool:
        return not any(self._data.values())

    def __repr__(self) -> str:
        return f"MappingStore(sections={self.sections()})"


def load_keyfile(path: Union[str, Path]) -> MappingStore:
    """Load an INI style keyfile. Missing or broken files give an empty store."""
    path = Path(path)
    if not path.exists():
        return MappingStore()

    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # keys are case sensitive
    try:
        parser.read_string(path.read_text(encoding="utf-8"), source=str(path))
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return MappingStore()

    data = {section: dict(parser.items(section)) for section in parser.sections()}
    logger.debug(f"Loaded keyfile {path} ({len(data)} sections)")
    return MappingStore(data)


def load_json(path: Union[str, Path]) -> MappingStore:
    """Load a JSON settings document. Missing or broken files give an empty store."""
    path = Path(path)
    if not path.exists():
        return MappingStore()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable settings file {path}: {e}")
        return MappingStore()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {path}: top level is not an object")
        return MappingStore()
    return MappingStore(data)


def load_store(path: Union[str, Path]) -> MappingStore:
    """Pick the loader from the file suffix."""
    path = Path(path)
    if path.suffix == ".json":
        return load_json(path)
    return load_keyfile(path)


class ConfigSource(Protocol):
    """Hands out the (override, base) store pair for a config name."""

    def stores_for(self, config_name: str) -> tuple[Optional[SettingsStore], SettingsStore]:
        ...


@dataclass(frozen=True)
class ConfigPaths:
    """Where the base (system) and override (user) filedefs live."""

    system_dir: Path = SYSTEM_FILEDEFS_DIR
    user_dir: Optional[Path] = USER_FILEDEFS_DIR

    def filenames(self, config_name: str) -> list[str]:
        base = f"filetypes.{config_name}"
        return [f"{base}.json", base]


class FiletypeConfigLoader:
    """ConfigSource reading ``filetypes.<name>`` files from ConfigPaths.

    When the user directory does not exist the override store is None,
    which makes the cascade skip straight to compiled defaults.
    """

    def __init__(self, paths: Optional[ConfigPaths] = None):
        self.paths = paths or ConfigPaths()

    def _load_from(self, directory: Path, config_name: str) -> MappingStore:
        for name in self.paths.filenames(config_name):
            candidate = directory / name
            if candidate.is_file():
                return load_store(candidate)
        return MappingStore()

    def stores_for(self, config_name: str) -> tuple[Optional[MappingStore], MappingStore]:
        base = self._load_from(self.paths.system_dir, config_name)

        user_dir = self.paths.user_dir
        if user_dir is None or not user_dir.is_dir():
            logger.debug(f"No user config directory, {config_name} uses base and defaults")
            return None, base

        return self._load_from(user_dir, config_name), base


@dataclass
class StaticConfigSource:
    """In-memory ConfigSource, keyed by config name.

    Names without an entry get an empty base store and, unless
    ``has_user_dir`` is False, an empty override store.
    """

    base: dict[str, SettingsStore] = field(default_factory=dict)
    override: dict[str, SettingsStore] = field(default_factory=dict)
    has_user_dir: bool = True

    def stores_for(self, config_name: str) -> tuple[Optional[SettingsStore], SettingsStore]:
        base = self.base.get(config_name) or MappingStore()
        if not self.has_user_dir:
            return None, base
        return self.override.get(config_name) or MappingStore(), base
