"""Persistent configuration: the sound library together with the settings."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .data import Data
from .keys import key_sequence
from .serialization import (
    KeyNamer,
    data_from_json,
    data_to_json,
    settings_from_json,
    settings_to_json,
)
from .settings import Settings

_log = logging.getLogger(__name__)

_APP_DIR = "soundboard"
_FILE_NAME = "config.json"


def default_config_path(environ: Mapping[str, str] | None = None, platform: str | None = None) -> str:
    """Location of the configuration file for the given environment and platform."""
    env = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        if "APPDATA" not in env:
            raise ValueError("APPDATA is not set")
        return f"{env['APPDATA']}\\{_APP_DIR}\\{_FILE_NAME}"
    if "XDG_CONFIG_HOME" in env:
        return f"{env['XDG_CONFIG_HOME']}/{_APP_DIR}/{_FILE_NAME}"
    if "HOME" not in env:
        raise ValueError("HOME is not set")
    return f"{env['HOME']}/.config/{_APP_DIR}/{_FILE_NAME}"


def _parse(value: Any) -> tuple[Data, Settings]:
    if not isinstance(value, dict) or "data" not in value or "settings" not in value:
        raise ValueError("configuration must hold 'data' and 'settings'")
    return data_from_json(value["data"]), settings_from_json(value["settings"])


@dataclass(eq=False)
class Config:
    """The library and settings, stored as one JSON file."""

    data: Data = field(default_factory=Data)
    settings: Settings = field(default_factory=Settings)
    path: Path = field(default_factory=lambda: Path(default_config_path()))
    namer: KeyNamer = key_sequence

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def to_json(self) -> dict[str, Any]:
        """The configuration as a JSON-compatible value."""
        return {"data": data_to_json(self.data, self.namer), "settings": settings_to_json(self.settings)}

    @classmethod
    def from_json(cls, value: Any) -> Config:
        """Build a configuration from a decoded JSON value; raises ValueError if malformed."""
        data, settings = _parse(value)
        return cls(data=data, settings=settings)

    def save(self) -> None:
        """Write the configuration, creating its directory when needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self.to_json(), sort_keys=True, separators=(",", ":")), encoding="utf-8"
        )
        _log.info("Config written")

    def load(self) -> bool:
        """Read the configuration file into this object.

        Returns True if it was applied. A missing or corrupted file leaves
        everything as it was; a file in an unknown layout is moved aside.
        """
        if not self.path.exists():
            _log.warning("Config not found")
            return False
        content = self.path.read_text(encoding="utf-8")
        try:
            value = json.loads(content)
        except ValueError:
            _log.error("Config seems corrupted")
            return False
        try:
            data, settings = _parse(value)
        except ValueError:
            _log.warning("Found possibly old config format, moving old config...")
            self.path.rename(self.path.parent / f"config_old_{time.time_ns()}.json")
            return False
        self.data.set(data)
        self.settings = settings
        _log.info("Config read")
        return True