"""Sounds and the tabs that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import SortMode
from .keys import Key


@dataclass
class Sound:
    """A playable sound file."""

    id: int = 0
    name: str = ""
    path: str = ""
    is_favorite: bool = False
    hotkeys: list[Key] = field(default_factory=list)
    modified_date: int = 0
    local_volume: int | None = None
    remote_volume: int | None = None


@dataclass
class Tab:
    """A folder of sounds; its id equals its position among the tabs."""

    id: int = 0
    name: str = ""
    path: str = ""
    sounds: list[Sound] = field(default_factory=list)
    sort_mode: SortMode = SortMode.MODIFIED_DATE_DESCENDING