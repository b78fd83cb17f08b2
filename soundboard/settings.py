"""User settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import BackendType, Theme, ViewMode
from .keys import Key


@dataclass
class Settings:
    """Preferences persisted alongside the sound library."""

    audio_backend: BackendType = BackendType.PULSEAUDIO
    view_mode: ViewMode = ViewMode.LIST
    theme: Theme = Theme.SYSTEM
    language: str | None = None

    push_to_talk_keys: list[Key] = field(default_factory=list)
    stop_hotkey: list[Key] = field(default_factory=list)

    remote_volume_knob: Key | None = None
    local_volume_knob: Key | None = None

    outputs: list[str] = field(default_factory=list)
    selected_tab: int = 0

    sync_volumes: bool = False
    remote_volume: int = 100
    local_volume: int = 50

    allow_multiple_outputs: bool = False
    use_as_default_device: bool = False
    mute_during_playback: bool = False
    allow_overlapping: bool = True
    minimize_to_tray: bool = False
    tab_hotkeys_only: bool = False
    delete_to_trash: bool = True