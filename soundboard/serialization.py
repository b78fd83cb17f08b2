"""Conversion of the library and settings to and from JSON-compatible values."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import IntEnum
from typing import Any

from .data import Data
from .enums import BackendType, SortMode, Theme, ViewMode
from .keys import Key, KeyType
from .objects import Sound, Tab
from .settings import Settings

KeyNamer = Callable[[Sequence[Key]], str]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _field(value: Any, name: str) -> Any:
    if not isinstance(value, dict):
        raise ValueError(f"expected an object holding {name!r}")
    try:
        return value[name]
    except KeyError:
        raise ValueError(f"missing field {name!r}") from None


def _as_int(value: Any, name: str) -> int:
    if not _is_number(value):
        raise ValueError(f"{name!r} must be a number")
    return int(value)


def _as_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name!r} must be a string")
    return value


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name!r} must be a boolean")
    return value


def _as_list(value: Any, name: str) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{name!r} must be an array")
    return value


def key_to_json(key: Key) -> dict[str, int]:
    """Encode a key as an object with its code and device type."""
    return {"key": key.key, "type": int(key.type)}


def key_from_json(value: Any) -> Key:
    """Decode a key; a bare number is read as a keyboard key."""
    if isinstance(value, dict) and "type" in value:
        code = _as_int(_field(value, "key"), "key")
        return Key(code, KeyType(_as_int(value["type"], "type")))
    return Key(_as_int(value, "key"), KeyType.KEYBOARD)


def _keys_from_json(value: Any, name: str) -> list[Key]:
    return [key_from_json(item) for item in _as_list(value, name)]


def sound_to_json(sound: Sound, namer: KeyNamer) -> dict[str, Any]:
    """Encode a sound; ``namer`` gives the readable hotkey sequence."""
    return {
        "name": sound.name,
        "hotkeys": [key_to_json(key) for key in sound.hotkeys],
        "hotkeySequence": namer(sound.hotkeys),
        "id": sound.id,
        "path": sound.path,
        "isFavorite": sound.is_favorite,
        "localVolume": sound.local_volume,
        "remoteVolume": sound.remote_volume,
        "modifiedDate": sound.modified_date,
    }


def sound_from_json(value: Any) -> Sound:
    """Decode a sound; favourite flag and volumes are optional."""
    sound = Sound(
        name=_as_str(_field(value, "name"), "name"),
        hotkeys=_keys_from_json(_field(value, "hotkeys"), "hotkeys"),
        id=_as_int(_field(value, "id"), "id"),
        path=_as_str(_field(value, "path"), "path"),
        modified_date=_as_int(_field(value, "modifiedDate"), "modifiedDate"),
    )
    if "isFavorite" in value:
        sound.is_favorite = _as_bool(value["isFavorite"], "isFavorite")
    if _is_number(value.get("localVolume")):
        sound.local_volume = int(value["localVolume"])
    if _is_number(value.get("remoteVolume")):
        sound.remote_volume = int(value["remoteVolume"])
    return sound


def tab_to_json(tab: Tab, namer: KeyNamer) -> dict[str, Any]:
    """Encode a tab and its sounds."""
    return {
        "id": tab.id,
        "name": tab.name,
        "path": tab.path,
        "sounds": [sound_to_json(sound, namer) for sound in tab.sounds],
        "sortMode": int(tab.sort_mode),
    }


def tab_from_json(value: Any) -> Tab:
    """Decode a tab; the sort mode is optional."""
    tab = Tab(
        id=_as_int(_field(value, "id"), "id"),
        name=_as_str(_field(value, "name"), "name"),
        path=_as_str(_field(value, "path"), "path"),
        sounds=[sound_from_json(item) for item in _as_list(_field(value, "sounds"), "sounds")],
    )
    if "sortMode" in value:
        tab.sort_mode = SortMode(_as_int(value["sortMode"], "sortMode"))
    return tab


def settings_to_json(settings: Settings) -> dict[str, Any]:
    """Encode the settings."""

    def knob(key: Key | None) -> dict[str, int] | None:
        return None if key is None else key_to_json(key)

    return {
        "theme": int(settings.theme),
        "outputs": list(settings.outputs),
        "viewMode": int(settings.view_mode),
        "language": settings.language,
        "stopHotkey": [key_to_json(key) for key in settings.stop_hotkey],
        "syncVolumes": settings.sync_volumes,
        "selectedTab": settings.selected_tab,
        "localVolume": settings.local_volume,
        "remoteVolume": settings.remote_volume,
        "audioBackend": int(settings.audio_backend),
        "deleteToTrash": settings.delete_to_trash,
        "pushToTalkKeys": [key_to_json(key) for key in settings.push_to_talk_keys],
        "tabHotkeysOnly": settings.tab_hotkeys_only,
        "minimizeToTray": settings.minimize_to_tray,
        "localVolumeKnob": knob(settings.local_volume_knob),
        "remoteVolumeKnob": knob(settings.remote_volume_knob),
        "allowOverlapping": settings.allow_overlapping,
        "muteDuringPlayback": settings.mute_during_playback,
        "useAsDefaultDevice": settings.use_as_default_device,
        "allowMultipleOutputs": settings.allow_multiple_outputs,
    }


def _enum_reader(enum: type[IntEnum]) -> Callable[[Any], IntEnum]:
    def read(value: Any) -> IntEnum:
        return enum(_as_int(value, enum.__name__))

    return read


def _read_int(value: Any) -> int:
    return _as_int(value, "value")


def _read_uint(value: Any) -> int:
    number = _as_int(value, "value")
    if number < 0:
        raise ValueError("value must not be negative")
    return number


def _read_bool(value: Any) -> bool:
    return _as_bool(value, "value")


def _read_str(value: Any) -> str:
    return _as_str(value, "value")


def _read_str_list(value: Any) -> list[str]:
    return [_as_str(item, "item") for item in _as_list(value, "value")]


def _read_keys(value: Any) -> list[Key]:
    return _keys_from_json(value, "value")


def _read_knob(value: Any) -> Key:
    if not isinstance(value, dict):
        raise ValueError("knob must be an object")
    return key_from_json(value)


_SETTINGS_FIELDS: tuple[tuple[str, str, Callable[[Any], Any]], ...] = (
    ("theme", "theme", _enum_reader(Theme)),
    ("outputs", "outputs", _read_str_list),
    ("language", "language", _read_str),
    ("viewMode", "view_mode", _enum_reader(ViewMode)),
    ("stopHotkey", "stop_hotkey", _read_keys),
    ("localVolume", "local_volume", _read_int),
    ("selectedTab", "selected_tab", _read_uint),
    ("syncVolumes", "sync_volumes", _read_bool),
    ("audioBackend", "audio_backend", _enum_reader(BackendType)),
    ("remoteVolume", "remote_volume", _read_int),
    ("deleteToTrash", "delete_to_trash", _read_bool),
    ("pushToTalkKeys", "push_to_talk_keys", _read_keys),
    ("minimizeToTray", "minimize_to_tray", _read_bool),
    ("tabHotkeysOnly", "tab_hotkeys_only", _read_bool),
    ("localVolumeKnob", "local_volume_knob", _read_knob),
    ("remoteVolumeKnob", "remote_volume_knob", _read_knob),
    ("allowOverlapping", "allow_overlapping", _read_bool),
    ("useAsDefaultDevice", "use_as_default_device", _read_bool),
    ("muteDuringPlayback", "mute_during_playback", _read_bool),
    ("allowMultipleOutputs", "allow_multiple_outputs", _read_bool),
)


def settings_from_json(value: Any) -> Settings:
    """Decode settings leniently: missing or ill-typed entries keep their defaults."""
    settings = Settings()
    if not isinstance(value, dict):
        return settings
    for json_name, attribute, read in _SETTINGS_FIELDS:
        if json_name not in value:
            continue
        try:
            setattr(settings, attribute, read(value[json_name]))
        except ValueError:
            continue
    return settings


def data_to_json(data: Data, namer: KeyNamer) -> dict[str, Any]:
    """Encode the library's tabs, window size and id counter."""
    return {
        "height": data.height,
        "width": data.width,
        "tabs": [tab_to_json(tab, namer) for tab in data.get_tabs()],
        "soundIdCounter": data.sound_id_counter,
    }


def data_from_json(value: Any) -> Data:
    """Decode a library; tabs are renumbered by position."""
    data = Data()
    data.sound_id_counter = _as_int(_field(value, "soundIdCounter"), "soundIdCounter")
    data.height = _as_int(_field(value, "height"), "height")
    data.width = _as_int(_field(value, "width"), "width")
    tabs = [tab_from_json(item) for item in _as_list(_field(value, "tabs"), "tabs")]
    data.set_tabs(tabs)
    return data