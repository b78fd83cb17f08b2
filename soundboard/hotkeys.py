"""Hotkey handling: tracking pressed keys and triggering the matching sound."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from .data import Data
from .keys import Key, MidiKey, key_name
from .objects import Sound
from .settings import Settings

_log = logging.getLogger(__name__)

_MIDI_NOTE_ON = 144
_MIDI_NOTE_OFF = 128
_MIDI_CONTROL_CHANGE = 176


class HotkeyUi(Protocol):
    """What the hotkey handler needs from the user interface."""

    def on_hot_key_received(self, keys: list[Key]) -> None: ...

    def on_volume_changed(self) -> None: ...

    def on_local_volume_changed(self, volume: int) -> None: ...

    def on_remote_volume_changed(self, volume: int) -> None: ...

    def stop_sounds(self) -> None: ...

    def play_sound(self, sound_id: int) -> Any | None: ...

    def on_sound_played(self, playing: Any) -> None: ...


def is_close_match(pressed_keys: Sequence[Key], keys: Sequence[Key]) -> bool:
    """True if every key of ``keys`` is pressed and enough keys are held."""
    if len(pressed_keys) < len(keys):
        return False
    return all(key in pressed_keys for key in keys)


def get_best_match(sounds: Iterable[Sound], pressed_keys: Sequence[Key]) -> Sound | None:
    """The sound whose hotkeys best fit the pressed keys, or None.

    An exact match wins at once; otherwise the last close match whose hotkey
    list is not shorter than a previous match's is chosen.
    """
    pressed = list(pressed_keys)
    best: Sound | None = None
    for sound in sounds:
        if not sound.hotkeys:
            continue
        if pressed == list(sound.hotkeys):
            return sound
        if best is not None and len(best.hotkeys) > len(sound.hotkeys):
            continue
        if is_close_match(pressed, sound.hotkeys):
            best = sound
    return best


class Hotkeys:
    """Tracks held keys and plays sounds or reports key combinations."""

    def __init__(self, data: Data, settings: Settings, ui: HotkeyUi) -> None:
        self.data = data
        self.settings = settings
        self.ui = ui
        self.pressed_keys: list[Key] = []
        self.should_notify = False
        self.should_notify_knob = False

    def notify(self, state: bool) -> None:
        """Switch between reporting key combinations and playing sounds."""
        self.pressed_keys.clear()
        self.should_notify = state

    def request_knob(self, state: bool) -> None:
        """Switch whether MIDI knob turns are reported instead of applied."""
        self.should_notify_knob = state

    def on_key_up(self, key: Key) -> None:
        if key not in self.pressed_keys:
            return
        if self.should_notify:
            self.ui.on_hot_key_received(list(self.pressed_keys))
            self.pressed_keys.clear()
        else:
            self.pressed_keys = [pressed for pressed in self.pressed_keys if pressed != key]

    def _candidate_sounds(self) -> list[Sound]:
        if not self.settings.tab_hotkeys_only:
            return self.data.all_sounds()
        if self.data.is_on_favorites:
            return self.data.get_favorites()
        tab = self.data.get_tab(self.settings.selected_tab)
        return tab.sounds if tab is not None else []

    def on_key_down(self, key: Key) -> None:
        if key in self.pressed_keys:
            return
        self.pressed_keys.append(key)
        if self.should_notify:
            return

        stop = self.settings.stop_hotkey
        if stop and (list(stop) == self.pressed_keys or is_close_match(self.pressed_keys, stop)):
            self.ui.stop_sounds()
            return

        best = get_best_match(self._candidate_sounds(), self.pressed_keys)
        if best is None:
            return
        playing = self.ui.play_sound(best.id)
        if playing:
            self.ui.on_sound_played(playing)

    def on_midi_message(self, message: Sequence[int]) -> None:
        """Handle a raw MIDI message: note on/off and control changes."""
        if len(message) < 3:
            _log.error("Midi Message contains less than 3 bytes, can't parse information")
            return
        byte0, byte1, byte2 = message[0], message[1], message[2]
        key = MidiKey(key=byte1, byte0=byte0, byte2=byte2)

        if byte0 == _MIDI_NOTE_ON:
            self.on_key_down(key)
        elif byte0 == _MIDI_NOTE_OFF:
            self.on_key_up(key)
        elif byte0 == _MIDI_CONTROL_CHANGE:
            if self.should_notify_knob:
                self.ui.on_hot_key_received([key])
                return
            volume = int(byte2 / 127 * 100)
            local_knob = self.settings.local_volume_knob
            remote_knob = self.settings.remote_volume_knob
            if local_knob is not None and key == local_knob:
                self.settings.local_volume = volume
                self.ui.on_volume_changed()
                self.ui.on_local_volume_changed(volume)
            elif remote_knob is not None and key == remote_knob:
                self.settings.remote_volume = volume
                self.ui.on_volume_changed()
                self.ui.on_remote_volume_changed(volume)

    def get_key_name(self, key: Key) -> str:
        return key_name(key)

    def get_key_sequence(self, keys: Iterable[Key]) -> str:
        return " + ".join(self.get_key_name(key) for key in keys)