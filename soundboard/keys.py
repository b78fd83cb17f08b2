"""Keys that can be bound as hotkeys."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class KeyType(IntEnum):
    """Device a key comes from."""

    KEYBOARD = 0
    MOUSE = 1
    MIDI = 2


@dataclass(frozen=True, eq=False)
class Key:
    """A key identified by its code and device type."""

    key: int
    type: KeyType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self.key == other.key and self.type == other.type

    def __hash__(self) -> int:
        return hash((self.key, self.type))


@dataclass(frozen=True, eq=False)
class MidiKey(Key):
    """A MIDI key; the extra bytes do not take part in comparison."""

    type: KeyType = KeyType.MIDI
    byte0: int = 0
    byte2: int = 0


def key_name(key: Key) -> str:
    """Device-independent name of a key; empty if it has none."""
    if key.type == KeyType.MIDI:
        return f"MIDI_{key.key}"
    return ""


def key_sequence(keys: Iterable[Key]) -> str:
    """Readable name of a key combination."""
    return " + ".join(key_name(key) for key in keys)