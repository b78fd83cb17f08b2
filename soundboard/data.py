"""The sound library: tabs plus fast lookup of sounds and favourites by id."""

from __future__ import annotations

import copy
import logging
import threading

from .objects import Sound, Tab

_log = logging.getLogger(__name__)


class Data:
    """Holds the tabs and keeps the sound and favourite indexes in step."""

    def __init__(self) -> None:
        self._tabs: list[Tab] = []
        self.is_on_favorites = False
        self.width = 1280
        self.height = 720
        self.sound_id_counter = 0
        self._sounds: dict[int, Sound] = {}
        self._favorites: dict[int, Sound] = {}
        self._lock = threading.RLock()

    def _register(self, tab: Tab) -> None:
        for sound in tab.sounds:
            self._sounds.setdefault(sound.id, sound)
            if sound.is_favorite:
                self._favorites.setdefault(sound.id, sound)

    def _unregister(self, tab: Tab) -> None:
        for sound in tab.sounds:
            self._sounds.pop(sound.id, None)
            if sound.is_favorite:
                self._favorites.pop(sound.id, None)

    def _rebuild(self) -> None:
        self._sounds.clear()
        self._favorites.clear()
        for index, tab in enumerate(self._tabs):
            tab.id = index
            self._register(tab)

    def get_tabs(self) -> list[Tab]:
        """Copies of all tabs."""
        with self._lock:
            return copy.deepcopy(self._tabs)

    def set_tabs(self, tabs: list[Tab]) -> None:
        """Replace all tabs, renumbering them by position."""
        with self._lock:
            self._tabs = copy.deepcopy(list(tabs))
            self._rebuild()

    def does_tab_exist(self, path: str) -> bool:
        with self._lock:
            return any(tab.path == path for tab in self._tabs)

    def set_tab(self, tab_id: int, tab: Tab) -> Tab | None:
        """Replace the tab at ``tab_id``; return a copy, or None if absent."""
        with self._lock:
            if not 0 <= tab_id < len(self._tabs):
                _log.warning("Tried to access non existent Tab %s", tab_id)
                return None
            self._unregister(self._tabs[tab_id])
            replacement = copy.deepcopy(tab)
            self._tabs[tab_id] = replacement
            self._register(replacement)
            return copy.deepcopy(replacement)

    def add_tab(self, tab: Tab) -> Tab:
        """Append a tab, giving it the next id; return a copy."""
        with self._lock:
            added = copy.deepcopy(tab)
            added.id = len(self._tabs)
            self._tabs.append(added)
            self._register(added)
            return copy.deepcopy(added)

    def remove_tab_by_id(self, index: int) -> None:
        """Remove a tab and renumber the rest."""
        with self._lock:
            if not 0 <= index < len(self._tabs):
                _log.warning("Tried to remove non existent tab")
                return
            self._unregister(self._tabs.pop(index))
            for position, tab in enumerate(self._tabs):
                tab.id = position

    def get_tab(self, tab_id: int) -> Tab | None:
        """A copy of the tab, or None if there is none with that id."""
        with self._lock:
            if 0 <= tab_id < len(self._tabs):
                return copy.deepcopy(self._tabs[tab_id])
            _log.warning("Tried to access non existent tab %s", tab_id)
            return None

    def get_sound(self, sound_id: int) -> Sound | None:
        """The stored sound itself (changes to it are kept), or None."""
        with self._lock:
            sound = self._sounds.get(sound_id)
            if sound is None:
                _log.warning("Tried to access non existent sound %s", sound_id)
            return sound

    def all_sounds(self) -> list[Sound]:
        """Copies of every indexed sound, ordered by id."""
        with self._lock:
            return [copy.deepcopy(self._sounds[key]) for key in sorted(self._sounds)]

    def get_favorites(self) -> list[Sound]:
        """Copies of the favourite sounds, ordered by id."""
        with self._lock:
            return [copy.deepcopy(self._favorites[key]) for key in sorted(self._favorites)]

    def get_favorite_ids(self) -> list[int]:
        with self._lock:
            return sorted(self._favorites)

    def mark_favorite(self, sound_id: int, favourite: bool) -> None:
        """Flag or unflag a sound as favourite; unknown ids are ignored."""
        with self._lock:
            sound = self.get_sound(sound_id)
            if sound is None:
                return
            sound.is_favorite = favourite
            if favourite:
                self._favorites.setdefault(sound_id, sound)
            else:
                self._favorites.pop(sound_id, None)

    def set(self, other: Data) -> None:
        """Take over the tabs, window size and id counter of another library."""
        with self._lock:
            self._tabs = copy.deepcopy(other._tabs)
            self.width = other.width
            self.height = other.height
            self.sound_id_counter = other.sound_id_counter
            self._rebuild()