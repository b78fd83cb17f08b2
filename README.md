# soundboard

This package is the core model of a soundboard application. It depends only on
the standard library. It covers the following parts:

- **Tabs and sounds.** `soundboard.objects.Sound` and `soundboard.objects.Tab`
  are dataclasses. They are held in a `soundboard.data.Data` store.
  - The store keeps an index of sounds by id and a set of favourites.
  - It renumbers tabs by position whenever tabs are removed or replaced.
  - It is guarded by a re-entrant lock.
  - `get_tabs`, `get_tab`, `add_tab`, `set_tab`, `all_sounds` and
    `get_favorites` return copies.
  - `get_sound` returns the stored sound itself, so changes made to it are
    kept.
- **Settings.** `soundboard.settings.Settings` holds:
  - the theme, view mode and audio backend;
  - the volumes;
  - the stop and push-to-talk hotkeys;
  - the volume knobs;
  - the behaviour flags.

  The enumerations are in `soundboard.enums`.
- **Keys.** `soundboard.keys.Key` is a key code with a `KeyType`: keyboard,
  mouse or MIDI. `MidiKey` also carries the MIDI status and value bytes, but
  these are not used when keys are compared. `key_name` returns `MIDI_<code>`
  for MIDI keys and an empty string for other keys. `key_sequence` joins the
  names with `" + "`.
- **JSON.** `soundboard.serialization` converts keys, sounds, tabs, settings and
  the library to and from JSON-compatible values.
  - Reading a library raises `ValueError` when required fields are missing or
    have the wrong type.
  - Settings are read leniently: missing or ill-typed entries keep their
    defaults.
  - A key given as a bare number is read as a keyboard key.
- **Config file.** `soundboard.config.Config` saves the library and the settings
  as one JSON file, and loads them from it.
  - `load()` returns `True` when the file was applied.
  - A missing or corrupted file leaves the current state unchanged.
  - A file that is valid JSON but not in the expected layout is renamed to
    `config_old_<nanoseconds>.json` in the same directory. It is not
    overwritten.
- **Hotkeys.** `soundboard.hotkeys.Hotkeys` tracks the keys that are held down.
  When keys are pressed:
  - It stops all sounds when the stop hotkey is held.
  - Otherwise it plays the sound whose hotkeys best match the held keys.
    `get_best_match` and `is_close_match` do the matching.
  - In notify mode it reports the key combination instead.

  It also handles raw MIDI messages:
  - Note-on (144) is a key press.
  - Note-off (128) is a key release.
  - Control change (176) turns a volume knob and sets the volume to
    `int(value / 127 * 100)`.
  - After `request_knob(True)`, a control change is reported instead of being
    applied.

## Installation

```
pip install .
```

To install with the test tools and run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from soundboard.data import Data
from soundboard.objects import Sound, Tab
from soundboard.keys import Key, KeyType

data = Data()
data.add_tab(Tab(name="Effects", path="/home/user/sounds", sounds=[
    Sound(id=1, name="airhorn", path="/home/user/sounds/airhorn.wav",
          hotkeys=[Key(37, KeyType.KEYBOARD), Key(38, KeyType.KEYBOARD)]),
]))

data.mark_favorite(1, True)
print(data.get_favorite_ids())   # [1]
```

To use hotkeys, write a class that provides the methods described by
`soundboard.hotkeys.HotkeyUi`:

- `on_hot_key_received`
- `on_volume_changed`
- `on_local_volume_changed`
- `on_remote_volume_changed`
- `stop_sounds`
- `play_sound`
- `on_sound_played`

Pass an instance of it to `Hotkeys(data, settings, ui)`. Then feed key events
to `on_key_down` and `on_key_up`, and raw MIDI bytes to `on_midi_message`.

To save and load the state:

```python
from soundboard.config import Config
from soundboard.settings import Settings

config = Config(data=data, settings=Settings(), path="/tmp/sb/config.json")
config.save()
Config(path="/tmp/sb/config.json").load()   # True
```

If no path is given, `Config` uses `default_config_path(environ, platform)`:

- `$XDG_CONFIG_HOME/soundboard/config.json` if `XDG_CONFIG_HOME` is set;
- otherwise `$HOME/.config/soundboard/config.json`;
- `%APPDATA%\soundboard\config.json` on Windows.

`default_config_path` raises `ValueError` when the variable it needs is not set.

## What it does not do

This package plays no audio, has no user interface and has no command to run.
It does not capture keyboard, mouse or MIDI input from the system, and it does
not send key presses. All events have to be fed to `Hotkeys` by the caller, and
all playback and display is left to the `HotkeyUi` object you supply.