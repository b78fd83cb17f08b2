from soundboard.enums import BackendType, Theme, ViewMode
from soundboard.keys import MidiKey
from soundboard.settings import Settings


def test_enum_defaults():
    settings = Settings()
    assert settings.audio_backend is BackendType.PULSEAUDIO
    assert settings.view_mode is ViewMode.LIST
    assert settings.theme is Theme.SYSTEM


def test_volume_defaults():
    settings = Settings()
    assert settings.remote_volume == 100
    assert settings.local_volume == 50
    assert settings.sync_volumes is False


def test_flag_defaults():
    settings = Settings()
    assert settings.allow_overlapping is True
    assert settings.delete_to_trash is True
    assert settings.allow_multiple_outputs is False
    assert settings.use_as_default_device is False
    assert settings.mute_during_playback is False
    assert settings.minimize_to_tray is False
    assert settings.tab_hotkeys_only is False


def test_optional_defaults():
    settings = Settings()
    assert settings.language is None
    assert settings.local_volume_knob is None
    assert settings.remote_volume_knob is None
    assert settings.selected_tab == 0


def test_lists_are_independent():
    first = Settings()
    first.stop_hotkey.append(MidiKey(1))
    first.outputs.append("speaker")
    second = Settings()
    assert second.stop_hotkey == []
    assert second.outputs == []
    assert second.push_to_talk_keys == []