"""Soundboard core: sounds, tabs, settings, JSON config and hotkey matching."""

__version__ = "0.1.0"
__all__ = ["config", "data", "enums", "hotkeys", "keys", "objects", "serialization", "settings"]