"""Enumerations shared across the soundboard."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error conditions reported to the user interface."""

    FAILED_TO_PLAY = 0
    FAILED_TO_SEEK = 1
    FAILED_TO_PAUSE = 2
    FAILED_TO_REPEAT = 3
    FAILED_TO_RESUME = 4
    FAILED_TO_MOVE_TO_SINK = 5
    SOUND_NOT_FOUND = 6
    FOLDER_DOES_NOT_EXIST = 7
    TAB_DOES_NOT_EXIST = 8
    FAILED_TO_SET_HOTKEY = 9
    FAILED_TO_START_PASSTHROUGH = 10
    FAILED_TO_MOVE_BACK = 11
    FAILED_TO_MOVE_BACK_PASSTHROUGH = 12
    FAILED_TO_REVERT_DEFAULT_SOURCE = 13
    FAILED_TO_SET_DEFAULT_SOURCE = 14
    YTDL_NOT_FOUND = 15
    YTDL_INVALID_URL = 16
    YTDL_INVALID_JSON = 17
    YTDL_INFORMATION_UNKNOWN = 18
    FAILED_TO_DELETE = 19
    FAILED_TO_MUTE = 20
    FAILED_TO_SET_CUSTOM_VOLUME = 21


class SortMode(IntEnum):
    """How the sounds of a tab are ordered."""

    MODIFIED_DATE_ASCENDING = 0
    MODIFIED_DATE_DESCENDING = 1
    ALPHABETICAL_ASCENDING = 2
    ALPHABETICAL_DESCENDING = 3


class Theme(IntEnum):
    """Colour theme of the user interface."""

    SYSTEM = 0
    DARK = 1
    LIGHT = 2


class ViewMode(IntEnum):
    """Layout used to present sounds."""

    LIST = 0
    GRID = 1
    EMULATED_LAUNCHPAD = 2


class BackendType(IntEnum):
    """Audio backend in use."""

    NONE = 0
    PIPEWIRE = 1
    PULSEAUDIO = 2