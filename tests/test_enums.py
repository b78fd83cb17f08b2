import pytest

from soundboard.enums import BackendType, ErrorCode, SortMode, Theme, ViewMode


def test_error_code_values_are_contiguous_from_zero():
    assert [ErrorCode(value) for value in range(22)] == list(ErrorCode)


def test_sort_mode_values_are_contiguous_from_zero():
    assert [SortMode(value) for value in range(4)] == list(SortMode)


def test_theme_values_are_contiguous_from_zero():
    assert [Theme(value) for value in range(3)] == list(Theme)


def test_view_mode_values_are_contiguous_from_zero():
    assert [ViewMode(value) for value in range(3)] == list(ViewMode)


def test_backend_type_values_are_contiguous_from_zero():
    assert [BackendType(value) for value in range(3)] == list(BackendType)


def test_round_trip_through_value():
    assert all(ErrorCode(int(member)) is member for member in ErrorCode)
    assert all(SortMode(int(member)) is member for member in SortMode)
    assert all(Theme(int(member)) is member for member in Theme)
    assert all(ViewMode(int(member)) is member for member in ViewMode)
    assert all(BackendType(int(member)) is member for member in BackendType)


def test_unknown_error_code_raises():
    with pytest.raises(ValueError):
        ErrorCode(22)


def test_unknown_sort_mode_raises():
    with pytest.raises(ValueError):
        SortMode(4)


def test_unknown_theme_raises():
    with pytest.raises(ValueError):
        Theme(3)


def test_unknown_view_mode_raises():
    with pytest.raises(ValueError):
        ViewMode(3)


def test_unknown_backend_type_raises():
    with pytest.raises(ValueError):
        BackendType(3)


def test_first_members_follow_source_order():
    assert ErrorCode(0) is ErrorCode.FAILED_TO_PLAY
    assert SortMode(0) is SortMode.MODIFIED_DATE_ASCENDING
    assert Theme(0) is Theme.SYSTEM
    assert ViewMode(0) is ViewMode.LIST
    assert BackendType(0) is BackendType.NONE


def test_last_error_code():
    assert ErrorCode(21) is ErrorCode.FAILED_TO_SET_CUSTOM_VOLUME