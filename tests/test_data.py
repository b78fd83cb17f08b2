import pytest

from soundboard.data import Data
from soundboard.objects import Sound, Tab


def make_tab(name, ids, favorites=()):
    return Tab(
        name=name,
        path=f"/sounds/{name}",
        sounds=[Sound(id=i, name=f"s{i}", is_favorite=i in favorites) for i in ids],
    )


@pytest.fixture
def data():
    library = Data()
    library.add_tab(make_tab("a", [1, 2], favorites=[2]))
    library.add_tab(make_tab("b", [3, 4]))
    return library


def test_defaults():
    library = Data()
    assert library.width == 1280
    assert library.height == 720
    assert library.sound_id_counter == 0
    assert library.is_on_favorites is False
    assert library.get_tabs() == []


def test_add_tab_assigns_position_ids(data):
    assert [tab.id for tab in data.get_tabs()] == list(range(len(data.get_tabs())))
    added = data.add_tab(make_tab("c", [5]))
    assert added.id == len(data.get_tabs()) - 1
    assert added.name == "c"


def test_add_tab_indexes_sounds(data):
    assert [s.id for s in data.all_sounds()] == [1, 2, 3, 4]
    assert data.get_favorite_ids() == [2]


def test_add_tab_copies_input():
    library = Data()
    tab = make_tab("a", [1])
    library.add_tab(tab)
    tab.sounds[0].name = "changed"
    assert library.get_sound(1).name == "s1"


def test_get_tab_returns_copy(data):
    tab = data.get_tab(0)
    tab.name = "changed"
    assert data.get_tab(0).name == "a"


def test_get_tab_missing_returns_none(data):
    assert data.get_tab(len(data.get_tabs())) is None


def test_get_sound_is_live_reference(data):
    sound = data.get_sound(3)
    sound.name = "renamed"
    assert data.get_tab(1).sounds[0].name == "renamed"


def test_get_sound_missing(data):
    assert data.get_sound(99) is None


def test_remove_tab_renumbers_and_unindexes(data):
    data.remove_tab_by_id(0)
    tabs = data.get_tabs()
    assert [tab.name for tab in tabs] == ["b"]
    assert tabs[0].id == 0
    assert data.get_sound(1) is None
    assert data.get_favorite_ids() == []


def test_remove_missing_tab_changes_nothing(data):
    before = data.get_tabs()
    data.remove_tab_by_id(len(before))
    assert data.get_tabs() == before


def test_set_tabs_renumbers(data):
    tabs = [make_tab("x", [10]), make_tab("y", [11], favorites=[11])]
    tabs[0].id = 7
    tabs[1].id = 7
    data.set_tabs(tabs)
    assert [tab.id for tab in data.get_tabs()] == [0, 1]
    assert [s.id for s in data.all_sounds()] == [10, 11]
    assert data.get_favorite_ids() == [11]


def test_set_tab_replaces_and_reindexes(data):
    result = data.set_tab(0, make_tab("new", [20], favorites=[20]))
    assert result.name == "new"
    assert data.get_tab(0).name == "new"
    assert data.get_sound(1) is None
    assert data.get_sound(20).name == "s20"
    assert data.get_favorite_ids() == [20]


def test_set_tab_missing(data):
    assert data.set_tab(len(data.get_tabs()), make_tab("z", [])) is None


def test_does_tab_exist(data):
    assert data.does_tab_exist("/sounds/a") is True
    assert data.does_tab_exist("/sounds/missing") is False


def test_mark_favorite_round_trip(data):
    data.mark_favorite(3, True)
    assert data.get_favorite_ids() == [2, 3]
    assert data.get_sound(3).is_favorite is True
    data.mark_favorite(3, False)
    assert data.get_favorite_ids() == [2]
    assert data.get_tab(1).sounds[0].is_favorite is False


def test_mark_favorite_unknown_ignored(data):
    data.mark_favorite(99, True)
    assert data.get_favorite_ids() == [2]


def test_get_favorites_are_copies(data):
    favorites = data.get_favorites()
    assert [s.id for s in favorites] == data.get_favorite_ids()
    favorites[0].name = "changed"
    assert data.get_sound(2).name == "s2"


def test_duplicate_sound_id_keeps_first():
    library = Data()
    library.add_tab(make_tab("a", [1]))
    library.add_tab(Tab(name="b", sounds=[Sound(id=1, name="other")]))
    assert library.get_sound(1).name == "s1"


def test_set_copies_from_other(data):
    target = Data()
    data.width = 800
    data.height = 600
    data.sound_id_counter = 4
    data.is_on_favorites = True
    target.set(data)
    assert target.get_tabs() == data.get_tabs()
    assert (target.width, target.height) == (800, 600)
    assert target.sound_id_counter == 4
    assert target.is_on_favorites is False
    assert target.get_favorite_ids() == [2]
    target.get_sound(1).name = "changed"
    assert data.get_sound(1).name == "s1"