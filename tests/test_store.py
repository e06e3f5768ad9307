import pytest

from planner.errors import DuplicateEntity
from planner.models import Opening, OpeningType, Wall


def wall(id, x=0.0):
    return Wall(id=id, x1=x, y1=0, x2=x + 1, y2=0)


def opening(id):
    return Opening(id=id, type=OpeningType.WINDOW, x=0.5, y=0)


def test_add_and_list_in_insertion_order(store):
    store.add_wall(wall("b"))
    store.add_wall(wall("a"))
    store.add_opening(opening("o"))
    assert [w.id for w in store.list_walls()] == ["b", "a"]
    assert [o.id for o in store.list_openings()] == ["o"]
    assert len(store) == 3


def test_duplicate_ids_are_rejected(store):
    store.add_wall(wall("w"))
    with pytest.raises(DuplicateEntity):
        store.add_wall(wall("w", x=5))
    assert store.get_wall("w").x1 == 0


def test_walls_and_openings_have_separate_id_spaces(store):
    store.add_wall(wall("x"))
    store.add_opening(opening("x"))
    assert store.get_wall("x") is not None
    assert store.get_opening("x") is not None


def test_remove(store):
    store.add_wall(wall("w"))
    store.add_opening(opening("o"))
    assert store.remove_wall("w").id == "w"
    assert store.remove_opening("o").id == "o"
    assert store.remove_wall("w") is None
    assert store.remove_opening("missing") is None
    assert len(store) == 0


def test_listing_is_a_snapshot(store):
    store.add_wall(wall("w"))
    snapshot = store.list_walls()
    store.clear()
    assert [w.id for w in snapshot] == ["w"]
    assert store.list_walls() == []


def test_replace_swaps_only_given_collections(store):
    store.add_wall(wall("old"))
    store.add_opening(opening("keep"))
    store.replace(walls=[wall("new1"), wall("new2")])
    assert [w.id for w in store.list_walls()] == ["new1", "new2"]
    assert [o.id for o in store.list_openings()] == ["keep"]


def test_replace_with_duplicates_changes_nothing(store):
    store.add_wall(wall("old"))
    with pytest.raises(DuplicateEntity):
        store.replace(walls=[wall("d"), wall("d")], openings=[])
    assert [w.id for w in store.list_walls()] == ["old"]
