import pytest

from pctk.objects import Object, ObjectClass
from pctk.resources import parse_resource_ref
from pctk.room import Room, RoomError
from pctk.script import ScriptEntityType
from pctk.space import Position, new_rect
from pctk.walkbox import WalkBox


class _Actor:
    def __init__(self, rect, ego=False):
        self._rect = rect
        self._ego = ego
        self.room = None

    def is_ego(self):
        return self._ego

    def hotspot(self):
        return self._rect


def _square(walkbox_id, x, y):
    return WalkBox(
        walkbox_id,
        [Position(x, y), Position(x + 1, y), Position(x + 1, y + 1), Position(x, y + 1)],
        1.0,
    )


def test_background_kept():
    ref = parse_resource_ref("resources:/backgrounds/foobar")
    assert Room(ref).background == ref


def test_declare_object_sets_room_and_rejects_duplicates():
    room = Room()
    obj = Object(name="broken window")
    room.declare_object("window", obj)
    assert obj.room is room
    assert room.objects["window"] is obj
    with pytest.raises(RoomError):
        room.declare_object("window", Object())


def test_get_script_field_object_and_walkbox():
    room = Room()
    obj = Object(name="broken window")
    room.declare_object("window", obj)
    wb = _square("floor", 0, 0)
    room.declare_walkbox_matrix([wb])
    value = room.get_script_field("window")
    assert value.type is ScriptEntityType.OBJECT
    assert value.user_data is obj
    wb_value = room.get_script_field("floor")
    assert wb_value.type is ScriptEntityType.WALKBOX
    assert wb_value.user_data is wb
    assert wb.room is room
    assert room.get_script_field("ceiling") is None


def test_get_script_field_without_walkboxes():
    assert Room().get_script_field("anything") is None


def test_item_at_objects():
    room = Room()
    obj = Object(name="door", hotspot=new_rect(10, 10, 20, 20))
    room.declare_object("door", obj)
    assert room.item_at(Position(15, 15)) is obj
    assert room.item_at(Position(5, 5)) is None
    obj.enable_class(ObjectClass.UNTOUCHABLE)
    assert room.item_at(Position(15, 15)) is None


def test_item_at_actors_skips_ego():
    room = Room()
    other = _Actor(new_rect(0, 0, 10, 10))
    ego = _Actor(new_rect(20, 0, 10, 10), ego=True)
    room.put_actor(other)
    room.put_actor(ego)
    assert room.item_at(Position(5, 5)) is other
    assert room.item_at(Position(25, 5)) is None


def test_item_at_prefers_actor_over_object():
    room = Room()
    actor = _Actor(new_rect(0, 0, 10, 10))
    room.put_actor(actor)
    room.declare_object("box", Object(hotspot=new_rect(0, 0, 10, 10)))
    assert room.item_at(Position(1, 1)) is actor


def test_object_by_id_uses_name():
    room = Room()
    obj = Object(name="key")
    room.declare_object("tag", obj)
    assert room.object_by_id("key") is obj
    assert room.object_by_id("tag") is None


def test_put_actor_is_idempotent():
    room = Room()
    actor = _Actor(new_rect(0, 0, 1, 1))
    room.put_actor(actor)
    room.put_actor(actor)
    assert actor.room is room
    assert room.actors == [actor]


def test_walkbox_matrix_finds_path():
    room = Room()
    matrix = room.declare_walkbox_matrix([_square("a", 0, 0), _square("b", 1, 0)])
    path = room.walkbox_matrix.find_path(Position(0, 0), Position(2, 1))
    assert matrix is room.walkbox_matrix
    assert path[-1].position == Position(2, 1)
    assert path[0].walkbox.walkbox_id == "a"