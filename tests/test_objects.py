import pytest

from pctk.objects import Object, ObjectClass, ObjectDefaults, ObjectState, with_object_classes
from pctk.script import (
    DuplicateCallbackError,
    ScriptCallback,
    ScriptEntityType,
    ScriptEntityValue,
)
from pctk.space import Direction, Position


class _RecordingScript:
    def __init__(self):
        self.calls = []

    def call_method(self, callback_id, args):
        self.calls.append((callback_id, list(args)))
        return callback_id


def test_builtin_class_bits_combine():
    combined = with_object_classes(
        ObjectClass.PERSON, ObjectClass.UNTOUCHABLE, ObjectClass.APPLICABLE
    )
    assert int(combined) == 0b100011
    assert int(ObjectClass.PERSON.enable(ObjectClass.PICKABLE)) == 0b101


def test_with_object_classes_combines():
    c = with_object_classes(ObjectClass.PERSON, ObjectClass.PICKABLE)
    assert c.has(ObjectClass.PERSON)
    assert c.has(ObjectClass.PICKABLE)
    assert not c.has(ObjectClass.OPENABLE)


def test_enable_disable_round_trip():
    c = ObjectClass.PERSON.enable(ObjectClass.OPENABLE)
    assert c.has(ObjectClass.OPENABLE)
    assert c.disable(ObjectClass.OPENABLE) == ObjectClass.PERSON


def test_custom_class_bits():
    custom = ObjectClass(1 << 20)
    c = ObjectClass.PERSON.enable(custom)
    assert c.has(custom)
    assert c.disable(custom) == ObjectClass.PERSON


def test_is_one_of_all_of_none_of():
    c = with_object_classes(ObjectClass.PERSON, ObjectClass.PICKABLE)
    assert c.is_one_of(ObjectClass.PICKABLE, ObjectClass.OPENABLE)
    assert not c.is_one_of(ObjectClass.OPENABLE)
    assert c.is_all_of(ObjectClass.PERSON, ObjectClass.PICKABLE, ObjectClass.OPENABLE)
    assert not c.is_all_of(ObjectClass.PERSON)
    assert c.is_none_of(ObjectClass.OPENABLE, ObjectClass.CLOSEABLE)
    assert not c.is_none_of(ObjectClass.PERSON)


def test_object_enable_disable_class():
    obj = Object(name="door")
    obj.enable_class(ObjectClass.OPENABLE)
    assert obj.klass.has(ObjectClass.OPENABLE)
    obj.disable_class(ObjectClass.OPENABLE)
    assert not obj.klass.has(ObjectClass.OPENABLE)


def test_caption_is_name():
    assert Object(name="broken window").caption() == "broken window"


def test_visibility():
    obj = Object()
    assert obj.is_visible()
    obj.owner = object()
    assert not obj.is_visible()
    other = Object(klass=ObjectClass.UNTOUCHABLE)
    assert not other.is_visible()


def test_get_script_field_returns_state():
    obj = Object()
    state = ObjectState(object=obj)
    obj.states["open"] = state
    value = obj.get_script_field("open")
    assert value == ScriptEntityValue(ScriptEntityType.STATE, state)
    assert obj.get_script_field("closed") is None


def test_item_positions():
    obj = Object(pos=Position(42, 24), use_pos=Position(40, 30), use_dir=Direction.UP)
    assert obj.item_position() == Position(42, 24)
    assert obj.item_use_position() == (Position(40, 30), Direction.UP)


def test_object_callbacks_reject_duplicates():
    obj = Object()
    script = _RecordingScript()
    obj.callbacks.declare_callback(ScriptCallback("id1", "use", script))
    with pytest.raises(DuplicateCallbackError):
        obj.callbacks.declare_callback(ScriptCallback("id2", "use", script))
    assert obj.callbacks.find_callback("use").id == "id1"


def test_defaults_call_function_invokes_callback():
    defaults = ObjectDefaults()
    script = _RecordingScript()
    defaults.callbacks.declare_callback(ScriptCallback("cb-id", "pickup", script))
    arg = ScriptEntityValue(ScriptEntityType.POS, Position(1, 2))
    result = defaults.call_function("pickup", [arg])
    assert result == "cb-id"
    assert script.calls == [("cb-id", [arg])]


def test_defaults_call_function_missing_raises():
    defaults = ObjectDefaults()
    with pytest.raises(LookupError, match="lookat"):
        defaults.call_function("lookat", [])