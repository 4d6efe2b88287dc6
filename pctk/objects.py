"""Objects placed in rooms, their classes, states and default actions."""

from __future__ import annotations

import enum
import functools
import operator
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pctk.resources import RESOURCE_REF_NULL, ResourceRef
from pctk.script import CallbackRegistry, ScriptEntityType, ScriptEntityValue
from pctk.space import Direction, Position, Rectangle


class ObjectClass(enum.IntFlag):
    """Classes of objects, used as bit flags that can be OR-ed together.

    Besides the built-in classes, any other bit up to 64 may be used as a custom class.
    """

    NONE = 0
    PERSON = 1 << 0
    UNTOUCHABLE = 1 << 1
    PICKABLE = 1 << 2
    OPENABLE = 1 << 3
    CLOSEABLE = 1 << 4
    APPLICABLE = 1 << 5

    def enable(self, other: ObjectClass) -> ObjectClass:
        """Return these classes with the given ones enabled."""
        return ObjectClass(self | other)

    def disable(self, other: ObjectClass) -> ObjectClass:
        """Return these classes with the given ones disabled."""
        return ObjectClass(self & ~other)

    def has(self, other: ObjectClass) -> bool:
        """Whether any of the given classes is enabled."""
        return (self & other) != 0

    def is_one_of(self, head: ObjectClass, *args: ObjectClass) -> bool:
        """Whether some of these classes is among the given ones."""
        return (self & with_object_classes(head, *args)) != 0

    def is_all_of(self, head: ObjectClass, *args: ObjectClass) -> bool:
        """Whether all of these classes are among the given ones."""
        return (self & with_object_classes(head, *args)) == self

    def is_none_of(self, head: ObjectClass, *args: ObjectClass) -> bool:
        """Whether none of these classes is among the given ones."""
        return (self & with_object_classes(head, *args)) == 0


def with_object_classes(head: ObjectClass, *args: ObjectClass) -> ObjectClass:
    """Combine the given classes into one."""
    return ObjectClass(functools.reduce(operator.or_, args, int(head)))


@dataclass(eq=False)
class ObjectState:
    """A state an object can be in."""

    anim: Any = None
    object: Object | None = None


@dataclass(eq=False)
class Object:
    """An object of the game, declared in the scope of a room."""

    klass: ObjectClass = ObjectClass.NONE
    hotspot: Rectangle = field(default_factory=Rectangle)
    name: str = ""
    owner: Any = None
    pos: Position = field(default_factory=Position)
    room: Any = None
    sprites: ResourceRef = RESOURCE_REF_NULL
    state: ObjectState | None = None
    states: dict[str, ObjectState] = field(default_factory=dict)
    use_dir: Direction = Direction.RIGHT
    use_pos: Position = field(default_factory=Position)
    callbacks: CallbackRegistry = field(default_factory=CallbackRegistry)

    def enable_class(self, klass: ObjectClass) -> None:
        """Enable a class in the object."""
        self.klass = ObjectClass(self.klass).enable(klass)

    def disable_class(self, klass: ObjectClass) -> None:
        """Disable a class in the object."""
        self.klass = ObjectClass(self.klass).disable(klass)

    def caption(self) -> str:
        """The name of the object as seen by the player."""
        return self.name

    def get_script_field(self, name: str) -> ScriptEntityValue | None:
        """Return the state with the given name as a script value, or None."""
        state = self.states.get(name)
        if state is None:
            return None
        return ScriptEntityValue(ScriptEntityType.STATE, state)

    def is_visible(self) -> bool:
        """Whether the object is shown in its room."""
        return self.owner is None and not ObjectClass(self.klass).has(ObjectClass.UNTOUCHABLE)

    def item_position(self) -> Position:
        """The position of the object in its room."""
        return self.pos

    def item_use_position(self) -> tuple[Position, Direction]:
        """Where and facing which way actors stand to use the object."""
        return self.use_pos, self.use_dir


class ObjectDefaults:
    """Default actions for objects, declared by scripts as callbacks."""

    def __init__(self) -> None:
        self.callbacks = CallbackRegistry()

    def call_function(self, function: str, args: Sequence[ScriptEntityValue] | None) -> Any:
        """Invoke the default callback with the given name.

        Raises LookupError if no such callback is declared.
        """
        callback = self.callbacks.find_callback(function)
        if callback is None:
            raise LookupError(f"default callback '{function}' not found")
        return callback.invoke(args)