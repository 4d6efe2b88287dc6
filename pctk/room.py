"""Rooms: the places of the game, holding actors, objects and walk boxes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

from pctk.objects import Object
from pctk.resources import RESOURCE_REF_NULL, ResourceRef
from pctk.script import CallbackRegistry, ScriptEntityType, ScriptEntityValue
from pctk.space import Position, Rectangle
from pctk.walkbox import WalkBox, WalkBoxMatrix

ROOM_CAMERA_SPEED = 2
"""Speed at which the camera moves in a room."""


class RoomError(ValueError):
    """Raised when a room is declared inconsistently."""


class RoomActor(Protocol):
    """What a room needs from the actors it holds."""

    room: Any

    def is_ego(self) -> bool: ...

    def hotspot(self) -> Rectangle: ...


class Room:
    """A room of the game."""

    def __init__(self, background: ResourceRef = RESOURCE_REF_NULL) -> None:
        self.background = background
        self.actors: list[RoomActor] = []
        self.objects: dict[str, Object] = {}
        self.callbacks = CallbackRegistry()
        self.walkbox_matrix: WalkBoxMatrix | None = None

    def declare_object(self, tag: str, obj: Object) -> None:
        """Declare an object in the room under the given tag."""
        if tag in self.objects:
            raise RoomError(f"object already declared: {tag}")
        obj.room = self
        self.objects[tag] = obj

    def declare_walkbox_matrix(self, walkboxes: Iterable[WalkBox]) -> WalkBoxMatrix:
        """Set the walkable areas of the room and return their matrix."""
        boxes = list(walkboxes)
        for wb in boxes:
            wb.room = self
        self.walkbox_matrix = WalkBoxMatrix(boxes)
        return self.walkbox_matrix

    def get_script_field(self, name: str) -> ScriptEntityValue | None:
        """Return the object or walk box with the given name as a script value, or None."""
        obj = self.objects.get(name)
        if obj is not None:
            return ScriptEntityValue(ScriptEntityType.OBJECT, obj)
        if self.walkbox_matrix is not None:
            wb = self.walkbox_matrix.walkbox_by_id(name)
            if wb is not None:
                return ScriptEntityValue(ScriptEntityType.WALKBOX, wb)
        return None

    def item_at(self, pos: Position) -> Any:
        """Return the actor or visible object under the position, or None."""
        for actor in self.actors:
            if not actor.is_ego() and actor.hotspot().contains(pos):
                return actor
        for obj in self.objects.values():
            if obj.is_visible() and obj.hotspot.contains(pos):
                return obj
        return None

    def object_by_id(self, object_id: str) -> Object | None:
        """Return the object whose name is the given one, or None."""
        return next((obj for obj in self.objects.values() if obj.name == object_id), None)

    def put_actor(self, actor: RoomActor) -> None:
        """Place an actor in the room."""
        actor.room = self
        if not any(a is actor for a in self.actors):
            self.actors.append(actor)