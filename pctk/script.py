"""Script entity types, values exchanged with scripts, and script callbacks."""

from __future__ import annotations

import enum
import uuid
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol


class ScriptEntityType(str, enum.Enum):
    """The type of a user data entity in a script."""

    ANY = "any"
    ACTOR = "actor"
    ANIMATION = "animation"
    CLASS = "class"
    COLOR = "color"
    CONTROL = "control"
    DIR = "direction"
    FUTURE = "future"
    MUSIC = "music"
    OBJECT = "object"
    OBJECT_DEFAULTS = "defaults"
    POS = "position"
    RECT = "rect"
    REF = "ref"
    ROOM = "room"
    SIZE = "size"
    SENTENCE_CHOICE = "choice"
    SOUND = "sound"
    STATE = "state"
    WALKBOX = "walkbox"

    def registry_name(self) -> str:
        """The name of the entity type in the interpreter registry."""
        return f"pctk.{self.value}"

    def __str__(self) -> str:
        return self.value


@dataclass
class ScriptEntityValue:
    """A value from a script that is visible by other scripts."""

    type: ScriptEntityType
    user_data: Any


@dataclass
class ScriptNamedEntityValue(ScriptEntityValue):
    """A named value from a script that is visible by other scripts."""

    name: str = ""


class ScriptLanguage(enum.IntEnum):
    """The language a script is written in."""

    UNDEFINED = 0
    LUA = 1


def new_callback_id() -> str:
    """Create a new unique callback identifier."""
    return str(uuid.uuid4())


class MethodCaller(Protocol):
    """Something that can call a registered callback by its ID."""

    def call_method(self, callback_id: str, args: Sequence[ScriptEntityValue]) -> Any: ...


@dataclass
class ScriptCallback:
    """A callback function declared in a script."""

    id: str
    name: str
    script: MethodCaller

    def invoke(self, args: Sequence[ScriptEntityValue] | None) -> Any:
        """Call the callback with the given arguments and return what the script returns."""
        return self.script.call_method(self.id, list(args or ()))


class DuplicateCallbackError(ValueError):
    """Raised when a callback with the same name is declared twice."""


class CallbackRegistry:
    """Callbacks declared on an entity, looked up by name."""

    def __init__(self) -> None:
        self._callbacks: list[ScriptCallback] = []

    def declare_callback(self, callback: ScriptCallback) -> None:
        """Declare a callback; raise DuplicateCallbackError if its name is taken."""
        if self.find_callback(callback.name) is not None:
            raise DuplicateCallbackError(f"callback '{callback.name}' already declared")
        self._callbacks.append(callback)

    def find_callback(self, name: str) -> ScriptCallback | None:
        """Return the callback with the given name, or None."""
        return next((cb for cb in self._callbacks if cb.name == name), None)

    def __iter__(self) -> Iterator[ScriptCallback]:
        return iter(self._callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)