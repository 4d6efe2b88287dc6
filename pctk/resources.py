"""References to game resources and an in-memory resource bundle."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ResourceRef:
    """A reference to a resource: the package it belongs to and its ID in that package."""

    package: str = ""
    id: str = ""

    def is_null(self) -> bool:
        """Whether the reference points to nothing."""
        return not self.package and not self.id

    def __str__(self) -> str:
        if not self.package:
            return self.id
        return f"{self.package}:{self.id}"


RESOURCE_REF_NULL = ResourceRef()
"""The null resource reference."""


def parse_resource_ref(s: str) -> ResourceRef:
    """Parse a reference written as "pkg:id".

    Raises ValueError if the text does not hold exactly one colon.
    """
    parts = s.split(":")
    if len(parts) != 2:
        raise ValueError(f"invalid resource reference: {s}")
    package, resource_id = parts
    return ResourceRef(package, resource_id)


class ResourceKind(enum.Enum):
    """The kinds of resources a game loads."""

    COSTUME = "costume"
    IMAGE = "image"
    MUSIC = "music"
    SCRIPT = "script"
    SOUND = "sound"
    SPRITE_SHEET = "spritesheet"


class ResourceBundle:
    """Resources kept in memory, usable as a resource loader."""

    def __init__(self) -> None:
        self._resources: dict[tuple[ResourceKind, ResourceRef], Any] = {}

    def put(self, kind: ResourceKind, ref: ResourceRef, resource: Any) -> None:
        """Add a resource of the given kind under the given reference."""
        self._resources[(ResourceKind(kind), ref)] = resource

    def load(self, kind: ResourceKind, ref: ResourceRef) -> Any | None:
        """Return the resource of the given kind and reference, or None if absent."""
        return self._resources.get((ResourceKind(kind), ref))

    def __len__(self) -> int:
        return len(self._resources)