"""Walk boxes: convex walkable areas of a room and paths between them."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pctk.space import Position, Positionf

INFINITY_DISTANCE = 255
"""Distance used for walk boxes that are not connected."""

INVALID_WALKBOX = -1
"""Index that denotes no walk box."""


class WalkBoxError(ValueError):
    """Raised when a walk box or walk box matrix is invalid."""


class WalkBox:
    """A convex four-sided area where actors can walk."""

    def __init__(self, walkbox_id: str, vertices: Iterable[Position], scale: float) -> None:
        points = tuple(vertices)
        if len(points) != 4:
            raise WalkBoxError(f"walkbox must have 4 vertices: {points}")
        self.walkbox_id = walkbox_id
        self.vertices: tuple[Positionf, ...] = tuple(v.to_posf() for v in points)
        self.enabled = True
        self.scale = scale
        self.room: Any = None
        if not self.is_convex():
            raise WalkBoxError(
                f"walkbox must be a convex polygon: {[str(v) for v in points]}"
            )

    def __repr__(self) -> str:
        return f"WalkBox({self.walkbox_id!r}, enabled={self.enabled})"

    def _edges(self):
        n = len(self.vertices)
        for i, p1 in enumerate(self.vertices):
            yield p1, self.vertices[(i + 1) % n]

    def is_convex(self) -> bool:
        """Whether the vertices form a convex, non-degenerate polygon."""
        n = len(self.vertices)
        total = 0.0
        clockwise = False
        for i, p1 in enumerate(self.vertices):
            p2 = self.vertices[(i + 1) % n]
            p3 = self.vertices[(i + 2) % n]
            cp = p1.cross_product(p2, p3)
            if cp == 0:
                continue
            total += cp
            if i == 0:
                clockwise = cp > 0
            elif (cp > 0) != clockwise:
                return False
        return total != 0

    def contains_point(self, p: Positionf) -> bool:
        """Whether the point is a vertex or lies inside the walk box."""
        if p in self.vertices:
            return True
        crossings = sum(1 for p1, p2 in self._edges() if p.is_intersecting(p1, p2))
        return crossings % 2 == 1

    def is_adjacent(self, other: WalkBox) -> bool:
        """Whether both boxes are enabled and one holds a vertex of the other."""
        if not (self.enabled and other.enabled):
            return False
        return any(self.contains_point(v) for v in other.vertices) or any(
            other.contains_point(v) for v in self.vertices
        )

    def distance(self, p: Positionf) -> float:
        """Shortest distance from the edges of the walk box to the point."""
        return min(
            (p.distance(p.closest_point_on_segment(p1, p2)) for p1, p2 in self._edges()),
            default=math.inf,
        )


@dataclass
class WayPoint:
    """A point of a path and the walk box it belongs to."""

    walkbox: WalkBox
    position: Position


class WalkBoxMatrix:
    """A set of walk boxes and the routes between them."""

    def __init__(self, walkboxes: Iterable[WalkBox]) -> None:
        self.walkboxes: list[WalkBox] = list(walkboxes)
        self.itinerary: list[list[int]] = []
        self._reset_itinerary()

    def _reset_itinerary(self) -> None:
        boxes = self.walkboxes
        count = len(boxes)
        distance = [[0] * count for _ in range(count)]
        itinerary = [[INVALID_WALKBOX] * count for _ in range(count)]

        for i, box in enumerate(boxes):
            for j, other in enumerate(boxes):
                if i == j:
                    distance[i][j] = 0
                    itinerary[i][j] = i
                elif box.is_adjacent(other):
                    distance[i][j] = 1
                    itinerary[i][j] = j
                else:
                    distance[i][j] = INFINITY_DISTANCE

        for i in range(count):
            for j in range(count):
                for k in range(count):
                    via = distance[i][k] + distance[k][j]
                    if distance[i][j] > via:
                        distance[i][j] = via
                        itinerary[i][j] = k

        self.itinerary = itinerary

    def walkbox_by_id(self, walkbox_id: str) -> WalkBox | None:
        """Return the walk box with the given identifier, or None."""
        return next((wb for wb in self.walkboxes if wb.walkbox_id == walkbox_id), None)

    def enable_walkbox(self, walkbox_id: str, enabled: bool) -> None:
        """Enable or disable a walk box and recompute the routes."""
        wb = self.walkbox_by_id(walkbox_id)
        if wb is not None:
            wb.enabled = enabled
            self._reset_itinerary()

    def find_path(self, start: Position, end: Position) -> list[WayPoint]:
        """Return the waypoints leading from start towards end."""
        if not self.walkboxes:
            raise WalkBoxError("cannot find a path without walkboxes")
        fromf = start.to_posf()
        tof = end.to_posf()
        current, _ = self.walkbox_at(fromf)
        target, _ = self.walkbox_at(tof)

        path = [WayPoint(self.walkboxes[current], start)]
        while current != target:
            nxt = self.next_walkbox(current, target)
            if nxt == INVALID_WALKBOX:
                break
            position = self.closest_position_to_walkbox(fromf, nxt)
            path.append(WayPoint(self.walkboxes[nxt], position.to_pos()))
            current = nxt
            fromf = position

        final = self.closest_position_on_walkbox(current, tof)
        path.append(WayPoint(self.walkboxes[current], final.to_pos()))
        return path

    def next_walkbox(self, start: int, end: int) -> int:
        """Return the walk box to go to next on the route from start to end."""
        seen: set[int] = set()
        count = len(self.walkboxes)
        while 0 <= start < count and 0 <= end < count:
            step = self.itinerary[start][end]
            if step == end:
                return end
            if step in seen:
                break
            seen.add(step)
            end = step
        return INVALID_WALKBOX

    def walkbox_at(self, p: Positionf) -> tuple[int, bool]:
        """Return the index of the walk box holding p, or of the closest one, and
        whether p is inside it. The lowest index wins among boxes holding p."""
        best = INVALID_WALKBOX
        best_distance = math.inf
        for index, wb in enumerate(self.walkboxes):
            if wb.contains_point(p):
                return index, True
            d = wb.distance(p)
            if d < best_distance:
                best = index
                best_distance = d
        return best, False

    def closest_position_on_walkbox(self, index: int, p: Positionf) -> Positionf:
        """Return p if it is inside the walk box, else the closest point on its edges."""
        if self.walkboxes[index].contains_point(p):
            return p
        return self.closest_position_to_walkbox(p, index)

    def closest_position_to_walkbox(self, p: Positionf, index: int) -> Positionf:
        """Return the point on the edges of the walk box closest to p."""
        wb = self.walkboxes[index]
        best = Positionf()
        best_distance = math.inf
        for p1, p2 in wb._edges():
            candidate = p.closest_point_on_segment(p1, p2)
            d = p.distance(candidate)
            if d < best_distance:
                best = candidate
                best_distance = d
        return best