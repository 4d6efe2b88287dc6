# pctk

The core model of a point-and-click adventure toolkit, in plain Python with no
third-party dependencies.

## Modules

- **`pctk.space`**: 2D geometry. `Position` (integer coordinates) with `add`,
  `sub`, `above`, `distance` (returns a `Size` of absolute differences) and
  `direction_to`; `Positionf` (float coordinates) with `move`,
  `cross_product`, `is_intersecting`, `distance` and
  `closest_point_on_segment`; `Size` with `flip_h`; `Rectangle`, built with
  `new_rect(x, y, w, h)`, whose `contains` treats the right and bottom edges as
  outside; and the `Direction` enum (`RIGHT`, `LEFT`, `UP`, `DOWN`).
- **`pctk.walkbox`**: `WalkBox`, a convex four-sided walkable area (raises
  `WalkBoxError` if its vertices are not four or do not form a convex
  polygon), and `WalkBoxMatrix`, which works out which boxes touch, computes
  routes between them and returns paths as lists of `WayPoint`. Boxes can be
  switched on and off with `enable_walkbox`; disabled boxes connect to nothing.
- **`pctk.resources`**: `ResourceRef` values written as `package:id`, parsed
  with `parse_resource_ref` (raises `ValueError` unless there is exactly one
  colon), and `ResourceBundle`, an in-memory store keyed by `ResourceKind` and
  reference (`put` / `load`, where `load` returns `None` for a missing entry).
- **`pctk.script`**: the `ScriptEntityType` and `ScriptLanguage` enums,
  `ScriptEntityValue` and `ScriptNamedEntityValue`, `new_callback_id`,
  `ScriptCallback` and `CallbackRegistry` (raises `DuplicateCallbackError` when
  a name is declared twice).
- **`pctk.objects`**: `Object`, its `ObjectState`s, `ObjectClass` bit flags
  (`PERSON`, `UNTOUCHABLE`, `PICKABLE`, `OPENABLE`, `CLOSEABLE`, `APPLICABLE`,
  combined with `with_object_classes`) and `ObjectDefaults`, whose
  `call_function` raises `LookupError` for an undeclared callback.
- **`pctk.room`**: `Room`, which holds objects (`declare_object` raises
  `RoomError` on a repeated tag), actors (`put_actor`), a walk-box matrix
  (`declare_walkbox_matrix`) and finds what lies under a position with
  `item_at`.

## Installation

```
pip install .
```

## Examples

Finding a path across walk boxes:

```python
from pctk.space import Position
from pctk.walkbox import WalkBox, WalkBoxMatrix

left = WalkBox("left", [Position(0, 0), Position(10, 0), Position(10, 10), Position(0, 10)], 1.0)
right = WalkBox("right", [Position(10, 0), Position(20, 0), Position(20, 10), Position(10, 10)], 1.0)

matrix = WalkBoxMatrix([left, right])
for waypoint in matrix.find_path(Position(1, 1), Position(18, 5)):
    print(waypoint.walkbox.walkbox_id, waypoint.position)
```

A concave outline is refused:

```python
from pctk.walkbox import WalkBoxError

try:
    WalkBox("bad", [Position(0, 0), Position(4, 0), Position(2, 1), Position(4, 4)], 1.0)
except WalkBoxError as exc:
    print(exc)
```

Resource references:

```python
from pctk.resources import parse_resource_ref

ref = parse_resource_ref("pkg:foo/bar")
print(ref.package, ref.id)   # pkg foo/bar
```

Object classes combine as flags:

```python
from pctk.objects import ObjectClass, with_object_classes

classes = with_object_classes(ObjectClass.PICKABLE, ObjectClass.OPENABLE)
print(classes.has(ObjectClass.PICKABLE))  # True
```

## What it does not do

This package is the game model only. It opens no window and draws nothing,
plays no music or sounds, reads no mouse input and runs no game loop. It has
no script interpreter: a `ScriptCallback` hands its calls to whatever object
is given as its `script`, which must provide a `call_method(callback_id, args)`
method. There is no command to run.

## Running the tests

```
pip install .[test]
pytest
```