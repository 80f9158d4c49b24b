# bravoengine

The engine-independent building blocks of a small 2D game engine, in plain
Python with no third-party dependencies.

## Modules

- `bravoengine.geometry`: the dataclasses `Vector2`, `Point`, `Color`, `FRect`,
  `Rect` and `Transform`. A `Vector2` supports `+`, `-`, multiplication by a
  scalar or by another vector (component-wise), and division by a scalar.
  `Rect.intersects` tests for overlap, where touching edges do not count.
  Transforms add component by component and have `translate`, `rotate`,
  `scale_by` and `copy`.
- `bravoengine.pathfinding`: `Pathfinding` runs A* over a grid whose nodes are
  numbered row by row. You supply the adjacency mapping. The heuristic is the
  Manhattan distance (`distance`). `find_path` returns the list of nodes from
  start to goal, or `[]` when the goal cannot be reached.
- `bravoengine.components`: `GameObject` has `add_component`,
  `get_components(kind)` and `has_component(kind)`. It also defines `Component`,
  whose `clone` makes a deep copy that keeps the parent object, and the
  physics-facing components `Collider`, `BoxCollider`, `CircleCollider` and
  `RigidBody`. Assigning to a property of a collider or rigid body sets its
  `is_updated` flag. `RigidBody` queues forces and torques (`add_force`,
  `add_torque`, `forces_buffer`, `torque_buffer`, `clear_forces_buffer`,
  `clear_torque_buffer`). The module also provides `BodyType`, `BodyFlags`,
  `BodyProperties` and `BodyID`.
- `bravoengine.events`: `EventManager` calls the subscribed callbacks for an
  `Event`'s `EventType`, in the order they subscribed (`subscribe`, `dispatch`,
  `handle_events`). It also defines `Mouse` and `MouseButton`.
- `bravoengine.sprite`: `Sprite` shares its texture between clones.
  `Animation` is a sequence of sprite frames with the following members:
  `get_frame` applies the animation's flip flags and raises `IndexError` when
  the index is out of range; `current_frame(ticks)` picks a frame from the time
  in seconds; `world_transform` adds the parent object's transform; and
  `color_filter` is read from the first frame and written to every frame.
- `bravoengine.camera`: `Camera` is a `GameObject`. It has a background colour,
  a size, a viewport, a render order and a `CameraDebugOverlay`. `origin` is its
  top-left corner. `start_shake`, `update(ticks)` and `stop_shake` drive a
  screen shake that fades out over the shake's duration.
- `bravoengine.audio`: `AudioSource` holds a file name and whether it is music.
  Its volume is clamped to 100 and raises `ValueError` when negative. Its
  horizontal direction is clamped to -90…90. `AudioManager` loads and plays
  sources through an `AudioFacade` implementation that you supply. It raises
  `ValueError` when asked to pause, resume or stop a sound effect, and it plays
  sources marked `play_on_wake` on `wake()`.
- `bravoengine.savegame`: `SaveGame` is bound to a JSON file, and an existing
  file is loaded when the object is created. A save game holds int, float and
  string fields plus named `SaveArray`s. `store` writes the file and `remove`
  deletes it. Adding a name that is already taken raises `ValueError`, and
  looking up a missing name raises `KeyError`. `SaveGameManager` keeps save
  games by identifier. `is_integer` and `is_float` check number text.
- `bravoengine.ui`: `Button`, `Text`, `BoundingBox`, the abstract
  `ButtonBehaviourScript`, and `UIManager`, which queues mouse events and, on
  `update`, calls the press, release, hover and unhover hooks of buttons' scripts
  and their click and release callbacks.

## Installation

```
pip install .
```

## Examples

Find a path with A* on a 3×3 grid:

```python
from bravoengine.pathfinding import Pathfinding

adjacency = {0: [1], 1: [0, 2], 2: [1, 5], 5: [2, 8], 8: [5]}
finder = Pathfinding(adjacency, 3, 3)
print(finder.find_path(0, 8))  # [0, 1, 2, 5, 8]
```

Subscribe to events and dispatch them:

```python
from bravoengine.events import Event, EventManager, EventType

manager = EventManager()
manager.subscribe(lambda event: print("quit!"), EventType.QUIT)
manager.dispatch(Event(EventType.QUIT))
```

Keep a save game:

```python
from bravoengine.savegame import SaveGameManager

saves = SaveGameManager()
game = saves.create_save_game("slot1", "slot1.json")
game.add_int_field("coins", 10)
game.add_array("player")
player = game.get_array("player")
player.add_string_field("name", "Hero")
game.set_array("player", player)
game.store()
```

## What this package does not do

There is no window, renderer, input polling or main loop here. Events,
mouse positions, times (`ticks`) and the screen-to-world conversion used by
`UIManager.update` are all passed in by the caller. No audio back end is
included: `AudioFacade` is an interface to implement. Colliders and rigid
bodies only hold physical settings and queued forces. No physics world
simulates them. There is no scene manager.

## Running the tests

```
pip install .[test]
pytest
```