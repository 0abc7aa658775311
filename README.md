# freakland

The game-logic core of a small first-person exploration game, written in
Python on top of NumPy. It covers what sits between raw input events and a
renderer: input mapping, a kinematic player body, box collision, cameras that
produce view and projection matrices, procedural meshes and JSON scene
loading.

## Modules

- `freakland.errors`: `EngineError` and its subclasses `AssetNotFoundError`
  (also a `FileNotFoundError`), `InvalidDataError` (also a `ValueError`) and
  `InitFailedError` (also a `RuntimeError`).
- `freakland.log`: levelled, categorised console logging. Each line carries the
  seconds elapsed since `init()`. `Level` runs from `TRACE` to `FATAL`, and
  `set_level` drops messages below a level. `trace`, `debug`, `info`, `warn`,
  `error` and `fatal` write through `log_message`. `ERROR` and `FATAL` go to
  stderr and everything else to stdout.
- `freakland.timer.FrameTimer`: call `init()` once and `begin_frame()` each
  frame. It keeps `delta_time` (clamped to 0.1 s), `total_time`, `frame_count`
  and an exponentially smoothed `fps`. The clock can be injected.
- `freakland.math3d`: `vec3`, `normalize`, `cross`, left-handed `look_at_lh`
  and `perspective_lh_zo` (depth in [0, 1]), `quat_from_euler`,
  `quat_to_mat4`, `translation_matrix`, `scale_matrix`, and the `CameraData`
  snapshot (`view`, `proj`, `position`).
- `freakland.scene`: the components `TransformComponent` (with
  `rebuild_world_matrix`), `MeshComponent`, `MaterialComponent`,
  `NameComponent`, `ColliderComponent` and `InteractableComponent`. It also
  has `SceneLighting`, a minimal entity `Registry` (`create`, `emplace`,
  `get`, `has`, `valid`, `view`) and `Scene`, which owns a registry.
- `freakland.collision`: `AABB`, `RayHit`, `MoveResult` and `CollisionWorld`,
  which holds static boxes. `move_and_slide` resolves movement one axis at a
  time and reports whether the body is grounded. There is an implicit ground
  plane at Y = 0. `test_overlap` checks a box against the world, and
  `raycast` uses slab tests and returns the nearest hit with its face normal.
- `freakland.input`: `Input` builds keyboard, mouse and window state from the
  events passed to `poll_events`: `QuitEvent`, `KeyDownEvent`, `KeyUpEvent`,
  `MouseMotionEvent`, `MouseButtonDownEvent`, `MouseButtonUpEvent` and
  `WindowResizedEvent`. It answers held, pressed-this-frame and
  released-this-frame queries. `Scancode` names the keys the game uses.
- `freakland.input_actions`: `update_input_actions(raw)` returns
  `InputActions`. W/S/A/D give `move`, the mouse delta gives `look_delta`,
  Space gives `jump`, E gives `interact`, Left Shift gives `sprint`, Left Ctrl
  gives `crouch` and F2 gives `toggle_debug_cam`.
- `freakland.fps_controller`: `FPSController` with `FPSControllerConfig` moves
  relative to the camera yaw. It applies gravity and handles jumping, sprinting
  and crouching, with a smoothed eye height. Before standing up from a crouch
  it checks for headroom. `eye_position()` gives the point the camera follows.
- `freakland.gameplay_camera.GameplayCamera`: first-person mouse look with
  pitch clamped to ±89°, following an eye position.
- `freakland.debug_camera`: `DebugCamera` and `CameraState` form a free-fly
  camera. W/A/S/D move it, E or Space raise it, Q or Left Ctrl lower it, and
  Shift sprints. `=` and `-` change the base speed (0.5–200 units/s). The mouse
  looks around while it is captured. Movement is smoothed.
- `freakland.meshes`: `pack_color` (ABGR), `Vertex`, `MeshData`,
  `make_plane`, `make_cube` and `make_cylinder`. `MeshCache` starts with the
  meshes `plane`, `cube` and `cylinder` and maps names to ids. It holds at most
  32 meshes.
- `freakland.scene_loader`: `load_scene` reads a JSON file, and
  `load_scene_data` takes an already decoded document. Both fill a `Registry`
  and return a `SceneLoadResult` with the lighting and the entity count.
  `parse_lighting` reads only the `sun` and `fog` blocks.

## Installing

```
pip install .
```

## A frame of gameplay

```python
from freakland.collision import CollisionWorld
from freakland.fps_controller import FPSController
from freakland.gameplay_camera import GameplayCamera
from freakland.input import Input, KeyDownEvent, Scancode
from freakland.input_actions import update_input_actions
from freakland.math3d import vec3

world = CollisionWorld()
world.add_static_box(vec3(0.0, 1.0, 0.0), vec3(1.0, 1.0, 1.0))

player = FPSController(vec3(0.0, 0.0, 8.0))
camera = GameplayCamera(-90.0, 0.0)
raw = Input()

raw.poll_events([KeyDownEvent(Scancode.W)])
actions = update_input_actions(raw)

camera.update(player.eye_position(), actions.look_delta[0], actions.look_delta[1])
player.update(actions, world, camera.yaw, 1 / 60)
data = camera.camera_data()
```

## Loading a scene

```python
from freakland.meshes import MeshCache
from freakland.scene import Scene
from freakland.scene_loader import load_scene

meshes = MeshCache()
scene = Scene()
result = load_scene("content/raw/scenes/test_scene.json", scene.registry, meshes.find_by_name)
print(result.entity_count, result.lighting.fog_density)
```

Each entity in a scene file needs a `mesh` name that the resolver knows.
Entities without one, or with an unknown mesh, are skipped with a warning. The
fields `position`, `rotation` (Euler degrees), `scale` (an array or a single
number), `material` (`diffuse`, `emissive`, `roughness`), `name`, `collider`
(half-extents) and `interactable` (a label) are optional. Names and labels are
cut to 63 characters. A file that cannot be opened raises
`AssetNotFoundError`, and malformed JSON raises `InvalidDataError`.

## Asset baker

```
freakland-baker <command> [options]
```

Run without arguments, it prints usage listing `mesh`, `tex` and `scene` and
exits with status 1. Given a command, it logs that no baking backend is
available and exits with status 0. It converts nothing.

## What it does not do

The package opens no window, does no GPU rendering and plays no audio. It
reads no events from the operating system itself: the host has to feed events
into `Input.poll_events` and pass the `CameraData` and mesh data to its own
renderer. It has no game executable or main loop either, so the frame loop is
up to the host.

## Tests

```
pip install .[test]
pytest
```