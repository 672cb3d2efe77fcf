# magpie

The engine-side data and maths of a small real-time 3D renderer, in plain Python with numpy.

## What is in it

- `magpie.calc`: scalar helpers. These are `lerp`, `approach`, `clamp`, `snap`, `fract`, `sign`, `sigmoid`, `smooth`, `spring` and `within_epsilon`, plus constants such as `PI` and `DEG2RAD`.
- `magpie.rect.Rect`: an immutable axis-aligned rectangle.
  - Edges and corners: `left()`, `right()`, `top_left()` and the rest.
  - Tests: `contains(point)` and `intersects(other)`, both strict.
  - Arithmetic: component-wise `+`, `-`, `*`, `/` and unary `-`.
- `magpie.transform.Transform`: position, origin, axis-angle rotation and scale.
  - `matrix()` returns a 4×4 numpy matrix.
  - The matrix is rebuilt only after a setter has changed something.
- `magpie.colour.Colour`: an immutable RGBA colour with 0–255 channels.
  - Named colours: `Colour.white()`, `Colour.red()` and so on.
  - Packed 32-bit values: `from_packed()` / `packed()`.
  - Conversion: `from_hsv()`, `Colour.lerp()`, `premultiplied()`, `display_colour()`, `to_bytes()` and `to_floats()`.
  - Operators: negation (`-colour`) and scaling (`colour * factor`, `colour / factor`).
- `magpie.timer.Timer`: a stopwatch with `start`, `stop`, `pause`, `resume`, `reset` and `elapsed_seconds`.
  - It runs from `time.perf_counter_ns` by default.
  - Any tick function and frequency can be passed in instead.
- `magpie.keys`: the `KeyboardKey`, `MouseButton`, `GamepadButton`, `GamepadAxis` and `GamepadType` enums, plus `MAX_GAMEPADS` and `MAX_TEXT_INPUT`.
- `magpie.input.InputState`: collects input events and keeps per-frame state.
  - Events go in through the `on_*` methods; `update()` advances one frame.
  - Queries: `is_down`, `is_pressed`, `is_released`, the mouse position and wheel, the modifier keys, typed text, sticks and triggers.
- `magpie.camera.Camera`: a perspective camera.
  - Matrices: `view()`, `rotation_matrix()` and `projection()`.
  - `update(input_state, window_size, dt)` steers the camera by mouse offset from the window centre and moves it with WASD, Space and Shift/Ctrl.
- `magpie.light`: `Light` (a dataclass) and `LightType`.
- `magpie.material`: `MaterialData`, `Material` and `ShaderPassType`. `MaterialData` and `Material` have a `hash_value()`.
- `magpie.model`: `Model` and `Mesh`.
  - A `Model` owns its meshes.
  - `Mesh.build` stores vertices and 16-bit indices, and rejects indices above 65535.
- `magpie.scene`: `Scene` and `RenderObject`.
  - The render list holds every mesh of every object, sorted by material hash.
  - `foreach_object` / `foreach_mesh` stop when the callback returns false.
  - Point lights are kept in a ring of 16 slots.
- `magpie.shadow_atlas`: `ShadowMapAtlas` hands out non-overlapping `AtlasRegion`s of a square atlas, 4096 texels per side by default.
  - `allocate(quality)` returns a region or `None`.
  - `adaptive_alloc` falls back to smaller regions.
- `magpie.stream`: byte streams with `read`, `write`, `seek`, `position`, `size` and `close`.
  - `FileStream` opens files in binary mode and has `get_line`.
  - `MemoryStream` works over a fixed buffer and never grows it. A `bytes` buffer is read-only.
  - Both streams are context managers.
- `magpie.config`: `Config`, `Version`, `WindowMode` and `ConfigFlag`.
  - `Config.has_flag()` checks a flag.
  - `demo_config()` returns the demo settings.

## Install

```
pip install .
```

## Example

```python
from magpie.colour import Colour
from magpie.input import InputState
from magpie.keys import KeyboardKey
from magpie.shadow_atlas import ShadowMapAtlas

colour = Colour.from_hsv(120.0, 1.0, 1.0)   # Colour(r=0, g=255, b=0, a=255)
print(colour.packed())

state = InputState()
state.on_key_down(KeyboardKey.F)
state.update()
assert state.is_pressed(KeyboardKey.F)

atlas = ShadowMapAtlas()
region = atlas.adaptive_alloc(3, 6)
print(region.area)
```

## What it does not do

The package does none of the following:

- It does not open a window.
- It does not read events from the operating system or from gamepads. Callers feed events into `InputState` themselves.
- It does not talk to a GPU, compile shaders or draw anything.
- It does not load models or textures from files.

The package has no command-line program.

## Tests

```
pip install .[test]
pytest
```