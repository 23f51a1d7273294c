# gaemi

Building blocks for a small 2D game engine, in plain Python with no
third-party dependencies.

## Modules

- `gaemi.mathutil`: `to_radians`, `to_degrees`, `near_zero`, `clamp`,
  `cot` and `lerp`, plus the constants `PI`, `TWO_PI`, `PI_OVER_2`,
  `INFINITY` and `NEG_INFINITY`.
- `gaemi.vector`: immutable `Vector2`, `Vector3` and `Vector4`.
  - `Vector2` and `Vector3` support `+`, `-`, and `*` by a number or
    component-wise by a vector.
  - They also have `length`, `length_sq`, `normalized`, `dot`, `lerp` and
    `reflect`; `Vector3` adds `cross`.
  - Named constants include `Vector3.UNIT_X` and `Vector2.ZERO`.
- `gaemi.matrix`: immutable row-major `Matrix3` and `Matrix4` in the
  row-vector convention, multiplied with `*`.
  - `Matrix3` has `create_scale`, `create_rotation` and
    `create_translation`.
  - `Matrix4` has `create_scale`, `create_rotation_x/y/z`,
    `create_translation`, `create_from_quaternion`, `create_look_at`,
    `create_ortho`, `create_perspective_fov` and `create_simple_view_proj`.
  - `Matrix4` also has `inverted()`, which raises `ValueError` for a
    singular matrix, and the accessors `translation`, `x_axis`, `y_axis`,
    `z_axis` and `scale`.
  - `flat()` returns the values in row-major order.
  - The module functions `transform_vector2`, `transform_vector3` and
    `transform_with_persp_div` transform vectors by a matrix.
- `gaemi.quaternion`: immutable `Quaternion`.
  - The default value is the identity; `from_axis_angle` builds one from
    an axis and an angle.
  - It has `conjugated`, `normalized`, `dot`, `lerp`, `slerp`,
    `concatenate` and `rotate(vector)`.
- `gaemi.color`: `Color`, an immutable RGBA colour with integer channels
  in 0..255.
  - `Color.from_int` unpacks a `0xAABBGGRR` value.
  - It has `lerp`, `*` scaling, `to_vector3` and `to_vector4`.
  - Named colours include `Color.RED` and `Color.LIGHT_BLUE`.
- `gaemi.vertex2d`: the vertex data classes `Position`, `ColorRGBA8`, `UV`
  and `Vertex2D`, and `Rectangle`.
  - `Rectangle` has `from_size(left, top, width, height)` and `center()`.
- `gaemi.log`: `Log`, configured by a `LogConfig`.
  - `LogConfig` holds a reporting level, a restart flag and a file path,
    which defaults to `gl.log`.
  - `Log.write(level, message)` drops messages more verbose than the
    reporting level.
  - Other messages get a timestamp and a label from `label(level)`. The
    line is appended to the file and written to a stream, stdout by
    default.
  - `restart()` empties the file.
- `gaemi.input`: `KeyboardState`, `InputState` and `InputManager`.
  - `InputManager.poll_inputs(events)` takes `(KEY_DOWN, key)`,
    `(KEY_UP, key)` and `QUIT` events. It returns `False` when a quit was
    requested.
  - `prepare_for_update()` starts a new frame.
  - `KeyboardState` reports a key as `is_just_pressed`, `is_held`,
    `is_just_released`, `is_free`, `is_up` or `is_down`, or gives its
    `KeyStatus`.
- `gaemi.timer`: `Timer`.
  - `compute_delta_time()` returns the milliseconds since the last frame.
  - `delay_time()` sleeps out the rest of the frame to hold the target
    fps, 60 by default.
  - The clock and sleep functions can be passed in.
- `gaemi.spritebatch`: `Spritebatch`, `Glyph`, `RenderBatch`, `Sprite`,
  `GlyphSortType` and `rotate_point`.
  - Glyphs are added between `begin(sort_type)` and `end()`, optionally
    rotated by an angle, or facing a direction with `draw_toward`.
  - `end()` sorts the glyphs by texture, by depth or not at all. It then
    groups runs that share a texture into `render_batches` and fills
    `vertices`.
  - `render(draw_call)` calls `draw_call(texture, offset, num_vertices)`
    once for each batch.
- `gaemi.game`: `Game` and the abstract `GameState`.
  - `Game` keeps a stack of states, managed with `change_state`,
    `push_state` and `pop_state`.
  - `handle_inputs(events)`, `update(dt)` and `render()` are forwarded to
    the top state.
  - `projection()` returns the orthographic pixel projection for the
    window size given to `init()`.

## Example

```python
import math

from gaemi.matrix import Matrix4, transform_vector3
from gaemi.spritebatch import GlyphSortType, Spritebatch
from gaemi.vector import Vector3, Vector4
from gaemi.vertex2d import ColorRGBA8

m = Matrix4.create_rotation_z(math.pi / 2) * Matrix4.create_translation(Vector3(1.0, 2.0, 3.0))
print(transform_vector3(Vector3(1.0, 0.0, 0.0), m, 1.0))

batch = Spritebatch()
batch.begin(GlyphSortType.TEXTURE)
white = ColorRGBA8(255, 255, 255, 255)
batch.draw(Vector4(0, 0, 10, 10), Vector4(0, 0, 1, 1), 2, 0.0, white)
batch.draw(Vector4(20, 0, 10, 10), Vector4(0, 0, 1, 1), 1, 0.0, white, 0.5)
batch.end()
batch.render(lambda texture, offset, count: print(texture, offset, count))
```

Input is fed in as events:

```python
from gaemi.input import KEY_DOWN, InputManager

manager = InputManager()
manager.prepare_for_update()
manager.poll_inputs([(KEY_DOWN, "left")])
print(manager.state().keyboard_state.is_just_pressed("left"))  # True
```

## What it does not do

gaemi has no window, graphics or audio back end. It opens no window and
loads no shaders, textures or images. It reads no events from the
operating system: input events must be passed to `InputManager` or
`Game.handle_inputs`. `Spritebatch.render` hands batches to a callback
and draws nothing itself. There is no command-line program and no
ready-made game; you subclass `GameState` and drive the loop yourself.

## Tests

The tests use pytest. Install the package with its `test` extra and run
pytest from the project directory.