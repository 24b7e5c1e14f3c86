# quadplay

Game logic with no rendering attached. Each part is plain Python state that
you advance yourself, from any frame loop, any renderer or a test suite.

## What is inside

- `quadplay.physics` is pixel-stepped platformer collision.
  - A `World` holds three kinds of things: static tile layers, moving solids
    and actors.
  - Tiles are `Tile.EMPTY`, `Tile.SOLID` and `Tile.JUMP_THROUGH`. Collision
    queries may also return `Tile.COLLIDER`, which means a moving solid was hit.
  - `add_static_tiled_layer` adds a layer, `add_actor` adds an actor and
    `add_solid` adds a solid.
  - Actors move one pixel at a time with `move_h` and `move_v`. Both return
    `False` when blocked. Sub-pixel remainders are kept between calls.
  - `descent` lets an actor drop through jump-through tiles.
  - `solid_move` moves a solid. It carries the actors riding on top and pushes
    the actors in its path. An actor that cannot be pushed is marked as
    squished, which `squished` reports.
  - The queries are `collide_solids`, `collide_tag`, `collide_check`,
    `solid_at`, `tag_at`, `actor_pos` and `solid_pos`.
- `quadplay.particle_config` describes particle emitters:
  - `EmitterConfig` holds all the settings.
  - Emission shapes are `PointEmission`, `RectEmission` and `SphereEmission`,
    each with `random_point(rng)`.
  - Particle meshes are `RectangleShape`, `CircleShape` and `CustomMeshShape`,
    each with `geometry()`, which returns a `Mesh` of vertices and indices.
  - `Curve` is a size curve. `batch()` samples it into a `BatchedCurve`, which
    `get(t)` interpolates.
  - The remaining types are `ColorCurve`, the `AtlasConfig` sprite-sheet
    layout, `BlendMode` and `ParticleMaterial`.
- `quadplay.emitter` simulates particles.
  - `Emitter.update(dt, position)` spawns particles according to the config.
    It then moves each `Particle` and applies linear acceleration and gravity.
    It blends each particle's colour along the colour curve, scales its size
    by the size curve, picks its atlas frame, and drops the particles that
    have expired.
  - `Emitter.emit(pos, n)` emits particles immediately.
  - `Emitter.reset()` clears the emitter.
  - `Emitter.rebuild_size_curve()` re-samples the size curve after the config
    changes.
  - `EmittersCache` keeps a pool of emitters for one-off effects. `spawn(pos)`
    starts one and `update(dt)` advances them all. An emitter goes back to
    the pool once it stops emitting.
- `quadplay.life` is Conway's Game of Life on a bounded `Board`.
  - Cells are `CellState.ALIVE` or `CellState.DEAD`.
  - A board has `get`, `set`, `neighbours`, `step` and `alive_cells`.
  - `random_board(width, height, rng)` makes a board where each cell is alive
    with probability one in five.
- `quadplay.snake` is the snake game, on a 16×16 grid by default. A
  `SnakeGame` has `steer(Direction)`, `tick()` and `reset()`.
- `quadplay.arkanoid` is a paddle-and-blocks simulation.
  `Arkanoid.update(delta, left, right, space)` advances it. The
  `blocks_left` property counts the blocks still standing.
- `quadplay.asteroids` is the asteroids game.
  - An `AsteroidsGame` holds a `Ship`, `Bullet`s and `Asteroid`s.
  - `update(frame_t, up, left, right, space)` advances it and `reset()`
    starts a new game.
  - The game has `gameover` and `won` flags.
  - `wrap_around(pos, width, height)` moves a point that left the screen to
    the opposite edge.
- `quadplay.angles` holds camera helpers: `short_angle_dist`, `angle_lerp`,
  `wrap_degrees`, `clamp_pitch` and `look_vectors`. `look_vectors` returns unit
  front, right and up vectors for a given yaw and pitch.
- `quadplay.inventory` models equipment slots.
  - An `Inventory` holds the bought items and seven labelled `Slot`s.
  - `buy` adds an item, `set_item` fills or empties a slot, and `slot` looks
    one up.
  - `apply` carries out the commands `Fit`, `Unfit` and `Refit`.

## What it does not do

quadplay has no window, no drawing, no input handling, no audio and no
command-line program. Your own loop reads input, calls `update`/`tick`/`step`,
and draws the resulting state with whatever library it likes.

Several `EmitterConfig` fields are stored but not used by the simulation:
`texture`, `material`, `blend_mode` and `post_processing`. They exist for a
renderer to read.

`Curve.batch()` supports linear interpolation only. `Interpolation.BEZIER`
raises `ValueError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: platformer physics

```python
from quadplay.physics import World, Tile

world = World()
# A 4×3 layer of 8×8 tiles. The bottom row is solid ground.
layer = [Tile.EMPTY] * 8 + [Tile.SOLID] * 4
world.add_static_tiled_layer(layer, 8.0, 8.0, 4, 1)

player = world.add_actor((8.0, 0.0), 8, 8)
landed = not world.move_v(player, 20.0)   # blocked by the ground
print(landed, world.actor_pos(player))    # True (8.0, 8.0)
```

## Example: Game of Life

```python
import random
from quadplay.life import random_board

board = random_board(64, 48, random.Random(1))
board.step()
print(len(board.alive_cells()))
```

## Example: particles

```python
from quadplay.emitter import Emitter
from quadplay.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=10, lifetime=0.5))
for _ in range(60):
    emitter.update(1 / 60, (100.0, 100.0))
for particle in emitter.particles:
    print(particle.pos, particle.size, particle.color)
```