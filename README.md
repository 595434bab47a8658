# skyflap

A small side-scrolling arcade game: steer a bird through an endless run of
pipes, one tap at a time. It runs on a compact entity-component engine made
of game objects, components, a physics step with box colliders, and a
sprite renderer that draws into a 32-bit pixel buffer shown in a pygame
window of 1024 x 768 pixels.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
skyflap
```

Options:

- `--atlas PATH`: the sprite atlas file (default `assets/atlas.bin`).
- `--sprites PATH`: the sprite coordinate list (default `assets/atlas.txt`).
- `--seed N`: seed for the random pipe heights, to make a run repeatable.

If the assets cannot be read, or no display can be opened, the command
prints a message and exits with status 1.

Controls:

- **Space**: start a round, then flap.
- **Escape**: quit. Closing the window, Ctrl+C or SIGTERM also quit.

Each pipe you pass adds a point. When the bird hits a pipe, the ground or
the ceiling, the game stops and shows "Game Over". Three seconds later the
board resets and a new round can be started with Space.

## Assets

The package does not ship any artwork: you supply the atlas and the sprite
list yourself.

- The atlas file starts with a little-endian header: width and height as
  16-bit unsigned integers, then the length of the pixel data as a 32-bit
  unsigned integer. The pixel data that follows is run-length encoded
  32-bit ARGB pixels (see `skyflap.image.rle_decode`).
- The sprite list is whitespace-separated entries of
  `name x y width height`, in atlas pixels. When a name repeats, the first
  entry is used.

The game needs these sprites: `bg_day`, `land`, `pipe_up`, `pipe_down`,
`bird0_0`, `bird0_1`, `bird0_2`, `text_ready`, `tutorial`,
`text_game_over`, and `number_score_00` to `number_score_09`.

## Using the engine

The building blocks can be used on their own. The `skyflap.vector2`,
`skyflap.animation` and `skyflap.surface` modules hold plain value types
and pixel operations:

```python
from skyflap.animation import LoopAnimator
from skyflap.vector2 import Vector2

velocity = Vector2(0.0, -160.0) + Vector2(0.0, 500.0) * 0.1

animator = LoopAnimator(10.0, 4.0)
animator.step(0.25)  # advances 2.5 frames into a 4-frame loop
```

`skyflap.surface.Surface` is a grid of 32-bit pixels backed by a numpy
array, with `blit` (optionally alpha blended), `vertical_flip` and
`clear`. `skyflap.image.Image` adds run-length decoding and
nearest-neighbour scaling, and `skyflap.sprite_factory.SpriteFactory`
loads an atlas and creates `skyflap.sprite.Sprite` objects by name.

A scene is made of game objects that carry components. `skyflap.scene.Scene`
creates the objects, `skyflap.ecs.GameObject.add_component` attaches
behaviour such as `skyflap.components.physics.Rigidbody` or
`skyflap.components.rendering.SpriteRenderer`, and `Scene.initialize`,
`Scene.update` and `Scene.draw` drive it frame by frame. Keyboard state
reaches components through `skyflap.keys.InputState`.
`skyflap.game.FlappyBirdGame` assembles the complete game from these parts
and can be driven without a window by calling `act` and `draw` against a
`skyflap.surface.Screen`.