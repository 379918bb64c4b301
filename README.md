# brickfall

A small brick-breaking arcade game. You steer a paddle along the bottom of
the playfield, keep the ball in play and knock out the blocks of the stage.
A tiled shutter slides over the screen between stages, and a column of
hearts shows the lives you have left.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, draws the sprites and reads
the keyboard.

## Playing

```
brickfall
```

The game opens a 640×480 window titled "Main" and runs at about 60 frames a
second. Options:

| Option          | Meaning                                                    |
|-----------------|------------------------------------------------------------|
| `--images DIR`  | Directory the sprites are loaded from (default: `image`)   |
| `--fullscreen`  | Run full screen instead of in a window                     |
| `--frames N`    | Stop after N frames                                        |

If the window cannot be opened or an image cannot be loaded, the command
prints an error code and message on stderr and exits with status 1.

| Key          | Action                                        |
|--------------|-----------------------------------------------|
| Left / Right | Move the paddle                               |
| Return       | Switch from the playfield to the game-over scene |
| Escape       | Quit                                          |

Each stage starts with the shutter sliding away; the paddle only answers the
keys once it is fully raised. Where the ball meets the paddle decides how it
leaves: the outer segments tilt the bounce the most, the middle returns it
straight up. Bounces that would come out nearly flat are turned into a plain
upward bounce. Blocks the ball touches are removed.

When the ball drops below the bottom of the window you lose a life and the
paddle and ball start over; with all three lives gone the game ends. Clearing
every block lowers the shutter, moves from the first stage to the second and
raises the shutter again.

## Images

The sprites are not shipped with the package. The image directory must hold
`frameV(4x16).png`, `frameH(16x4).png`, `bar.png`, `block.png`, `ball.png`,
`fontex.png`, `brack(128x128).png`, `heart(32x32).png` and
`emptyHeart(32x32).png`. In images without an alpha channel, pure green
(0, 255, 0) is drawn as transparent.

## Using the pieces

The game logic runs without a window. Anything with a
`draw_image(x, y, name)` method can stand in as the canvas.

```python
from brickfall.constants import Key
from brickfall.keyboard import KeyState
from brickfall.scenes import MainScene

scene = MainScene()
keys = KeyState()
while not scene.accepting_input:      # let the shutter finish sliding away
    scene.update(1.0)

keys.update({Key.RIGHT})
scene.input_update(keys)
scene.update(1.0)
print(scene.bar.x, scene.ball.position, scene.life.count)
```

- `brickfall.vector2` — `Vector2`, an immutable 2D vector with reflections
  (`reverse_up`, `reverse_lu`, …) and `turn`, and `Box`, an axis-aligned
  rectangle.
- `brickfall.collision` — `CollisionWorld`, named boxes and `is_hit`
  overlap tests (touching edges do not count).
- `brickfall.keyboard` — `KeyState`, per-key hold and release counters with
  `is_held`, `is_pressed` and `is_released`.
- `brickfall.block`, `brickfall.bar`, `brickfall.ball`, `brickfall.life`,
  `brickfall.shutter`, `brickfall.frame` — the playfield objects.
- `brickfall.scenes` — `MainScene`, `GameOverScene` and `NullScene`.
- `brickfall.game` — `Game`, a stack of scenes stepped once per `play`.
- `brickfall.fps` — `FrameRateController`, which paces frames to 60 a second.
- `brickfall.graphics` — `Renderer`, which draws onto a pygame surface.
- `brickfall.app` — `Application` and the `main` behind the `brickfall`
  command.

## What it does not do

- There is no title screen, ranking, settings dialog, pause or ending; the
  game goes straight to the playfield.
- The game-over scene is blank and never moves on; only Escape or closing
  the window leaves it.
- There is no score or combo display.
- Stages advance only from the first to the second; clearing the second
  stage does not lead to a further one.

## Tests

```
pip install .[test]
pytest
```