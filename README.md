# blockhop

A small side-scrolling platformer. You run along a level 64 tiles wide, jump
onto blocks and avoid two enemies that walk back and forth. A timer that
starts at 100 and counts down in seconds is drawn in the top-left corner.
Touching an enemy puts you back at the start.

The game runs on a small engine: a tick loop, a renderer with a scrolling
camera and palette recolouring, rebindable keys, a resource manager and a
simple UI layer.

## Installing

```
pip install .
```

This installs `pygame`, the only runtime dependency.

## Playing

```
blockhop
```

This opens a 512×512 window and runs at roughly one frame every 16 ms.

Options:

- `--root DIR`: the directory that holds `res/` (default: the current
  directory).
- `--frames N`: stop after `N` frames (`N` must be at least 1).

| Action      | Keys                 |
|-------------|----------------------|
| Move left   | `A` or Left arrow    |
| Move right  | `D` or Right arrow   |
| Jump        | `W` or Up arrow      |
| Quit        | `Q` or close window  |

Resources are loaded from `res/` under the root directory:

- `res/textures/noise_a.png`
- `res/textures/noise_b.png`
- `res/sound/beep.wav`
- `res/font/Mx437_EverexME_5x8.ttf`

A file that is missing or cannot be loaded is skipped: the game still runs and
simply does not draw whatever uses it (a missing font means no timer text).

## What the game does not do

- There is one level. It has no goal or finish line, and nothing happens when
  the timer passes zero.
- The sound is loaded but never played.
- The UI layer is not used by the game, so there are no menus or buttons.
- `Escape` is bound to an exit input, but the game does not act on it; use `Q`
  or close the window.

## Using the engine

The modules can also be used on their own:

- `blockhop.geometry.Rect`: integer rectangles with `contains(point)` (edges
  included) and `intersects(other)` (touching edges do not count).
- `blockhop.keys.Keys` and `KeyMap`: keyboard and mouse state. `pressed(key)`
  is true on the frame after a binding of the key goes down, and `held(key)`
  is true while any binding is down. `remap_key(key, new_key, bind_index)`
  changes one of the two binding slots. `handle_events(events)` takes pygame
  events, tracks the mouse position and wheel, and sets `quit` on a window
  close or while `Q` is down.
- `blockhop.tick.Ticker`: a list of update functions. `tick(now_ms=None)`
  calls each with the seconds since the previous tick and returns that value.
- `blockhop.resources.ResourceManager` and `Palette`: named images, sounds and
  fonts loaded from a root directory, and the four-colour palettes
  `player_pal`, `enemy_pal` and `block_pal`. `Palette.recolor(r, g, b, a)`
  picks a colour by the pixel's brightness.
- `blockhop.renderer.Renderer`: draw functions run by `render()`, a camera set
  with `set_camera(x, y)`, and `draw_texture`, `draw_texture_pal` and
  `draw_text`, each returning whether anything was drawn.
  `recolor_surface(surface, palette)` gives a recoloured copy of a surface.
- `blockhop.ui.Ui`, `UiHandler` and `Elem`: elements with update, press and
  render callbacks. An element is pressed when the mouse is over it and
  `Enter` is held or the mouse is clicked.
- `blockhop.game.Game`: the platformer itself, with `tick(dt)` and `render()`.

## Running the tests

```
pip install .[test]
pytest
```