# raycaster

A small first-person raycaster. A player stands on a fixed tile map and
looks around a textured maze drawn column by column from cast rays, with a
ceiling and floor filling the space above and below the walls.

## Installing

```
pip install .
```

For running the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
raycaster
raycaster --textures path/to/textures
```

This opens a 1280×720 window titled "Game". The wall textures are read with
Pillow from a directory holding `north.xpm`, `south.xpm`, `east.xpm` and
`west.xpm` (by default `textures/` in the current directory). If any of them
cannot be read, the command prints an error and exits with status 1.

Controls:

| Key        | Action              |
|------------|---------------------|
| W / S      | move forward / back |
| A / D      | strafe left / right |
| ← / →      | turn left / right   |

The game runs until its window is closed; there is no key that quits it.

## Using it as a library

The pieces of the engine can be used on their own:

- `raycaster.constants` — screen size (`WIDTH`, `HEIGHT`), `TILE_SIZE`,
  `NUM_RAYS` and the key symbols.
- `raycaster.worldmap` — `get_map()` returns a copy of the built-in grid
  (`'1'` is wall, `'0'` is floor), and `has_wall_at(x, y, grid)` tells
  whether a world position is solid or outside the world.
- `raycaster.player` — `Player`, a dataclass with position, angle and held
  keys, plus `reset()` and `move(grid)`; a step into a wall is refused.
- `raycaster.controls` — `Key`, and `key_press(keycode, player)` /
  `key_release(keycode, player)` to set and clear the player's flags.
- `raycaster.ray` — `normalize_angle(angle)`,
  `cast_ray(player, ray_angle, grid)` and `cast_all_rays(player, grid)`,
  which return `Ray` results with hit point, distance and facing;
  `cast_all_rays` also stores them on `player.rays`.
- `raycaster.texture` — `Texture` with `texel(x, y)` (coordinates clamped),
  `WallTextures` with `select(ray)`, and `load_texture(path)`.
- `raycaster.draw` — `Image`, a 32-bit frame buffer with `put_pixel`,
  `get_pixel`, `draw_square`, `clear`, `draw_wall_split` and `tobytes`.
- `raycaster.render` — `Game`, `render_3d_walls(game)` and `render(game)`,
  which clears the image, casts the rays, draws the walls, moves the player
  and hands the image to `game.present` if it is set.
- `raycaster.app` — `init(texture_dir)` builds a `Game`, and `main(argv)`
  is the `raycaster` command.
- `raycaster.linereader` — `LineReader` and `get_next_line(fd)` for reading
  a file descriptor line by line through a fixed-size buffer.

The `raycaster.ftlib` sub-package holds small helpers:

- `chars` — ASCII classification, case mapping, `atoi`, `itoa`, `utoa`.
- `strings` — `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strnstr`,
  `strncmp`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`,
  `striteri`, `strreverse`.
- `memory` — `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` on bytearrays.
- `linkedlist` — `LinkedList` and `Node`.

```python
from raycaster.player import Player
from raycaster.ray import cast_all_rays
from raycaster.worldmap import get_map

grid = get_map()
player = Player()
rays = cast_all_rays(player, grid)
print(min(ray.distance for ray in rays))
```

## What it does not do

The map is built in; there is no loading of map or scene files. There are no
helpers for writing characters, strings or numbers to file descriptors.