# solong

A small tile-based puzzle game. Walk your character around a map, pick up
every coin, then step onto the exit. Each move is counted and printed to the
terminal. Reaching the exit prints how many moves it took and ends the game.

## Installing

```
pip install .
```

This installs the `solong` command and its one dependency, pygame.

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument, the map file. It needs the images
`wall.xpm`, `floor.xpm`, `player.xpm`, `coin.xpm` and `exit.xpm` in an
`assets/` directory under the current working directory. It exits with
status 1 and a message on standard error in these cases:

- the wrong number of arguments: it prints a usage line;
- a map that cannot be read, is empty or has no player start: it prints
  `Failed to load map.`;
- missing or unreadable images: it prints `Failed to initialize game.` and
  then one `Missing <name>.xpm` line for each image it could not load.

The game opens a 640×480 window titled `so_long`. Each tile is drawn as a
64×64 image.

Controls:

| Key   | Action      |
|-------|-------------|
| W     | move up     |
| S     | move down   |
| A     | move left   |
| D     | move right  |
| Esc   | quit        |

Closing the window also quits.

## Map files

A map is a plain text file, one row per line, built from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | coin         |
| `E`  | exit         |

Any other character is drawn as floor and can be walked on. Walls block
movement, moves off the edge of the map are ignored, and the exit stays
closed while any coin is left on the map. If the map holds more than one
`P`, the first one in reading order is the player.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
import io

from solong.controls import Game, GameOver, Key
from solong.game_map import load_map

game_map = load_map("level.ber")
print(game_map.find_player(), game_map.has_collectibles())

game = Game(game_map, out=io.StringIO())
try:
    game.move(1, 0)           # True if the player moved
    game.handle_key(Key.D)    # same, driven by a key code
except GameOver as over:
    print(over.won, over.moves)
```

- `solong.game_map`: `load_map(path)` returns a `GameMap`; it raises
  `MapLoadError` when the file cannot be read or holds no lines.
  `GameMap` has `rows`, `width`, `height`, `tile_at(x, y)` (raises
  `IndexError` off the map), `set_tile(x, y, tile)`, `has_collectibles()`
  and `find_player()`.
- `solong.controls`: `Game(game_map, out=None)` raises `MapLoadError` when
  the map has no player. `move(dx, dy)` and `handle_key(keycode)` return
  whether the player moved and write `Move: <n>` to `out` (standard output
  by default). Reaching the exit raises `GameOver` with `won=True`; Escape
  raises it with `won=False`. `Key` holds the key codes the game reacts to.
- `solong.render`: `load_images(asset_dir)` loads the five images and raises
  `AssetError` (with a `missing` tuple) for any it cannot load;
  `image_name_for(tile)` names the image for a tile; `Renderer(surface,
  images).draw(game_map)` blits the map onto a pygame surface.

## What it does not do

- It does not check that a map is rectangular, enclosed by walls, holds
  exactly one exit or can be solved; it only requires a player start.
- The window has a fixed size; parts of a map larger than 10×7 tiles fall
  outside it.
- The move count is shown only in the terminal, not in the window.

## Running the tests

```
pip install .[test]
pytest
```