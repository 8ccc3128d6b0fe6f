# platformer

A small platform game built on pygame. A menu window opens first. From it you
start the game or show the credits. In the game a character moves over a tile
map read from a level file. It runs left and right and jumps.

## Installing

```
pip install .
```

The game needs `pygame`. To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

Run the game from a directory that holds the `img/` and `level/` folders:

```
platformer
platformer --level path/to/other.lvl
```

`--level` names the level file to play. The default is `level/niveau0.lvl`.

In the menu:

- `1` or keypad `1` starts the game,
- `2` or keypad `2` shows the credits,
- `Escape` or closing the window quits.

In the game:

- `Right` and `Left` move the character 2 pixels per frame,
- `Up` starts a jump. The character rises 70 pixels and then falls back,
- `Escape` or closing the window quits.

When the game ends, the program ends too. If the menu window cannot be opened,
the command logs an error and exits with status 0.

## Files the game reads

- `img/menu.jpg` and `img/credit.png`: the menu screen and the credits screen.
- `img/Mario1.png` to `img/Mario6.png`: the character's images, in this order:
  - facing right: standing, running, jumping,
  - facing left: standing, running, jumping.
- Map tiles 0 to 7, in tile order:
  - `img/sky.png`,
  - `img/sol.png`,
  - `img/block.png`,
  - `img/boite.png`,
  - `img/tuyau1.png` to `img/tuyau4.png`.

  Only the sky (tile 0) is marked passable. Tile numbers with no sprite are
  left undrawn.
- The level file.

## Level format

A level file is plain text with three parts:

1. a first line holding the level's name,
2. the width and the height of the map in tiles,
3. `width × height` integers, row by row, each one a tile number.

Numbers are separated by any whitespace.

```
First level
4 2
0 0 0 0
1 1 1 1
```

`read_level` raises `LevelError` in these cases:

- the name line is missing,
- the dimensions cannot be read or are not positive,
- there are too few tile numbers, or one of them is not an integer.

Tiles are 30 pixels square, and the window is 900 by 900 pixels.

## Using it as a library

- `platformer.files`
  - `read_level(path)` returns a `Map` with `width`, `height`, `tiles` (indexed
    `tiles[row][column]`) and `name`.
  - `Map.tile_at(x, y)` returns a tile number. It raises `IndexError` outside
    the map.
  - `Map.render_text()` returns the grid as text.
  - `Map.print()` writes the grid to standard output.
  - `load_image(path)` loads an image as a pygame surface.
- `platformer.character`
  - `Character` holds the player's state.
  - `Pose` and `Direction` are its poses and directions.
  - `new_mario(position, images)` creates the player.
  - `load_mario_images()` loads the six pose images.
- `platformer.events` holds the movement rules:
  - `handle_event(mario, event)` returns `False` when the game should stop,
  - `move`, `jump`, `update_pose` and `resting_pose` apply them frame by frame.
- `platformer.game`
  - `init_sprites()` loads the tile sprites.
  - `draw_map(level, sprites, surface)` draws a map.
  - `tile_under(level, mario)` gives the tile at the character's top-left
    corner.
  - `play(screen, level_path)` runs a level on a pygame surface.
- `platformer.main`
  - `init_window(width, height)` opens the menu window.
  - `main(argv)` is the `platformer` command.

## What it does not do

The game is an early stage of a platformer:

- Tiles do not block the character. The tile under the character is only
  logged as passable or not passable.
- There is no gravity beyond the fixed jump arc.
- The map does not scroll.
- There are no enemies.
- A level cannot be won or lost.
- Only one level is played per run.

`Character` has fields for a win or loss (`outcome`), for hiding (`hidden`) and
for levels, and `Map` has scroll offsets. The game does not use any of them yet.