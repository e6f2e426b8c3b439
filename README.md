# tilequest

A small top-down tile puzzle. You walk a player around a walled map, pick up
every collectible, then step onto the exit to win. The window is drawn with
pygame.

## Installing

```
pip install .
```

This installs the `tilequest` command and its one runtime dependency, pygame.

## Playing

```
tilequest maps/level1.ber
```

The command takes exactly one argument, the path to a map file. Any other
number of arguments prints `Accessibility Error` and stops. It must be run
from a directory that holds an `images/` folder with these five tile images,
each readable and writable:

- `images/background.xpm`
- `images/wall.xpm`
- `images/player.xpm`
- `images/collectibe.xpm`
- `images/exit.xpm`

If any of them is missing the command prints `Missing XPM File` and stops.
A map path that is not a readable file gives `Wrong File Path`. A file
name that does not end in `.ber`, or is nothing but `.ber`, gives
`Wrong File Extension`.

### Controls

| Key   | Action     |
|-------|------------|
| `W`   | move up    |
| `A`   | move left  |
| `S`   | move down  |
| `D`   | move right |
| `Esc` | quit       |

Walls cannot be entered. Each step that succeeds writes a move counter to the
terminal as `Mover: N`, where N counts from 0. Stepping on a collectible picks
it up. You can cross the exit at any time, but the game is won only when you
step onto it with no collectibles left.

When the game ends, the terminal shows `Win` for a win, `Exit_Game` when you
press Esc, or `Exit` when you close the window. The command always exits with
status 1, also after a win.

## Map files

A map is a plain text file. Each line is one row of tiles:

| Char | Tile         |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only when:

- the file is not empty (otherwise `NULL Map`);
- it has no blank line between rows or at the end (otherwise
  `Map is not rectangular`); a single newline at the very start is ignored;
- every row has the same length;
- the top and bottom rows and both side columns are all wall;
- it has exactly one `P`, exactly one `E` and at least one `C`;
- it uses no other characters;
- every collectible and the exit can be reached from the player's start
  (otherwise `Map is not accessible`).

A map that breaks the other rules gives `Invalid Map`. Map errors are shown
after a line reading `Error`.

Example:

```
1111111111
1P0C00C0E1
1011110111
1000C00001
1111111111
```

## Using it as a library

The map handling and game rules work without a window:

- `tilequest.mapfile.read_map(path)` reads a map into a list of rows and
  raises `tilequest.mapfile.MapError` on a malformed file.
  `check_arguments(argv, image_dir)`, `check_assets(image_dir)` and
  `check_extension(path)` do the command-line checks described above.
- `tilequest.validate.load_map(path)` reads and fully validates a map,
  reachability included, and returns a `MapInfo` with `rows`, `width`,
  `height`, `player` and `collectibles`. The single checks are available as
  `is_rectangular`, `is_walled`, `count_pieces`, `has_valid_tiles`,
  `check_map` and `check_reachable`.
- `tilequest.game.Game.from_rows(rows)` builds the game state.
  `Game.move(direction)` takes a `Direction` and `Game.press(key)` takes a key
  code (`KEY_W`, `KEY_A`, `KEY_S`, `KEY_D`, `KEY_ESC`); both return an
  `Outcome` (`IGNORED`, `BLOCKED`, `MOVED`, `WON`, `QUIT`, `CLOSED`).
  `Game.tile_at(x, y)`, `rows`, `player` and `moves` show the current state.
- `tilequest.app` holds the windowed side: `load_textures(image_dir)`,
  `draw(surface, game, textures)`, `run(game, image_dir)` and `main(argv)`.

The package also carries small helper modules: `tilequest.textutil` (string
helpers such as `atoi`, `split`, `strtrim`, `strncmp`), `tilequest.charclass`
(ASCII tests and case conversion), `tilequest.lists` (a singly linked
`LinkedList` of `Node`s), `tilequest.memory` (byte buffer helpers on
`bytearray`) and `tilequest.output` (writing characters, strings and numbers
to a stream).

## What it does not do

There are no levels, saved progress, scores or sound: the command plays the
one map it is given and stops. Tile images are not shipped with the package;
you supply the `images/` folder.

## Running the tests

```
pip install .[test]
pytest
```