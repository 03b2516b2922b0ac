# solong

Building blocks for a top-down puzzle in which a player walks a walled map,
picks up every collectible and then reaches the exit. The package reads and
validates level files and checks that a level can be solved. It also has a
few small helpers for text, bytes, linked lists, line reading and printf-style
formatting.

## Installing

```
pip install .
```

There are no third-party dependencies.

## Map files

A map is a text file whose name ends in `.ber`. Each line is one row of tiles:

| Char | Tile         |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

For example:

```
1111111
1P0C0E1
1111111
```

## Loading and checking a map

```python
from solong.gamemap import MapError, is_valid_path, parse_map

try:
    level = parse_map("level.ber")
except MapError as exc:
    print(exc)
else:
    solvable = is_valid_path(level.grid, level.player_x, level.player_y)
```

`parse_map` raises `MapError` when:

- the name does not end in `.ber`, or the file cannot be opened;
- the file holds an empty line, or a character other than the tiles above;
- the rows do not all have the same length;
- the border is not made of walls only;
- there is not exactly one `P`, exactly one `E` and at least one `C`.

It returns a `GameMap` with `grid` (a list of rows, each a list of
characters), `collectibles`, `player_x`, `player_y`, `exit_x` and `exit_y`;
`height` and `width` are properties. `tile(x, y)` and `set_tile(x, y, tile)`
read and change one tile, and `rows()` gives each row as a string.

`parse_map` does not check reachability. `is_valid_path(grid, x, y)` does: it
flood-fills a copy of the grid from `(x, y)` across floor, collectible and
player tiles (the exit stops the fill) and returns `True` only when no
collectible is left unreached and a tile next to the exit was reached.

The steps are also available one by one: `check_map_name`, `read_map_lines`,
`check_map_characters`, `is_rectangular`, `is_map_enclosed`,
`count_elements`, `flood`, `is_exit_reachable` and `find_exit_position`.

## Helpers

- `solong.linereader.LineReader(stream, buffer_size=42)` reads a text or
  binary stream in fixed-size chunks and returns lines one at a time with
  their newline kept; `read_line()` returns `None` at the end, and the reader
  can be iterated. `reset()` drops data read ahead.
- `solong.formatting`: `format_string(fmt, *args)` and
  `printf(fmt, *args, stream=None)` handle `%c %s %p %d %i %u %x %X %%`;
  `hex_digits(n, upper=False)` and `pointer_repr(address)` are used by them.
- `solong.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strlcpy`, `strlcat`,
  `strmapi`, `striteri`. Searches return indexes or `None`.
- `solong.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, `atoi` (C-style, wrapping to 32 bits)
  and `itoa`.
- `solong.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove` on `bytearray` buffers.
- `solong.linkedlist`: `Node` and `LinkedList` with `add_front`,
  `add_back`, `last`, `len()`, iteration, `clear`, `iterate` and `map`.
- `solong.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to
  a stream or standard output.

## What this package does not do

There is no game to play yet: the package opens no window, draws no sprites,
reads no keys, does not move the player or count moves, and installs no
command. It stops at loading a map and deciding whether it is valid and
solvable.