# solong

Map handling for a small top-down tile game in which the player picks up
every collectible and then reaches the exit, while an optional enemy patrols
the map. The package reads `.ber` map files, checks that a map is playable,
and ships a few small text, buffer and list helpers it is built on. It has no
dependencies outside the standard library.

## Installing

```
pip install .
```

Use `pip install .[test]` to get pytest as well.

## Map files

A map is a plain text file whose name ends in `.ber` and has no other dot.
Each line is one row of tiles; blank lines are dropped.

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | floor                      |
| `P`  | player start (exactly one) |
| `C`  | collectible (at least one) |
| `E`  | exit (exactly one)         |
| `X`  | enemy (at most one)        |

`validate_map` accepts a map only if:

- it contains no other characters;
- every row has the same length;
- it is closed by walls on all four sides;
- every collectible and the exit can be reached from the player.

Example:

```
1111111111
1P0C00C0E1
10011X0001
1111111111
```

## Using `solong.mapfile`

```python
from solong.mapfile import MapError, check_map_name, load_map, parse_map, validate_map

game_map = parse_map("11111\n1PCE1\n11111\n")
validate_map(game_map)          # raises MapError if the map is not playable
print(game_map.rows, game_map.cols)        # 3 5
print(game_map.width, game_map.height)     # pixels, 64 per tile
print(game_map.find("P"))                  # (1, 1) as (x, y)
print(game_map.count("C"))                 # 1

try:
    name = check_map_name("levels/first.ber")
    level = load_map(name)
    validate_map(level)
except MapError as exc:
    print("Error:", exc)
```

- `GameMap.layout` is a list of rows, each a list of one-character tiles,
  indexed as `layout[y][x]`. `copy()` returns an independent map.
- `flood_fill(grid, x, y)` marks every cell reachable from `(x, y)` without
  crossing walls with `F`, in place.
- `check_map_name` raises `MapError` when the file cannot be opened or the
  name is not a single-dot `.ber` name; otherwise it returns the path as a
  string.

## Helper modules

- `solong.lines`: `LineReader(stream, buffer_size=42)` returns lines of a text
  or binary stream one at a time (`next_line()`, or iterate over it), keeping
  each trailing newline; `read_all(stream, buffer_size)` joins them all.
- `solong.strings`: `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`,
  `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat`. Searches
  return an index or `None`; the bounded copies return the resulting text
  together with the length a full copy would have had.
- `solong.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`, `atoi` (32-bit wrap-around), `atoll` (64-bit) and
  `itoa`.
- `solong.memory`: `memset`, `bzero`, `memcpy`, `memmove` (within one buffer,
  by offsets), `memchr`, `memcmp` and `calloc` on `bytearray`/`memoryview`
  buffers.
- `solong.linked`: `LinkedList` of `Node`s with `push_front`, `push_back`,
  `last`, `pop_front`, `clear`, `for_each`, `map`, `len()` and iteration.
- `solong.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a
  given text stream or to standard output.

## What it does not do

The package stops at loading and checking maps. It has no game loop: it does
not move the player or the enemy, count moves, or decide when a game is won or
lost. It opens no window, draws nothing, reads no keyboard input, and installs
no command to play a level.