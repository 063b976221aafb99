# heroswap

Two small puzzles in one package: a solver for the two-stack sorting puzzle,
and a text-mode treasure hunt played on tile maps.

## Stack sorting

`heroswap` reads integers from its arguments and prints, one per line, a
sequence of stack operations that sorts stack *a* in ascending order, using
stack *b* as scratch space. The operations are `sa`, `sb`, `ss`, `pa`, `pb`,
`ra`, `rb`, `rr`, `rra`, `rrb` and `rrr`.

```
heroswap 3 2 1
heroswap "4 67 3" 87 23
```

Numbers may be given as separate arguments or space-separated inside one
argument. The values are first replaced by their ranks, then:

- two numbers are sorted with `sa`;
- three with a fixed sequence for each ordering;
- four or five by moving the two smallest to *b*, ordering the rest, and
  pushing them back;
- more with a binary radix sort across the two stacks.

An already sorted list prints nothing and exits with status 0.

Errors: a sign not followed by a digit, any character other than digits,
signs and spaces, an empty or all-space argument, a duplicate, or a value
outside the 32-bit signed range writes `Error` and a reason to standard
error and exits with status 1. Running with no arguments, or with a single
number, prints nothing and exits with status 1.

From Python:

```python
from heroswap.parsing import parse_arguments, check_duplicates, rank
from heroswap.sorting import solve

values = parse_arguments(["3", "2", "1"])
check_duplicates(values)
print(solve(rank(values)))   # ['sa', 'rra']
```

Invalid input raises `heroswap.parsing.InputError`. `heroswap.parsing` also
offers `validate_characters`, `has_blank_argument`, `count_numbers` and
`parse_int`; `heroswap.sorting` offers `is_sorted`, `sort_three`,
`sort_three_high`, `sort_four_or_five` and `radix_sort`, each working on a
`heroswap.stacks.Stacks`.

`Stacks(values)` holds the two stacks as `a` and `b` (top first) and records
every operation method called in its `operations` list. `rr` and `rrr` record
the two single rotations they perform as well as themselves.

`heroswap.printf.sprintf(fmt, *args)` formats the `%c %s %p %d %i %u %x %X %%`
conversions with 32-bit integer semantics; `printf` writes the result to
standard output and returns its length.

## Treasure hunt

`heroswap-game` loads a `.ber` map, prints it, and then reads one command per
line from standard input:

```
heroswap-game maps/level.ber
```

| Command       | Effect                                         |
|---------------|------------------------------------------------|
| `w` `a` `s` `d` | move up, left, down, right                   |
| `x` or a space | destroy the first monster next to the hero    |
| `r`           | destroy every monster next to the hero         |
| `q` or `esc`  | give up                                        |

After each successful move the move count is printed, then the map again.
Walking onto a chest opens it; walking into a monster is a defeat; the exit
is a win once every chest is open and blocks the hero until then. Every
ending — win, defeat, giving up, or an invalid map — exits with status 1;
messages go to standard output, errors prefixed with `Error`.

A map is a rectangle of tiles, one row per line:

| Tile | Meaning              |
|------|----------------------|
| `1`  | wall                 |
| `0`  | floor                |
| `P`  | hero (exactly one)   |
| `C`  | chest (at least one) |
| `E`  | exit (exactly one)   |
| `M`  | monster              |
| `D`  | destroyed monster    |

It must be surrounded by walls, and every chest and the exit must be
reachable from the hero without crossing walls.

From Python, `heroswap.gamemap.load_map(path)` reads and validates a map and
returns a `GameMap`, raising `MapError` with the reason when it is not
playable. The individual checks are `check_extension`, `read_rows`,
`check_walls`, `check_config` and `flood_fill`. `heroswap.game.Game` wraps a
map with `move(Direction)` (returning an `Outcome`), `explode`, `provoke`,
`hero_position` and `render`.

## What it does not do

The treasure hunt is played entirely as text: there is no graphical window,
no sprites or animations, and no live keyboard handling — commands are read
line by line from standard input.

## Tests

```
pip install -e ".[test]"
pytest
```