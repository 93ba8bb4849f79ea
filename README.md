# aocsolutions

Solutions to Advent of Code puzzles, written as a plain Python library with
no third-party dependencies:

- 2022: days 1 to 16 (`aocsolutions.y2022.day01` ... `aocsolutions.y2022.day16`)
- 2023: days 1 to 9 and 11 to 15 (`aocsolutions.y2023.day01` ... `aocsolutions.y2023.day15`)

Each puzzle day is a class named after the day (`Day01`, `Day02`, ...) whose
`solve_a` and `solve_b` methods take the whole puzzle input as a string and
return the answer to that part. Malformed input raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from aocsolutions.y2022.day01 import Day01

with open("input.txt") as handle:
    text = handle.read()

print(Day01().solve_a(text))
print(Day01().solve_b(text))
```

```python
from aocsolutions.y2023.day15 import Day15, holiday_hash

print(holiday_hash("HASH"))  # 52
print(Day15().solve_a("rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"))  # 1320
```

A few days differ from the usual shape:

- 2022 day 6 and day 12 return `None` when no answer exists.
- 2022 day 10 has `solve_a` and `screen(text)` instead of `solve_b`; `screen`
  returns the 6x40 drawing as lines of `#` (lit) and `.` (unlit). Reading the
  letters off the drawing is left to the reader.
- 2022 day 15 also exposes `part_a(sensors, row)` and
  `part_b(sensors, maximum)`, so the sample's smaller row and bound can be used.
- 2023 day 11 exposes `solve(text, expand_factor)` and day 13
  `solve(text, expected)` for other expansion factors and smudge counts.

Many modules also expose their parsers and building blocks, for example
`aocsolutions.y2022.day07.parse` (a `Dir` tree with `size()` and `walk()`),
`aocsolutions.y2023.day05.map_ranges`, `aocsolutions.y2023.day07.CardType`,
`aocsolutions.y2023.day12.possible_ways` and
`aocsolutions.y2023.day15.LensBoxes`.

## Helpers

- `aocsolutions.grid`: `Direction` (with `inverse()` and `to_vector()`) and
  `Position` (row first; supports `+` with positions or `(row, col)` tuples and
  `move_direction()`).
- `aocsolutions.iterutil.take_until_inclusive`: like `itertools.takewhile`, but
  stops after the first item that satisfies the predicate, keeping that item.
- `aocsolutions.mathutil`: `gcd` and `lcm`.
- `aocsolutions.ocr.screen_to_string`: renders rows of booleans as `#` and `.`.
- `aocsolutions.bitset.BitSet`: a hashable set of integers from 0 to 63 kept in
  one bitmask.

## What it does not do

- There is no solution for day 10 of 2023.
- There is no command-line program and no lookup of solutions by year or day:
  import the day's module and call its class.
- It does not download puzzle inputs or submit answers; the caller reads the
  input and passes it in as a string.