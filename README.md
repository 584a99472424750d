# advent

Solvers for Advent of Code puzzles. The package covers most days of the
2022 event and the first eleven days of the 2024 event. Each day has its own
module, named after the year and the day, such as `advent.y2022d13` or
`advent.y2024d07`. It needs nothing outside the standard library.

## Using it

Each module takes the puzzle input as text and returns the answer. Read
your input file yourself and pass its contents to the function for the part
you want:

```python
from pathlib import Path

from advent import y2022d13, y2024d01

text = Path("input.txt").read_text()

print(y2024d01.total_distance(text))      # 2024, day 1, part one
print(y2024d01.similarity_score(text))    # 2024, day 1, part two
print(y2022d13.right_order_sum(text))     # 2022, day 13, part one
print(y2022d13.decoder_key(text))         # 2022, day 13, part two
```

Some days need a parameter as well as the input. Examples are the row to
inspect on 2022 day 15 (`coverage_in_row(text, row)`) and the number of
blinks on 2024 day 11 (`count_stones(text, blinks)`).

## What is included

2022

| Day | Module | Entry points |
| --- | --- | --- |
| 3 | `y2022d03` | `part1`, `part2` |
| 4 | `y2022d04` | `part1`, `part2` |
| 5 | `y2022d05` | `solve(text, mover)` with `move_one_by_one` or `move_at_once` |
| 6 | `y2022d06` | `marker_end(data, size)` |
| 7 | `y2022d07` | `small_dirs_total`, `smallest_to_delete` |
| 8 | `y2022d08` | `parse_grid`, then `count_visible` / `best_scenic_score` |
| 9 | `y2022d09` | `count_tail_positions(text, length)` |
| 10 | `y2022d10` | `signal_strength`, `render` |
| 11 | `y2022d11` | `monkey_business(text, relief, rounds)` |
| 12 | `y2022d12` | `parse_heightmap`, then `shortest_from_start` / `shortest_from_any_a` |
| 13 | `y2022d13` | `right_order_sum`, `decoder_key` |
| 14 | `y2022d14` | `count_resting_sand(text, floor_at)` |
| 15 | `y2022d15` | `coverage_in_row`, `tuning_frequency` |
| 17 | `y2022d17` | `tower_height(winds, steps)` |
| 18 | `y2022d18` | `parse_cubes`, then `surface_area` / `exterior_surface_area` |
| 20 | `y2022d20` | `grove_coordinates(text, rounds, key)` |
| 22 | `y2022d22` | `password(text, cube_size)` |
| 23 | `y2022d23` | `empty_after_rounds`, `rounds_until_stable` |
| 24 | `y2022d24` | `fastest_crossing`, `fastest_round_trip` |
| 25 | `y2022d25` | `snafu_sum` |

2024

| Day | Module | Entry points |
| --- | --- | --- |
| 1 | `y2024d01` | `total_distance`, `similarity_score` |
| 2 | `y2024d02` | `count_safe`, `count_safe_with_dampener` |
| 3 | `y2024d03` | `sum_muls(text, use_do)` |
| 4 | `y2024d04` | `count_xmas(grid)`, `count_x_mas(grid)` on a list of rows |
| 5 | `y2024d05` | `valid_middle_sum`, `corrected_middle_sum` |
| 6 | `y2024d06` | `visited_count`, `loop_obstruction_count` |
| 7 | `y2024d07` | `calibration_total(text, use_concat)` |
| 8 | `y2024d08` | `count_antinodes`, `count_harmonic_antinodes` |
| 9 | `y2024d09` | `compact_blocks_checksum`, `compact_files_checksum` |
| 10 | `y2024d10` | `total_score`, `total_rating` |
| 11 | `y2024d11` | `count_stones(text, blinks)` |

The pieces these answers are built from are public as well. They include
the packet comparison of 2022 day 13 (`parse_packet`, `compare`), the
interval unions of 2022 day 15 (`union_add`, `union_remove`, `union_size`),
the SNAFU adder of 2022 day 25 (`snafu_add`), the rock-tower `Simulation` of
2022 day 17, the cube folding of 2022 day 22 (`Cube`, `Board`) and the
memoised `StoneCounter` of 2024 day 11.

## What it does not do

- There is no command-line program. You call the functions from Python and
  read the input files yourself.
- Only the days listed above are covered. Other days of both events,
  including 2022 days 1, 2, 16, 19 and 21, are not included.

## Errors

Many functions raise `ValueError` on malformed input, such as an unknown
instruction, a missing start cell or a bad line format.