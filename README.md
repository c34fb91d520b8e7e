# contestkit

Pure-Python solutions to a collection of classic competitive-programming
problems. Each problem is a plain function, or a small class, that takes
Python values and returns Python values. There are no dependencies beyond the
standard library.

## Modules

- `contestkit.dp`: dynamic programming.
  `array_description`, `book_shop`, `coin_combinations_ordered`,
  `coin_combinations_unordered`, `dice_combinations`, `grid_paths`,
  `minimizing_coins`, `removing_digits`. Counting functions return their
  result modulo 10**9+7. `minimizing_coins` returns `None` when the target
  cannot be made.
- `contestkit.prefix`: static range queries.
  `range_sums`, `range_xors`, `forest_queries` (counts `*` cells in
  rectangles), `list_removals` (removes elements by their current position and
  returns them in the order they were removed).
- `contestkit.geometry`: plane geometry with a tolerance of `EPS`.
  `Point` (arithmetic, `dot`, `cross`, `norm`, `length`, `unit`, `rotate`,
  `perp`, `angle`, `half`), `Polygon` (`add`, `doubled_area`,
  `point_in_perimeter`, `locate`) and `Location` (`INSIDE`, `OUTSIDE`,
  `BOUNDARY`). Helper functions: `sgn`, `point_in_line`, `point_in_segment`,
  `crosses_ray`, `intersect_segments_info`, `segments_intersect`,
  `intersect_lines`, `intersect_line_segment_info`, `cut_polygon`,
  `point_location` (returns `"LEFT"`, `"RIGHT"` or `"TOUCH"`) and
  `polygon_area` (returns twice the area).
- `contestkit.segtree`: `SumSegmentTree`, `MinSegmentTree` and
  `PrefixMaxSegmentTree` support `query(left, right)` and
  `update(position, value)`. `RangeAddSegmentTree` supports
  `add(left, right, value)` and `value_at(position)`.
- `contestkit.shortest`: `shortest_routes` (single source, `None` for nodes
  that cannot be reached), `all_pairs_shortest` (undirected, `None` where
  there is no path), `flight_discount` (raises `UnreachableError` when the
  destination cannot be reached) and `flight_routes` (the k cheapest route
  costs).
- `contestkit.graphs`: `course_schedule` (topological order, `None` on a
  cycle), `strongly_connected_components`, `flight_routes_check`,
  `round_trip` (undirected cycle), `round_trip_directed` and `monsters`
  (an escape path through a grid, or `None`).
- `contestkit.simulation`: `cow_signal`, `measuring_traffic`,
  `speeding_ticket`, `bovine_shuffle`, `bucket_list`, `lost_cow`.
- `contestkit.setsmaps`: `cities_and_states`, `dont_be_last`, `into_blocks`,
  `jury_marks`, `made_up`, `compare_sizes`, `tic_tac_toe`, `where_am_i`,
  `year_of_the_cow`.
- `contestkit.sortings`: `angry_cows`, `cow_college`, `kayaking`,
  `permutator`, `casino`, `cow_queue`.
- `contestkit.adhoc`: `can_level_wall`, `hoofball`, `min_blocking_cells`,
  `milking_order`, `modern_art`, `sleepy_herding`, `sleepy_sorting`,
  `taming_the_herd`.

Positions, node numbers and query ranges are 1-based, as in the problem
statements. Invalid input, such as a range outside the data or a malformed
grid, raises `ValueError` or `IndexError`.

## Example

```python
from contestkit.dp import dice_combinations, minimizing_coins
from contestkit.prefix import range_sums
from contestkit.geometry import Point, segments_intersect
from contestkit.segtree import SumSegmentTree

dice_combinations(3)                        # 4
minimizing_coins([1, 5, 7], 11)             # 3
range_sums([1, 2, 3, 4], [(1, 4), (2, 3)])  # [10, 5]
segments_intersect(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))  # True

tree = SumSegmentTree([1, 2, 3, 4])
tree.update(2, 10)
tree.query(1, 3)                            # 14
```

## What it does not do

contestkit is a library only. It has no command-line program and does not
read problem input from standard input or from files, and it writes no output
files. You call the functions and handle input and output yourself.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```