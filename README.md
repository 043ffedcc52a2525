# cpsolve

Solutions to a set of classic competitive programming problems. Each problem
lives in its own module and can be used either as a Python function or as a
command that reads the problem's input and prints the answer in the judge's
format. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Problems

| Module | Function | Command | Problem |
| --- | --- | --- | --- |
| `cpsolve.apartments` | `count_matches(desired, sizes, k)` | `cpsolve-apartments` | Match applicants to apartments whose size is within `k` of what they want |
| `cpsolve.investigation` | `investigate(n, edges)` | `cpsolve-investigation` | Cheapest route length from city 1 to `n`, number of cheapest routes (mod 10^9 + 7), fewest and most flights |
| `cpsolve.labyrinth` | `find_path(grid)` | `cpsolve-labyrinth` | Shortest path from `A` to `B` in a grid with `#` walls |
| `cpsolve.monsters` | `escape_route(grid)` | `cpsolve-monsters` | Reach the grid border strictly before any monster `M` |
| `cpsolve.playlist` | `longest_unique_run(songs)` | `cpsolve-playlist` | Longest run of consecutive distinct songs |
| `cpsolve.projects` | `max_reward(projects)` | `cpsolve-projects` | Most reward from projects `(start, end, reward)` that share no day |
| `cpsolve.towers` | `count_towers(cubes)` | `cpsolve-towers` | Fewest towers built from cubes in order |
| `cpsolve.area` | `largest_rectangle(matrix)` | `cpsolve-area` | Largest all-ones rectangle in a 0/1 matrix |
| `cpsolve.connection` | `edges_to_connect(n, edges)` | `cpsolve-connection` | Components minus one for nodes `0..n-1`, or -1 if there are fewer than `n - 1` edges |
| `cpsolve.flowers` | `count_arrangements(n)` | `cpsolve-flowers` | Number of valid flower rows of length `n`, modulo 10^9 + 7 |
| `cpsolve.managing` | `max_selected_sum(values, k)` | `cpsolve-managing` | Largest sum without more than `k` consecutive picks |
| `cpsolve.xy` | `letter_at(n, k)` | `cpsolve-xy` | The `k`-th letter of the `n`-th X/Y string |

## Using the library

```python
from cpsolve.playlist import longest_unique_run
from cpsolve.towers import count_towers
from cpsolve.labyrinth import find_path

longest_unique_run([1, 2, 1, 3, 2, 7, 4, 2])  # 5
count_towers([3, 8, 2, 1, 5])                 # 2
find_path(["A.#", "..B"])                     # a string of U/D/L/R moves, or None
```

Some details worth knowing:

- `investigate` returns a `RouteSummary` with the fields `distance`, `routes`,
  `min_flights` and `max_flights`, and raises `ValueError` when city `n`
  cannot be reached from city 1.
- `find_path` and `escape_route` return `None` when there is no path; they
  raise `ValueError` when the grid has no `A` (and, for `find_path`, no `B`).
  `escape_route` returns an empty string when `A` already stands on the border.
- `largest_rectangle` treats truthy cells as ones and raises `ValueError` when
  the rows differ in length.
- `count_arrangements` needs `n >= 1`; `letter_at` needs `n >= 1` and
  `1 <= k <= 2 ** (n - 1)`. Both raise `ValueError` otherwise.
- `max_selected_sum` returns 0 when `k <= 0`.

## Using the commands

Every command reads whitespace-separated input in the problem's format and
writes the answer to standard output. Input comes from standard input, or from
the files named on the command line (`cpsolve-monsters` takes at most one).
Malformed or short input ends the command with a `ValueError`.

```
echo "8
1 2 1 3 2 7 4 2" | cpsolve-playlist
```

```
printf "5 8\n########\n#.A#...#\n#.##.#B#\n#......#\n########\n" | cpsolve-labyrinth
```

`cpsolve-labyrinth` and `cpsolve-monsters` print `NO`, or `YES` followed by
the number of moves and the moves themselves. `cpsolve-investigation` prints
the four route figures on one line; `cpsolve-xy` prints one letter per query.