# algokit

A small collection of classic algorithms in plain Python, with no
third-party dependencies.

## What is inside

| Module              | Contents                                                                 |
|---------------------|--------------------------------------------------------------------------|
| `algokit.sorting`   | `bubble_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `quick_sort_iterative` |
| `algokit.greedy`    | `activity_selection`, `fractional_knapsack`, `total_profit`, `Item`, `Selection` |
| `algokit.graphs`    | `dijkstra`, `prim_mst`, `kruskal_mst`, `Edge`                             |
| `algokit.peaks`     | `peak_1d`, `peaks_2d`                                                    |
| `algokit.maths`     | `triangle_count`, `dot_product`, `magnitude`, `cosine_similarity`, `matrix_multiply`, `magic_square`, `power` |
| `algokit.benchmark` | `random_values`, `time_sort`, `run_benchmark`, `write_csv`, `main`       |

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Examples

### Maths and greedy selection

```python
from algokit.maths import magic_square, power, triangle_count
from algokit.greedy import activity_selection

power(2, 10)            # 1024
triangle_count(8)       # 46
magic_square(3)         # [[8, 1, 6], [3, 5, 7], [4, 9, 2]]

# The largest number of activities that can run one after another
activity_selection([1, 3, 0, 5, 8, 5], [2, 4, 6, 7, 9, 9])   # 4
```

`magic_square` accepts only positive odd orders, `power` only non-negative
exponents, and `matrix_multiply` raises `ValueError` when the inner
dimensions differ.

`fractional_knapsack` takes `Item(index, profit, weight)` values and a
capacity, fills the knapsack by highest profit first, takes a fraction of the
last item that does not fit whole, and returns `Selection` values ordered by
item index. `total_profit` sums their (fractional) profits.

### Sorting

Every sort returns a new list and leaves its input unchanged:

```python
from algokit.sorting import quick_sort_iterative

quick_sort_iterative([3, 8, 2, 6, 4])   # [2, 3, 4, 6, 8]
```

### Peaks

`peak_1d` returns the index of an element no smaller than its neighbours,
found by binary search. `peaks_2d` returns, for each row of a grid, the
`(row, column)` of the first cell greater than all of its orthogonal
neighbours inside the grid.

### Graphs

`dijkstra` and `prim_mst` take adjacency matrices in which `0` means "no
edge"; `kruskal_mst` takes a list of `Edge` values and the number of vertices.

```python
from algokit.graphs import dijkstra, prim_mst

graph = [
    [0, 4, 0, 8],
    [4, 0, 8, 11],
    [0, 8, 0, 7],
    [8, 11, 7, 0],
]
dijkstra(graph, 0)      # [0, 4, 12, 8]
prim_mst(graph)         # Edge(0, 1, 4), Edge(3, 2, 7), Edge(0, 3, 8)
```

`dijkstra` gives `math.inf` for unreachable vertices, and `prim_mst` raises
`ValueError` when the graph is not connected. `kruskal_mst` returns a minimum
spanning forest if the graph is not connected.

## Timing the sorting routines

`algokit.benchmark` times a sort on arrays of random integers from 1 to 1000
of growing size, prints each `(size,seconds)` pair and writes the results as
CSV with the header `Array Size,Time`. From the command line:

```
algokit-benchmark
```

Options:

- `--algorithm` — one of `bubble`, `merge`, `quick`, `quick-iterative`,
  `selection` (default `merge`)
- `--start`, `--stop`, `--step` — array sizes to time (default 1000 to 10000
  in steps of 1000)
- `--repeats` — runs per size; the mean time is reported (default 10)
- `--seed` — random seed
- `--output` — CSV file to write (default `sorting_time.csv`)

The same work can be done from Python with `run_benchmark` and `write_csv`.