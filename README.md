# algokit

Classic algorithms in plain Python with no third-party dependencies:
recursion exercises, backtracking solvers, comparison sorts,
maximum-subarray search and a separately chained hash table.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.hashtable` | `HashTable`, a chained hash table with optional rehashing; `bucket_index`; the `main` demo |
| `algokit.board_search` | `knight_tour`, `format_knight_board`, `n_queens`, `format_queens`, `count_n_queens`, `solve_sudoku`, `maze_reachable`, `rat_in_maze_path` |
| `algokit.combinatorial` | `permutations`, `hamiltonian_cycle`, `m_coloring`, `minimum_partition`, `subsets_with_sum`, `tug_of_war` |
| `algokit.recursion` | `factorial`, `fibonacci`, `power`, `fast_power`, `multiply`, `count_down`, `count_up`, `count_board_paths`, `min_perfect_squares`, `reduce_to_one`, `tiling_ways`, `can_partition_equal`, `spell_digits`, `string_to_int`, `is_sorted`, `linear_search`, `binary_search` |
| `algokit.wordplay` | `mapped_strings`, `move_x_to_end`, `replace_pi`, `keypad_combinations`, `subsequences`, `maze_paths`, `board_paths` |
| `algokit.sorting` | `bubble_sort`, `recursive_bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `bottom_up_merge_sort`, `quick_sort`, `randomized_quick_sort` |
| `algokit.subarrays` | `subarrays`, `max_subarray_cubic`, `max_subarray_quadratic`, `kadane` |

Functions return their results (lists, booleans, numbers, or `None` when a
search finds no solution) rather than printing them. Invalid arguments,
such as a negative exponent or a sudoku grid whose side is not a perfect
square, raise `ValueError`.

## Examples

Hash table:

```python
from algokit.hashtable import HashTable

menu = HashTable(table_size=7, rehash=True)
menu.insert("Burger", 110)
menu.insert("Noodle", 160)
menu["Dosa"] = 60      # inserts, or updates an existing key
menu["Dosa"] += 10

print(menu.search("Noodle"))   # 160; None when the key is absent
print(menu["Dosa"])            # 70; KeyError when the key is absent
print("Dosa" in menu, len(menu))
print(menu.format())           # one "Bucket i ->" line per bucket
```

`insert` always adds a new entry at the head of its bucket's chain, so a
repeated key is stored twice and the newest value wins on lookup. With
`rehash=True` (the default) the table doubles its bucket count whenever
the load factor goes above 0.7. `buckets()` returns every chain as lists
of `(key, value)` pairs, and iterating a table yields its keys.

Backtracking:

```python
from algokit.board_search import count_n_queens, format_queens, n_queens, solve_sudoku

print(count_n_queens(8))            # 92
print(format_queens(n_queens(4)))
```

Sorting and maximum subarrays:

```python
from algokit.sorting import heap_sort, merge_sort, randomized_quick_sort
from algokit.subarrays import kadane
import random

print(merge_sort([5, 4, 2, 3, 1]))
print(heap_sort([98, 23, 25, 20]))
print(randomized_quick_sort([3, 1, 2], rng=random.Random(0)))
print(kadane([-2, -3, 4, -1, -2, 1, 5, -3]))   # 7
```

Every sort returns a new ascending list and leaves its input untouched.

Word puzzles:

```python
from algokit.wordplay import keypad_combinations, subsequences

print(keypad_combinations("23"))
print(subsequences("abc"))
```

## Command line

The hash table demo fills a small price menu, prints its buckets, looks up
a price and sets one through item assignment:

```
algokit-hashtable
algokit-hashtable --table-size 11 --no-rehash
```

`--table-size` sets the starting number of buckets (default 7) and
`--no-rehash` keeps the table from growing.

## What it does not do

This is a library. Apart from the hash table demo there are no commands,
and nothing reads puzzles, boards or numbers from standard input; call the
functions from Python instead. The hash table has no way to delete a key.