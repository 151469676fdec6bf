# algodrills

Classic array, matrix and text-pattern exercises, each written as a small,
self-contained Python function. It needs nothing outside the standard library.

## Installation

```
pip install algodrills
```

To run the tests:

```
pip install "algodrills[test]"
pytest
```

## `algodrills.arrays`

Functions on sequences of integers. None of them changes its argument;
those that rearrange return a new list.

| Function | Result |
| --- | --- |
| `two_sum(arr, target)` | `True` if two entries of a sorted sequence add up to `target` (two pointers) |
| `is_sorted(arr)` | `True` if the sequence is in non-decreasing order |
| `find_missing(arr, n)` | the number in `1..n` absent from `arr`, which holds the other `n - 1` |
| `find_single(arr)` | the value that appears once when every other value appears twice (XOR) |
| `sorted_union(first, second)` | the sorted union of two sorted sequences, without repeats |
| `largest(arr)` | the largest element; `ValueError` if empty |
| `leaders(arr)` | elements not smaller than anything to their right, listed right to left |
| `left_rotate_by_one(arr)` | the sequence rotated one place to the left |
| `linear_search(arr, target)` | index of the first `target`, or `-1` |
| `longest_consecutive(arr)` | length of the longest run of consecutive integers present |
| `longest_subarray_with_sum(arr, k)` | length of the longest contiguous slice summing to `k` |
| `majority_element(arr)` | the Boyer–Moore vote candidate; `ValueError` if empty |
| `max_consecutive_ones(arr)` | length of the longest run of `1`s |
| `move_zeroes(arr)` | zeroes moved to the end, other order kept |
| `max_subarray(arr)` | a `MaxSubarray` (`total`, `start`, inclusive `end`, `items`) by Kadane's algorithm; `ValueError` if empty |
| `rearrange_alternating(arr)` | non-negative and negative values alternated, starting non-negative, relative order kept |
| `remove_duplicates(arr)` | a sorted sequence with adjacent repeats dropped |
| `second_largest(arr)` | largest value strictly below the maximum, or `-1` |
| `max_profit(prices)` | best profit from one buy followed by one sell |
| `next_permutation(nums)` | the next lexicographic permutation, wrapping to the smallest |

```python
from algodrills.arrays import (
    find_missing,
    longest_subarray_with_sum,
    max_profit,
    max_subarray,
    sorted_union,
    two_sum,
)

two_sum([2, 7, 11, 15], 9)                       # True
find_missing([1, 2, 4, 5], 5)                    # 3
sorted_union([1, 2, 3, 4, 5], [2, 3, 4, 6])      # [1, 2, 3, 4, 5, 6]
longest_subarray_with_sum([1, -1, 5, -2, 3], 3)  # 4
max_profit([7, 1, 5, 3, 6, 4])                   # 5
max_subarray([-2, 1, -3, 4, -1, 2, 1]).items     # (4, -1, 2, 1)
```

## `algodrills.matrix`

Functions on matrices given as sequences of rows; each returns a new value.

- `spiral_order(matrix)`: the elements read clockwise in a spiral from the top-left corner.
- `rotate_clockwise(matrix)`: a square matrix turned 90 degrees clockwise; `ValueError` if it is not square.
- `set_zeroes(matrix)`: a copy with every row and column that held a zero set to zero.

```python
from algodrills.matrix import rotate_clockwise, spiral_order

spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]
rotate_clockwise([[1, 2], [3, 4]])               # [[3, 1], [4, 2]]
```

## `algodrills.patterns`

Each function returns the pattern as a string, one line per row, every row
ending in a newline:

`square`, `star_triangle`, `reverse_star_triangle`, `number_triangle`,
`reverse_number_triangle`, `pyramid`, `inverted_pyramid`, `diamond`,
`half_diamond`, `binary_triangle`, `number_crown`, `floyd_triangle`,
`letter_triangle`, `reverse_letter_triangle`, `repeated_letter_triangle`,
`letter_palindrome_triangle`, `letter_tail` (no arguments), `star_void`,
`butterfly`, `hollow_rectangle(rows, cols)` and `concentric_square`.

```python
from algodrills.patterns import butterfly

print(butterfly(2), end="")
# *  *
# ****
# *  *
```

## Command line

`algodrills-patterns` prints one pattern. Its first argument is the pattern
name in hyphenated form (`square`, `star-triangle`, `butterfly`,
`hollow-rectangle`, `concentric-square` and so on; `algodrills-patterns --help`
lists them all), followed by its sizes:

```
algodrills-patterns hollow-rectangle 3 5
*****
*   *
*****
```

Sizes left off the command line are asked for on standard input. Giving more
sizes than a pattern takes, or a size that is not an integer, is an error.