# algosolve

Classic algorithm solutions as small, dependency-free Python functions,
organised by technique. Everything is a library call: the package has no
command-line interface, and it reads and stores nothing.

## Installation

```
pip install algosolve
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

### `algosolve.greedy`

- `max_profit(prices)`: the largest profit from any number of buy/sell trades (the sum of every rise).
- `candy(ratings)`: the fewest candies to hand out when a child rated higher than a neighbour must get more.
- `reconstruct_queue(people)` and `reconstruct_queue_by_height(people)`: rebuild a queue from `[height, taller_or_equal_in_front]` pairs; both return a list of `[height, count]` lists.
- `erase_overlap_intervals(intervals)`: the fewest intervals to remove so that none overlap; `0` for no intervals.
- `find_min_arrow_shots(points)`: the fewest arrows needed to burst every `[start, end]` balloon; `0` for none.
- `assign_cookies(kids, cookies)`: the most children satisfied when a cookie must be at least a child's greed factor.
- `can_place_flowers(flowerbed, n)`: whether `n` flowers fit with no two adjacent. The input is not modified.
- `check_possibility(nums)`: whether changing at most one element makes the sequence non-decreasing.
- `partition_labels(s)`: the sizes of the parts when a string is split as often as possible with each character in one part only.

### `algosolve.binary_search`

- `my_sqrt(x)`: the integer square root, rounded down; raises `ValueError` for a negative `x`.
- `search_range(nums, target)`: a tuple of the first and last index of `target` in a sorted sequence, or `(-1, -1)`.
- `search_rotated(nums, target)`: whether `target` is in a rotated sorted sequence that may contain duplicates.
- `find_peak_element(nums)`: the index of an element greater than its neighbours; raises `ValueError` for an empty sequence.

### `algosolve.two_pointers`

- `two_sum(numbers, target)`: a tuple of the 1-based indices of two entries of a sorted sequence summing to `target`, or `None`.
- `merge(nums1, m, nums2, n)`: merge the first `n` values of `nums2` into the first `m` of `nums1`, in place; raises `ValueError` if `nums1` has fewer than `m + n` slots or `nums2` fewer than `n` values.
- `min_window(s, t)`: the shortest substring of `s` containing every character of `t`, counting repeats; `""` if there is none or `t` is empty.
- `judge_square_sum(c)`: whether `c` is a sum of two squares; raises `ValueError` for a negative `c`.
- `is_palindrome(s)` and `valid_palindrome(s)`: palindrome checks; the second allows one character to be deleted.
- `find_longest_word(s, dictionary)`: the longest dictionary word that is a subsequence of `s`, the lexicographically smallest on ties, or `""`.

### `algosolve.linked_list`

- `ListNode`: a singly linked list node with `val` and `next`; nodes compare by identity.
- `build_list(values, pos=-1)`: build a list and return its head (`None` for no values); when `pos` is not `-1` the tail links back to the node at index `pos`. Raises `ValueError` for an out-of-range `pos`.
- `detect_cycle(head)`: the node where a cycle begins, found with Floyd's algorithm, or `None`.

## Example

```python
from algosolve.greedy import candy, partition_labels
from algosolve.binary_search import search_range
from algosolve.linked_list import build_list, detect_cycle

candy([1, 0, 2])                              # 5
partition_labels("ababcbacadefegdehijhklij")  # [9, 7, 8]
search_range([5, 7, 7, 8, 8, 10], 8)          # (3, 4)

head = build_list([3, 2, 0, -4], 1)
detect_cycle(head).val                        # 2
```