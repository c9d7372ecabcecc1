"""Greedy algorithms over sequences, intervals and strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise, takewhile


def max_profit(prices: Iterable[int]) -> int:
    """Best profit from any number of buy/sell trades: the sum of every rise."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies so that a child rated above a neighbour gets more than them."""
    ratings = list(ratings)
    counts = [1] * len(ratings)
    for i, (current, following) in enumerate(pairwise(ratings)):
        if current < following:
            counts[i + 1] = counts[i] + 1
    for i in range(len(ratings) - 1, 0, -1):
        if ratings[i] < ratings[i - 1]:
            counts[i - 1] = max(counts[i - 1], counts[i] + 1)
    return sum(counts)


def _front_first_key(person: tuple[int, int]) -> tuple[int, int]:
    height, ahead = person
    return ahead, height if ahead == 0 else -height


def reconstruct_queue(people: Iterable[Sequence[int]]) -> list[list[int]]:
    """Rebuild a queue of [height, taller_or_equal_ahead] pairs, placing by count ahead."""
    ordered = sorted(((p[0], p[1]) for p in people), key=_front_first_key)
    result = list(takewhile(lambda person: person[1] == 0, ordered))
    for height, ahead in ordered[len(result):]:
        shorter = sum(1 for other_height, _ in result if other_height < height)
        result.insert(shorter + ahead, (height, ahead))
    return [list(person) for person in result]


def reconstruct_queue_by_height(people: Iterable[Sequence[int]]) -> list[list[int]]:
    """Rebuild the queue by inserting the tallest people first at their count."""
    ordered = sorted(((p[0], p[1]) for p in people), key=lambda p: (-p[0], p[1]))
    result: list[list[int]] = []
    for height, ahead in ordered:
        result.insert(ahead, [height, ahead])
    return result


def erase_overlap_intervals(intervals: Iterable[Sequence[int]]) -> int:
    """Fewest intervals to drop so that the rest do not overlap."""
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    removed = 0
    prev_end = ordered[0][1]
    for start, end in ordered[1:]:
        if start < prev_end:
            removed += 1
        else:
            prev_end = end
    return removed


def find_min_arrow_shots(points: Iterable[Sequence[int]]) -> int:
    """Fewest vertical arrows that burst every balloon spanning [start, end]."""
    ordered = sorted(points, key=lambda point: point[1])
    if not ordered:
        return 0
    arrows = len(ordered)
    prev_end = ordered[0][1]
    for start, end in ordered[1:]:
        if start <= prev_end:
            arrows -= 1
        else:
            prev_end = end
    return arrows


def assign_cookies(kids: Iterable[int], cookies: Iterable[int]) -> int:
    """Most kids satisfied when a cookie must be at least a kid's greed factor."""
    kids_left = sorted(kids)
    cookies_left = sorted(cookies)
    satisfied = 0
    while kids_left and cookies_left:
        kid = kids_left.pop()
        if cookies_left[-1] >= kid:
            cookies_left.pop()
            satisfied += 1
    return satisfied


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Whether n flowers fit in the bed with no two planted side by side."""
    bed = list(flowerbed)
    remaining = n
    last = len(bed) - 1
    for i, plot in enumerate(bed):
        if plot != 0:
            continue
        left_free = i == 0 or bed[i - 1] == 0
        right_free = i == last or bed[i + 1] == 0
        if left_free and right_free:
            bed[i] = 1
            remaining -= 1
    return remaining <= 0


def check_possibility(nums: Sequence[int]) -> bool:
    """Whether changing at most one element makes the sequence non-decreasing."""
    nums = list(nums)
    if len(nums) < 3:
        return True
    drops = 0
    for i, (current, following) in enumerate(pairwise(nums)):
        if current > following:
            drops += 1
            if drops > 1:
                return False
            if (
                0 < i < len(nums) - 2
                and nums[i - 1] > following
                and current > nums[i + 2]
            ):
                return False
    return True


def partition_labels(s: str) -> list[int]:
    """Sizes of the most parts the string splits into, each letter in one part."""
    last_seen = {char: i for i, char in enumerate(s)}
    sizes: list[int] = []
    start = end = 0
    for i, char in enumerate(s):
        end = max(end, last_seen[char])
        if i == end:
            sizes.append(end - start + 1)
            start = end + 1
    return sizes