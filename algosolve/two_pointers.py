"""Two-pointer and sliding-window algorithms over sequences and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, MutableSequence, Sequence
from math import isqrt
from typing import Optional


def two_sum(numbers: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """1-based indices of two entries of a sorted sequence summing to target, or None."""
    begin, end = 0, len(numbers) - 1
    while begin < end:
        total = numbers[begin] + numbers[end]
        if total == target:
            return begin + 1, end + 1
        if total < target:
            begin += 1
        else:
            end -= 1
    return None


def merge(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first n of nums2 into the first m of nums1, in place, from the back."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must hold m + n slots and nums2 at least n values")
    i, j = m - 1, n - 1
    for pos in range(m + n - 1, -1, -1):
        if j < 0:
            break
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[pos] = nums1[i]
            i -= 1
        else:
            nums1[pos] = nums2[j]
            j -= 1


def min_window(s: str, t: str) -> str:
    """Shortest substring of s holding every character of t with multiplicity."""
    if not t:
        return ""
    needed = dict(Counter(t))
    missing = len(t)
    best: Optional[tuple[int, int]] = None
    left = 0
    for right, char in enumerate(s):
        if char not in needed:
            continue
        needed[char] -= 1
        if needed[char] >= 0:
            missing -= 1
        while missing == 0:
            length = right - left + 1
            if best is None or length < best[1]:
                best = (left, length)
            dropped = s[left]
            if dropped in needed:
                needed[dropped] += 1
                if needed[dropped] > 0:
                    missing += 1
            left += 1
    if best is None:
        return ""
    start, length = best
    return s[start:start + length]


def judge_square_sum(c: int) -> bool:
    """Whether c is a sum of two squares of non-negative integers."""
    if c < 0:
        raise ValueError("c must be non-negative")
    left, right = 0, isqrt(c)
    while left <= right:
        total = left * left + right * right
        if total == c:
            return True
        if total < c:
            left += 1
        else:
            right -= 1
    return False


def is_palindrome(s: str) -> bool:
    """Whether s reads the same in both directions."""
    return s == s[::-1]


def valid_palindrome(s: str) -> bool:
    """Whether s becomes a palindrome after deleting at most one character."""
    left, right = 0, len(s) - 1
    while left < right:
        if s[left] != s[right]:
            return is_palindrome(s[left + 1:right + 1]) or is_palindrome(s[left:right])
        left += 1
        right -= 1
    return True


def _is_subsequence(word: str, s: str) -> bool:
    remaining = iter(s)
    return all(char in remaining for char in word)


def find_longest_word(s: str, dictionary: Iterable[str]) -> str:
    """Longest dictionary word that is a subsequence of s, smallest first on ties."""
    matches = (word for word in dictionary if _is_subsequence(word, s))
    return min(matches, key=lambda word: (-len(word), word), default="")