"""Greedy, binary-search, two-pointer and linked-list algorithms as plain functions."""

__version__ = "0.1.0"
__all__ = ["binary_search", "greedy", "linked_list", "two_pointers"]