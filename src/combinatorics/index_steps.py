from __future__ import annotations
from math import comb

import numpy as np


def new_index_buffer(n: int) -> np.ndarray:
    """One slot per base position; a tuple of arity k lives in buffer[:k]."""
    return np.zeros(n, dtype=np.int64)


def first_indices(buffer: np.ndarray, k: int) -> None:
    buffer[:k] = np.arange(k)


def last_indices(buffer: np.ndarray, n: int, k: int) -> None:
    buffer[:k] = np.arange(n - k, n)


def is_first_indices(indices: np.ndarray) -> bool:
    return bool(np.array_equal(indices, np.arange(len(indices))))


def advance_indices(indices: np.ndarray, n: int) -> bool:
    """
    Step indices (a view of length k) to the next k-tuple in lexicographic order.

    Scans from the right for the first slot that still has room to grow
    (indices[i] < n - k + i), increments it and packs the tail tightly behind it.
    Returns False and leaves indices untouched if it was the last tuple of its arity.
    """
    k = len(indices)
    i = k - 1
    while i >= 0 and indices[i] == i + (n - k):
        i -= 1
    if i < 0:
        return False
    indices[i] += 1
    indices[i + 1:] = indices[i] + np.arange(1, k - i)
    return True


def retreat_indices(indices: np.ndarray, n: int) -> bool:
    """
    Inverse of advance_indices.

    The slot to shrink is the rightmost one with a gap to its left neighbour
    (or to -1 for slot 0); after decrementing it the tail is packed to its
    maximum, n - k + j, which is the last tuple under the new prefix.
    Returns False and leaves indices untouched if it was the first tuple of its arity.
    """
    k = len(indices)
    i = k - 1
    while i >= 0 and indices[i] == (indices[i - 1] + 1 if i > 0 else 0):
        i -= 1
    if i < 0:
        return False
    indices[i] -= 1
    indices[i + 1:] = np.arange(n - k + i + 1, n)
    return True


def rank_indices(indices: np.ndarray, n: int) -> int:
    """Zero-based position of a k-tuple within the lexicographic order of its arity."""
    k = len(indices)
    rank = 0
    prev = -1
    for i, p in enumerate(indices.tolist()):
        for v in range(prev + 1, p):
            rank += comb(n - 1 - v, k - 1 - i)
        prev = p
    return rank


def render(base: str, indices: np.ndarray) -> str:
    return "".join(base[p] for p in indices.tolist())


def count_combinations(n: int, start: int, end: int) -> int:
    # sum of C(n, k) for k in [start, end]
    return sum(comb(n, k) for k in range(start, end + 1))

