from __future__ import annotations
from math import comb
from typing import Iterator, Optional, Tuple

import numpy as np

from src.combinatorics.cursor_conf import CursorConfig
from src.combinatorics.errors import EndOfSequence
from src.combinatorics.index_steps import (
    advance_indices,
    count_combinations,
    first_indices,
    is_first_indices,
    last_indices,
    new_index_buffer,
    rank_indices,
    render,
    retreat_indices,
)


class CombinationCursor:
    """
    Bidirectional cursor over the order-preserving k-combinations of a base string.

    Arities run from start_length to end_length; inside one arity the tuples of
    positions are visited in lexicographic order. The cursor sits *before* the
    tuple held in the index buffer: next() returns it and then steps forward,
    previous() steps backward and then returns the tuple it landed on.

    Nothing is enumerated up front, construction only allocates an index buffer
    of len(base) slots.
    """

    def __init__(
            self,
            base: str,
            start_length: int = 1,
            end_length: Optional[int] = None,
            *,
            verbose: bool = False,
    ):
        cfg = CursorConfig(base=base, start_length=start_length, end_length=end_length, verbose=verbose)
        cfg.validate()

        self._base: str = cfg.base
        self._n: int = len(cfg.base)
        self._start: int = cfg.start_length
        self._end: int = cfg.resolved_end_length()
        self.verbose: bool = cfg.verbose

        self._length: int = self._start
        self._buffer: np.ndarray = new_index_buffer(self._n)
        first_indices(self._buffer, self._length)

    @classmethod
    def from_config(cls, cfg: CursorConfig) -> "CombinationCursor":
        return cls(cfg.base, cfg.start_length, cfg.end_length, verbose=cfg.verbose)

    @property
    def base(self) -> str:
        return self._base

    @property
    def start_length(self) -> int:
        return self._start

    @property
    def end_length(self) -> int:
        return self._end

    @property
    def current_length(self) -> int:
        return self._length

    @property
    def indices(self) -> Tuple[int, ...]:
        # forward-exhausted: the buffer still holds the last tuple of end_length
        return tuple(self._buffer[:min(self._length, self._end)].tolist())

    def _view(self) -> np.ndarray:
        return self._buffer[:self._length]

    def _exhausted(self) -> bool:
        return self._length > self._end

    # ---- forward

    def has_next(self) -> bool:
        return self._length <= self._end

    def next(self) -> str:
        if not self.has_next():
            raise EndOfSequence("No next combination available.")
        out = render(self._base, self._view())
        self._step_forward()
        return out

    def _step_forward(self) -> None:
        if advance_indices(self._view(), self._n):
            return
        self._length += 1
        if self._length <= self._end:
            first_indices(self._buffer, self._length)
            if self.verbose:
                print(f"[Cursor] base={self._base!r}: arity {self._length - 1} -> {self._length}")
        elif self.verbose:
            print(f"[Cursor] base={self._base!r}: exhausted after arity {self._end}")

    # ---- backward

    def has_previous(self) -> bool:
        if self._length > self._start:
            return True
        return self._length == self._start and not is_first_indices(self._view())

    def previous(self) -> str:
        if not self.has_previous():
            raise EndOfSequence("No previous combination available.")
        self._step_backward()
        return render(self._base, self._view())

    def _step_backward(self) -> None:
        if self._exhausted():
            self._length = self._end
            return
        if retreat_indices(self._view(), self._n):
            return
        self._length -= 1
        last_indices(self._buffer, self._n, self._length)
        if self.verbose:
            print(f"[Cursor] base={self._base!r}: arity {self._length + 1} -> {self._length}")

    # ----

    def remaining(self) -> int:
        """How many more next() calls will succeed."""
        if self._exhausted():
            return 0
        k = self._length
        in_arity = comb(self._n, k) - rank_indices(self._view(), self._n)
        return in_arity + count_combinations(self._n, k + 1, self._end)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        try:
            return self.next()
        except EndOfSequence:
            raise StopIteration from None

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, CombinationCursor):
            return NotImplemented
        return (self._length == other._length
                and self._base == other._base
                and self.indices == other.indices)

    def __hash__(self) -> int:
        return hash((self._base, self._length, self.indices))

    def __repr__(self) -> str:
        return f"CombinationCursor(base='{self._base}', current_length={self._length})"
