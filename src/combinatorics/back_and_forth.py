from __future__ import annotations
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", covariant=True)


@runtime_checkable
class BackAndForthIterator(Protocol[T]):
    def has_next(self) -> bool: ...

    def next(self) -> T: ...

    def has_previous(self) -> bool: ...

    def previous(self) -> T: ...
