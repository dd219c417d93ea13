from __future__ import annotations
from dataclasses import dataclass
import re
from typing import Optional

from src.combinatorics.errors import InvalidInput

ALPHABETIC = re.compile(r"[a-zA-Z]+")


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class CursorConfig:
    base: str
    start_length: int = 1
    end_length: Optional[int] = None  # None -> n if start_length == 1, else start_length
    verbose: bool = False

    def validate(self) -> None:
        if self.base is None or not isinstance(self.base, str) or not self.base:
            raise InvalidInput("Invalid base. Must be a non-empty string.")
        if not ALPHABETIC.fullmatch(self.base):
            raise InvalidInput(f"Invalid base {self.base!r}. Must contain letters a-z / A-Z only.")
        n = len(self.base)
        if not _is_int(self.start_length) or not (1 <= self.start_length <= n):
            raise InvalidInput(f"start_length must be an int in [1, {n}], got {self.start_length!r}.")
        if self.end_length is not None:
            if not _is_int(self.end_length) or not (self.start_length <= self.end_length <= n):
                raise InvalidInput(
                    f"end_length must be an int in [{self.start_length}, {n}], got {self.end_length!r}."
                )

    def resolved_end_length(self) -> int:
        if self.end_length is not None:
            return self.end_length
        return len(self.base) if self.start_length == 1 else self.start_length
