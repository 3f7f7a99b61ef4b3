from __future__ import annotations

from dataclasses import dataclass

"""Half-open row range [start, stop) selected by the operator."""

__all__ = [
    "RowRange",
]


@dataclass(frozen=True)
class RowRange:
    start: int  # inclusive
    stop: int  # exclusive

    def __post_init__(self) -> None:
        if self.start < 0 or self.stop <= self.start:
            raise ValueError(f"invalid row range [{self.start}, {self.stop})")

    def __len__(self) -> int:
        return self.stop - self.start

    def indices(self) -> range:
        return range(self.start, self.stop)

    def __str__(self) -> str:
        return f"[{self.start}, {self.stop})"
