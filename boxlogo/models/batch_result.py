from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .row_range import RowRange

"""Aggregated result of one batch run (feeds the SUMMARY line)."""

__all__ = [
    "BatchResult",
]


@dataclass(frozen=True)
class BatchResult:
    total_rows: int  # valid rows parsed from the CSV
    row_range: RowRange  # rows selected for rendering
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    rendered_files: list[Path] = field(default_factory=list)

    @property
    def rendered_count(self) -> int:
        return len(self.rendered_files)
