from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ..models.errors import ErrorKind, GeneratorAbort
from ..models.row_range import RowRange
from .prompts import Prompter

"""Interactive row range selection.

The operator picks ``start`` in ``[0, row_count)`` and then ``stop`` in
``(start, row_count]``, giving the non-empty half-open range
``[start, stop)``. Bad input is reported with a category-specific
diagnostic and re-prompted without a retry limit; cancelling either prompt
aborts the run.
"""

__all__ = [
    "IndexBounds",
    "RangeRejection",
    "start_bounds",
    "stop_bounds",
    "check_index",
    "build_prompt",
    "prompt_for_index",
    "select_range",
]

logger = logging.getLogger(__name__)

START_LABEL = "Start"
STOP_LABEL = "Stop"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class IndexBounds:
    """Allowed interval for one prompt."""
    label: str  # "Start" | "Stop"
    lower: int
    upper: int
    lower_inclusive: bool
    upper_inclusive: bool

    def __str__(self) -> str:
        left = "[" if self.lower_inclusive else "("
        right = "]" if self.upper_inclusive else ")"
        return f"{left}{self.lower}, {self.upper}{right}"

    def below_lower(self, value: int) -> bool:
        return value < self.lower if self.lower_inclusive else value <= self.lower

    def above_upper(self, value: int) -> bool:
        return value > self.upper if self.upper_inclusive else value >= self.upper


class RangeRejection(Enum):
    NOT_A_NUMBER = "not_a_number"
    NEGATIVE = "negative"
    BELOW_LOWER = "below_lower"
    ABOVE_UPPER = "above_upper"

    def diagnostic(self, bounds: IndexBounds) -> str:
        if self is RangeRejection.NOT_A_NUMBER:
            return "Input was not a number."
        if self is RangeRejection.NEGATIVE:
            return "Input was negative. Only select non-negative indices."
        if self is RangeRejection.BELOW_LOWER:
            if bounds.lower_inclusive:
                return f"Input was lower than the lower bound of {bounds.lower}."
            return f"Input was lower than or equal to the lower bound of {bounds.lower}."
        if bounds.upper_inclusive:
            return f"Input was larger than the total number of rows ({bounds.upper})."
        return f"Input was larger than or equal to the upper bound of {bounds.upper}."


def start_bounds(row_count: int) -> IndexBounds:
    return IndexBounds(START_LABEL, 0, row_count, lower_inclusive=True, upper_inclusive=False)


def stop_bounds(start: int, row_count: int) -> IndexBounds:
    return IndexBounds(STOP_LABEL, start, row_count, lower_inclusive=False, upper_inclusive=True)


def check_index(text: str, bounds: IndexBounds) -> int | RangeRejection:
    """Validate one answer; the accepted index or the first failing category."""
    stripped = text.strip()
    if not _INTEGER_RE.match(stripped):
        return RangeRejection.NOT_A_NUMBER
    value = int(stripped)
    if value < 0:
        return RangeRejection.NEGATIVE
    if bounds.below_lower(value):
        return RangeRejection.BELOW_LOWER
    if bounds.above_upper(value):
        return RangeRejection.ABOVE_UPPER
    return value


def build_prompt(bounds: IndexBounds, row_count: int) -> str:
    return (
        f"There are {row_count} valid rows in this CSV file. "
        f"{bounds.label} creating images at what row? "
        f"Please enter a number in the range {bounds}."
    )


def prompt_for_index(prompter: Prompter, bounds: IndexBounds, row_count: int) -> int:
    """Prompt until a valid index is entered.

    Raises:
        GeneratorAbort: CANCELLED when the operator dismisses the prompt.
    """
    message = build_prompt(bounds, row_count)
    while True:
        answer = prompter.ask(message)
        if answer is None:
            raise GeneratorAbort(ErrorKind.CANCELLED, f"{bounds.label.lower()} prompt cancelled")
        result = check_index(answer, bounds)
        if isinstance(result, RangeRejection):
            logger.debug(f"range: rejected {answer!r} for {bounds} ({result.value})")
            prompter.alert(result.diagnostic(bounds))
            continue
        return result


def select_range(prompter: Prompter, row_count: int) -> RowRange:
    """Ask for start, then stop (bounded by start); row_count must be >= 1."""
    if row_count < 1:
        raise ValueError("row_count must be at least 1")
    start = prompt_for_index(prompter, start_bounds(row_count), row_count)
    stop = prompt_for_index(prompter, stop_bounds(start, row_count), row_count)
    return RowRange(start=start, stop=stop)
