from __future__ import annotations

from ..models.batch_result import BatchResult

"""SUMMARY line rendering for a finished batch."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # 指数表記を避ける
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.2f}"


def render_summary_line(result: BatchResult) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY rows={total} range=[{start}, {stop}) rendered={count} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> from boxlogo.models.row_range import RowRange
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = BatchResult(total_rows=5, row_range=RowRange(1, 3),
        ...     start_time=t, end_time=t, elapsed_seconds=2.0)
        >>> render_summary_line(result)
        'SUMMARY rows=5 range=[1, 3) rendered=0 elapsed_sec=2'
    """
    return (
        f"SUMMARY rows={result.total_rows} "
        f"range={result.row_range} "
        f"rendered={result.rendered_count} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
