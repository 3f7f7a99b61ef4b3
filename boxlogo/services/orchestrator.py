from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Protocol

from ..csvrows.reader import read_csv_file
from ..models.batch_result import BatchResult
from ..models.color import ColorRole
from ..models.errors import ErrorKind, GeneratorAbort, TemplateLayerError
from ..models.render_request import RenderRequest
from ..models.row_range import RowRange
from ..models.row_record import RowRecord
from .colors import resolve_color
from .progress import ProgressTracker
from .prompts import Prompter
from .range_selector import select_range

"""Batch orchestration: CSV -> range -> one image per row.

Sequence:
1. CSV path (given or selected; cancel -> CANCELLED)
2. Parse rows; zero valid rows -> NO_VALID_ROWS (before any other prompt)
3. Start / stop prompts
4. Output directory (given or selected; cancel -> CANCELLED, nothing written)
5. Create the output directory if missing (nothing is created on earlier aborts)
6. Render rows start..stop-1 in ascending order

A failing render aborts the remaining rows; images already written stay.
"""

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, request: RenderRequest) -> Path: ...


def build_request(record: RowRecord, output_directory: Path) -> RenderRequest:
    return RenderRequest(
        label_text=record.label_text,
        text_color=resolve_color(record, ColorRole.TITLE),
        background_color=resolve_color(record, ColorRole.BACKGROUND),
        file_name=record.file_name,
        output_directory=output_directory,
    )


def load_rows(csv_path: Path) -> list[RowRecord]:
    """Parse the CSV; raises GeneratorAbort(NO_VALID_ROWS) when nothing is usable."""
    try:
        rows = read_csv_file(csv_path)
    except OSError as e:
        raise GeneratorAbort(ErrorKind.NO_VALID_ROWS, f"cannot read {csv_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise GeneratorAbort(ErrorKind.NO_VALID_ROWS, f"cannot decode {csv_path}: {e}") from e
    if not rows:
        raise GeneratorAbort(ErrorKind.NO_VALID_ROWS)
    return rows


def ensure_output_directory(output_directory: Path) -> None:
    """Create the destination (and parents); called only once rows will be rendered."""
    try:
        output_directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GeneratorAbort(ErrorKind.RENDER_FAILED, f"cannot create {output_directory}: {e}") from e


def render_range(
    rows: list[RowRecord],
    row_range: RowRange,
    output_directory: Path,
    renderer: Renderer,
) -> list[Path]:
    written: list[Path] = []
    with ProgressTracker(len(row_range)) as progress:
        for index in row_range.indices():
            record = rows[index]
            progress.start_row(record.file_name)
            try:
                request = build_request(record, output_directory)
                path = renderer.render(request)
            except TemplateLayerError as e:
                raise GeneratorAbort(e.kind) from e
            except Exception as e:
                # どの例外でも残りの行を中止する (スタックトレースは出さない)
                raise GeneratorAbort(
                    ErrorKind.RENDER_FAILED, f"row {index} ({record.file_name}): {type(e).__name__}: {e}"
                ) from e
            written.append(path)
            progress.finish_row()
            logger.debug(f"row {index}: {path.name}")
    return written


def run_batch(
    prompter: Prompter,
    renderer: Renderer,
    csv_path: Path | None = None,
    output_directory: Path | None = None,
) -> BatchResult:
    """Run one batch end-to-end.

    Args:
        prompter: Operator interaction boundary
        renderer: Rendering collaborator (one call per row)
        csv_path: CSV to read; selected interactively when None
        output_directory: Destination; selected interactively when None

    Raises:
        GeneratorAbort: For every fatal condition (see ErrorKind)
    """
    start_time = datetime.now(UTC)

    if csv_path is None:
        csv_path = prompter.select_csv_file()
        if csv_path is None:
            raise GeneratorAbort(ErrorKind.CANCELLED, "csv selection cancelled")

    rows = load_rows(csv_path)
    logger.info(f"Loaded {len(rows)} valid rows from: {csv_path}")

    row_range = select_range(prompter, len(rows))

    if output_directory is None:
        output_directory = prompter.select_output_directory()
        if output_directory is None:
            raise GeneratorAbort(ErrorKind.CANCELLED, "output selection cancelled")

    ensure_output_directory(output_directory)
    logger.info(f"Rendering rows {row_range} to: {output_directory}")
    written = render_range(rows, row_range, output_directory, renderer)

    end_time = datetime.now(UTC)
    return BatchResult(
        total_rows=len(rows),
        row_range=row_range,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        rendered_files=written,
    )
