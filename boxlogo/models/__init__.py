"""Domain models for the box logo generator."""

from .batch_result import BatchResult
from .color import RGB, ColorRole, RowMode
from .errors import ErrorKind, GeneratorAbort, TemplateLayerError
from .render_request import RenderRequest
from .row_range import RowRange
from .row_record import RowRecord

__all__ = [
    # Colors
    "RGB",
    "ColorRole",
    "RowMode",
    # Rows
    "RowRecord",
    "RowRange",
    # Rendering / results
    "RenderRequest",
    "BatchResult",
    # Errors
    "ErrorKind",
    "GeneratorAbort",
    "TemplateLayerError",
]
