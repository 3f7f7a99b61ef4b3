from __future__ import annotations

from enum import Enum

"""Fatal error kinds and their exit codes / operator messages.

Every fatal path of a run ends in exactly one of these kinds. The CLI turns
the kind into a single user-visible line and returns its exit code.
"""

__all__ = [
    "ErrorKind",
    "GeneratorAbort",
    "TemplateLayerError",
    "ENDING_SCRIPT",
]

ENDING_SCRIPT = "Ending script."


class ErrorKind(Enum):
    """Tagged fatal error kind.

    Values are (exit_code, message). CANCELLED is a clean abort: exit code 0
    and no message beyond the neutral termination line.
    """
    CANCELLED = (0, "")
    NO_VALID_ROWS = (1, "There were no valid rows found in this CSV file.")
    MISSING_TITLE_LAYER = (2, "There was no layer called Title found.")
    MISSING_BACKGROUND_LAYER = (3, "There was no layer called Background found.")
    TITLE_NOT_TEXT_LAYER = (4, "The Title layer is not a text layer. Add text to resolve this issue.")
    CONFIG_INVALID = (5, "The configuration file could not be loaded.")
    RENDER_FAILED = (6, "An image could not be written.")

    @property
    def exit_code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]

    def operator_message(self) -> str:
        """Single line shown to the operator before terminating."""
        if not self.message:
            return ENDING_SCRIPT
        return f"{self.message} {ENDING_SCRIPT}"


class GeneratorAbort(Exception):
    """Raised to end the whole run with a given ErrorKind."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(detail or kind.message or kind.name)

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code


class TemplateLayerError(Exception):
    """Raised by the renderer when the template lacks a usable layer."""

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.message)
