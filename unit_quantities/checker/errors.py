"""Module for creating errors representing invalid unit operations."""

import re
from pathlib import Path

_DIAGNOSTIC = re.compile(
    r"^(?P<path>.+?):(?P<lineno>\d+): (?P<severity>error|note): "
    r"(?P<message>.*?)(?:  \[(?P<code>[a-z0-9-]+)\])?$"
)


class UnitCheckerError:
    """Represents a unit checking error."""

    def __init__(self, code: str, lineno: int, message: str, path: Path | None = None):
        """Initialise a new unit checking error.

        Args:
            code: mypy error code, e.g. ``operator`` or ``arg-type``.
            lineno: Line of the offending expression.
            message: Human readable description.
            path: File the error was found in, if known.
        """
        self.code = code
        self.lineno = lineno
        self.message = message
        self.path = path

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return (
            "UnitCheckerError"
            f"(code={self.code!r}, lineno={self.lineno!r}, message={self.message!r})"
        )


def parse_mypy_diagnostic(line: str) -> UnitCheckerError | None:
    """Build an error from one line of mypy output.

    Notes and lines that are not diagnostics give None. Diagnostics without an error
    code, such as syntax errors, get the code ``syntax``.
    """
    match = _DIAGNOSTIC.match(line)
    if match is None or match["severity"] != "error":
        return None
    return UnitCheckerError(
        code=match["code"] or "syntax",
        lineno=int(match["lineno"]),
        message=match["message"],
        path=Path(match["path"]),
    )
