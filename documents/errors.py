"""
DocumentError: fatal error raised when an input document is malformed.
"""

from typing import Optional


class DocumentError(ValueError):
    """
    Malformed network or schedule document.

    Attributes:
        path (str): File the document was read from (``"<string>"`` for text).
        line (int | None): 1-based line number of the offending line.
        field (str | None): Name of the offending field, when known.
        reason (str): Human-readable description of the problem.
    """

    def __init__(
        self,
        reason: str,
        path: str = "<string>",
        line: Optional[int] = None,
        field: Optional[str] = None,
    ):
        self.reason = reason
        self.path = path
        self.line = line
        self.field = field
        super().__init__(str(self))

    def __str__(self) -> str:
        location = self.path if self.line is None else f"{self.path}:{self.line}"
        what = f" ({self.field})" if self.field else ""
        return f"{location}: {self.reason}{what}"
