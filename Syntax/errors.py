"""Errors raised while translating argument notation into LaTeX."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Span:
    """Location of a node in the source text (offsets are 0-based, line/column 1-based)."""

    start: int
    end: int
    line: int = 1
    column: int = 1


class TranslationError(Exception):
    """Base class for every error that aborts a translation."""

    def __init__(self, message: str, span: Optional[Span] = None):
        super().__init__(message)
        self.message = message
        self.span = span

    def __str__(self):
        if self.span is None:
            return self.message
        return f"line {self.span.line}, column {self.span.column}: {self.message}"


class NotationSyntaxError(TranslationError):
    """The input does not match the grammar."""

    def __init__(self, message: str, span: Optional[Span] = None, expected: Sequence[str] = ()):
        super().__init__(message, span)
        self.expected = tuple(sorted(expected))


class ArityError(TranslationError):
    """A rule matched with a different number of children than required."""


class ValidationError(TranslationError):
    """The input parsed, but a header value or premise number is wrong."""


class InternalError(TranslationError):
    """The grammar produced a tree the emitter does not know how to handle."""


def _line_bounds(source: str, offset: int) -> Tuple[int, int]:
    start = source.rfind("\n", 0, offset) + 1
    end = source.find("\n", offset)
    if end == -1:
        end = len(source)
    return start, end


def format_error(error: TranslationError, source: str) -> str:
    """
    Render an error together with the offending source line.

     --> 3:4
      |
    3 | 2: Q
      |    ^
      = Expected exercise number to be 1, got 2
    """
    span = error.span
    if span is None:
        return f"error: {error.message}"

    line_start, line_end = _line_bounds(source, span.start)
    line = source[line_start:line_end].rstrip("\r")
    width = max(1, min(span.end, line_end) - span.start)
    gutter = " " * len(str(span.line))
    marker = " " * (span.start - line_start) + "^" * width

    return "\n".join(
        [
            f"{gutter}--> {span.line}:{span.column}",
            f"{gutter} |",
            f"{span.line} | {line}",
            f"{gutter} | {marker}",
            f"{gutter} = {error.message}",
        ]
    )
