"""
Custom exceptions for Newick/NHX parsing.

Structural problems (parentheses, terminator, comments, multiple roots) are
always raised at the parse boundary. Span-level problems (branch lengths,
tag pairs) are raised only in strict mode; otherwise they are attached to the
offending node's ``errors`` list.
"""

from __future__ import annotations
from typing import Optional


class NewickParseError(ValueError):
    """Base exception for Newick/NHX parsing errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        span: Optional[str] = None,
    ):
        self.position = position
        self.span = span
        if position is not None:
            message = f"{message} (at offset {position})"
        elif span is not None:
            message = f"{message} (in {span!r})"
        super().__init__(message)


class UnbalancedParenthesesError(NewickParseError):
    """Raised when a ')' has no open context or a '(' is never closed."""

    pass


class MissingTerminatorError(NewickParseError):
    """Raised when the input does not end with ';'."""

    pass


class MultipleRootCandidatesError(NewickParseError):
    """Raised when the top level holds more than one comma-separated entry."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Expected a single top-level tree but found {count} entries; "
            f"wrap siblings in parentheses or parse them as separate trees"
        )


class InvalidNumericLengthError(NewickParseError):
    """Raised when a branch length is not a valid floating-point number."""

    pass


class MalformedAnnotationError(NewickParseError):
    """Raised when an NHX tag pair is missing its '=' separator."""

    pass


class UnterminatedCommentError(MalformedAnnotationError):
    """Raised when a '[' comment is never closed."""

    pass
