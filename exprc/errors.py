"""Compile errors and the error reporter shared by the lexer, parser and evaluator."""

from __future__ import annotations

import logging

from .ir import NO_SOURCE_LOCATION, SourceLocation

logger = logging.getLogger(__name__)


class CompileError(Exception):
    """Base class for every error raised while compiling an expression."""

    def __init__(self, message: str, location: SourceLocation = NO_SOURCE_LOCATION):
        self.message = message
        self.location = location
        if location.is_unknown():
            super().__init__(message)
        else:
            super().__init__(
                f"{message} at {location.start_line}:{location.start_col}"
            )


class ExpressionSyntaxError(CompileError, SyntaxError):
    """Input does not match the expression grammar."""


class InternalInvariantError(CompileError):
    """A malformed tree reached the evaluator."""


class DivisionByZeroError(CompileError):
    """Right operand of '/' evaluated to zero."""


class ErrorReporter:
    """Reports the first error of a compilation unit and aborts it."""

    def __init__(self, error_class: type[CompileError] = ExpressionSyntaxError):
        self._error_class = error_class

    def error(
        self, message: str, location: SourceLocation = NO_SOURCE_LOCATION
    ):
        exc = self._error_class(message, location)
        logger.error("%s", exc)
        raise exc
