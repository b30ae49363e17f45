"""Three-address IR emitted while evaluating an expression."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BinaryOperator(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class SourceLocation(BaseModel):
    """Structured source span, 1-based lines and columns."""

    model_config = ConfigDict(frozen=True)

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


class IRInstruction(BaseModel):
    result: str
    operator: BinaryOperator
    left: str
    right: str
    source_location: SourceLocation = NO_SOURCE_LOCATION

    def __str__(self) -> str:
        return f"{self.result} = {self.left} {self.operator.value} {self.right}"

    def annotated(self) -> str:
        """Render the instruction with its source span as a trailing comment."""
        if self.source_location.is_unknown():
            return str(self)
        return f"{self}  # {self.source_location}"
