"""Expression tree and the temporary-name allocator.

Every operator node carries the temporary that names its result in the
emitted IR, so the tree doubles as a three-address-code representation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .ir import NO_SOURCE_LOCATION, BinaryOperator, SourceLocation
from . import constants


class NodeKind(str, Enum):
    NUMBER = "NUMBER"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"


OPERATOR_SYMBOLS: dict[NodeKind, BinaryOperator] = {
    NodeKind.ADD: BinaryOperator.ADD,
    NodeKind.SUB: BinaryOperator.SUB,
    NodeKind.MUL: BinaryOperator.MUL,
    NodeKind.DIV: BinaryOperator.DIV,
}


@dataclass(frozen=True)
class ExprNode:
    kind: NodeKind
    value: int | str  # literal for NUMBER, temporary name for operators
    left: ExprNode | None = None
    right: ExprNode | None = None
    location: SourceLocation = NO_SOURCE_LOCATION
    height: int = field(init=False, compare=False)

    def __post_init__(self):
        child_heights = [c.height for c in (self.left, self.right) if c is not None]
        object.__setattr__(self, "height", 1 + max(child_heights, default=0))

    @property
    def is_leaf(self) -> bool:
        return self.kind == NodeKind.NUMBER

    @property
    def operand_name(self) -> str:
        """Text used for this node when it appears as an IR operand."""
        if self.is_leaf:
            return str(self.value)
        return self.value


def number_node(value: int, location: SourceLocation = NO_SOURCE_LOCATION) -> ExprNode:
    return ExprNode(NodeKind.NUMBER, value, location=location)


def operator_node(
    kind: NodeKind,
    temp: str,
    left: ExprNode,
    right: ExprNode,
    location: SourceLocation = NO_SOURCE_LOCATION,
) -> ExprNode:
    return ExprNode(kind, temp, left, right, location)


def walk(root: ExprNode):
    """Yield every node of the tree in post-order."""
    if root.left is not None:
        yield from walk(root.left)
    if root.right is not None:
        yield from walk(root.right)
    yield root


class TempAllocator:
    """Hands out ``t0``, ``t1``, ... for one compilation unit."""

    def __init__(self):
        self._counter: int = 0

    @property
    def count(self) -> int:
        return self._counter

    def fresh(self) -> str:
        name = constants.TEMP_NAME_TEMPLATE.format(index=self._counter)
        self._counter += 1
        return name
