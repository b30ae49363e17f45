"""Evaluator: computes an expression tree's value while emitting its IR."""

from __future__ import annotations

import logging
from typing import Callable

from .ast_nodes import OPERATOR_SYMBOLS, ExprNode, NodeKind
from .errors import DivisionByZeroError, InternalInvariantError
from .ir import BinaryOperator, IRInstruction
from . import constants

logger = logging.getLogger(__name__)

IRSink = Callable[[IRInstruction], None]


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


_ARITHMETIC: dict[BinaryOperator, Callable[[int, int], int]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: truncating_div,
}


class Evaluator:
    """Post-order walk: children fully evaluated and emitted, left before right,
    then one instruction for the node itself."""

    def __init__(self, sink: IRSink):
        self._sink = sink

    def evaluate(self, node: ExprNode) -> int:
        if node.kind == NodeKind.NUMBER:
            return node.value

        operator = OPERATOR_SYMBOLS.get(node.kind)
        if operator is None or node.left is None or node.right is None:
            raise InternalInvariantError(constants.MSG_UNKNOWN_NODE, node.location)

        left_value = self.evaluate(node.left)
        right_value = self.evaluate(node.right)

        if operator == BinaryOperator.DIV and right_value == 0:
            raise DivisionByZeroError(constants.MSG_DIVISION_BY_ZERO, node.location)

        result = _ARITHMETIC[operator](left_value, right_value)
        instruction = IRInstruction(
            result=node.value,
            operator=operator,
            left=node.left.operand_name,
            right=node.right.operand_name,
            source_location=node.location,
        )
        logger.debug("Emitted %s", instruction)
        self._sink(instruction)
        return result


def evaluate_tree(root: ExprNode) -> tuple[int, list[IRInstruction]]:
    """Evaluate *root*, collecting the emitted instructions in a list."""
    instructions: list[IRInstruction] = []
    value = Evaluator(instructions.append).evaluate(root)
    return value, instructions
