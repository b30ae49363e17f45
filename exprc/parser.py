"""Recursive-descent parser building an ExprNode tree from a token source.

Grammar::

    Expression               → AdditiveExpression
    AdditiveExpression       → MultiplicativeExpression (('+' | '-') MultiplicativeExpression)*
    MultiplicativeExpression → PrimaryExpression (('*' | '/') PrimaryExpression)*
    PrimaryExpression        → NUMBER | '(' Expression ')'
"""

from __future__ import annotations

import logging

from .ast_nodes import ExprNode, NodeKind, TempAllocator, number_node, operator_node
from .errors import ErrorReporter
from .lexer import Lexer, TokenKind
from .run_types import CompilerConfig
from . import constants

logger = logging.getLogger(__name__)

_ADDITIVE_OPS: dict[TokenKind, NodeKind] = {
    TokenKind.ADD: NodeKind.ADD,
    TokenKind.SUB: NodeKind.SUB,
}

_MULTIPLICATIVE_OPS: dict[TokenKind, NodeKind] = {
    TokenKind.MUL: NodeKind.MUL,
    TokenKind.DIV: NodeKind.DIV,
}


class Parser:
    """Parses one expression from *lexer*.

    The lexer must already be positioned on the expression's first token.
    Operator nodes are named from *temps* as they are built, so a fresh
    allocator per compilation unit restarts the names at ``t0``.
    """

    def __init__(
        self,
        lexer: Lexer,
        temps: TempAllocator | None = None,
        reporter: ErrorReporter | None = None,
        config: CompilerConfig = CompilerConfig(),
    ):
        self._lexer = lexer
        self.temps = temps or TempAllocator()
        self._reporter = reporter or ErrorReporter()
        self._config = config
        self._depth = 0

    def parse(self) -> ExprNode:
        """Parse a complete input: one expression followed by end of input."""
        root = self.expression()
        if self._lexer.current.kind != TokenKind.EOF:
            self._reporter.error(
                constants.MSG_TRAILING_TOKEN, self._lexer.current.location
            )
        logger.debug(
            "Parsed tree of height %d using %d temporaries",
            root.height,
            self.temps.count,
        )
        return root

    def expression(self) -> ExprNode:
        return self._additive()

    def _additive(self) -> ExprNode:
        left = self._multiplicative()
        while self._lexer.current.kind in _ADDITIVE_OPS:
            op_token = self._lexer.current
            self._lexer.advance()
            right = self._multiplicative()
            left = self._combine(_ADDITIVE_OPS[op_token.kind], left, right, op_token)
        return left

    def _multiplicative(self) -> ExprNode:
        left = self._primary()
        while self._lexer.current.kind in _MULTIPLICATIVE_OPS:
            op_token = self._lexer.current
            self._lexer.advance()
            right = self._primary()
            left = self._combine(
                _MULTIPLICATIVE_OPS[op_token.kind], left, right, op_token
            )
        return left

    def _primary(self) -> ExprNode:
        token = self._lexer.current
        if token.kind == TokenKind.NUMBER:
            self._lexer.advance()
            return number_node(token.value, token.location)
        if token.kind == TokenKind.LPAREN:
            self._lexer.advance()
            self._depth += 1
            if self._depth > self._config.max_nesting_depth:
                self._reporter.error(constants.MSG_TOO_DEEP, token.location)
            expr = self.expression()
            self._expect(TokenKind.RPAREN, constants.MSG_RPAREN_EXPECTED)
            self._depth -= 1
            return expr
        self._reporter.error(constants.MSG_PRIMARY_EXPECTED, token.location)

    def _combine(self, kind: NodeKind, left: ExprNode, right: ExprNode, op_token):
        # Named only once both operands exist: names follow construction order.
        node = operator_node(kind, self.temps.fresh(), left, right, op_token.location)
        if node.height > self._config.max_tree_height:
            self._reporter.error(constants.MSG_TOO_LONG, op_token.location)
        return node

    def _expect(self, kind: TokenKind, message: str):
        if self._lexer.current.kind != kind:
            self._reporter.error(message, self._lexer.current.location)
        self._lexer.advance()
