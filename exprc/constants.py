"""Named constants shared by the lexer, parser and evaluator."""

from __future__ import annotations

TEMP_NAME_TEMPLATE = "t{index}"

DEFAULT_MAX_NESTING_DEPTH = 100
DEFAULT_MAX_TREE_HEIGHT = 500

MSG_PRIMARY_EXPECTED = "number or '(' expected"
MSG_RPAREN_EXPECTED = "')' expected"
MSG_TRAILING_TOKEN = "unexpected token after expression"
MSG_TOO_DEEP = "expression nested too deeply"
MSG_TOO_LONG = "expression too long"
MSG_UNKNOWN_NODE = "unknown operator/operand"
MSG_DIVISION_BY_ZERO = "division by zero"
MSG_LITERAL_TOO_LONG = "integer literal too long"
