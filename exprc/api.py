"""Composable API functions for the expression compiler pipeline.

Each function runs a fresh lexer, parser and temporary allocator, so
repeated calls on the same source produce identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .ast_nodes import ExprNode, TempAllocator
from .errors import ErrorReporter
from .evaluator import evaluate_tree
from .ir import IRInstruction
from .ir_stats import count_operators
from .lexer import Lexer, Token
from .lexer import tokenize as _scan_all
from .parser import Parser
from .run_types import CompilerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompilationResult:
    """Value of an expression together with the IR emitted computing it."""

    value: int
    instructions: list[IRInstruction] = field(default_factory=list)
    tree: ExprNode | None = None

    def ir_text(self) -> str:
        return "\n".join(str(inst) for inst in self.instructions)


def tokenize(source: str) -> list[Token]:
    """Scan source into tokens, ending with an EOF token.

    Raises:
        ExpressionSyntaxError: On a character that starts no token.
    """
    return _scan_all(source, ErrorReporter())


def parse_source(source: str, config: CompilerConfig = CompilerConfig()) -> ExprNode:
    """Parse source into an expression tree.

    Args:
        source: Expression text, e.g. ``"9000 + (6 * 4)"``.
        config: Parser limits.

    Returns:
        The root ExprNode; temporaries start at ``t0``.

    Raises:
        ExpressionSyntaxError: On the first grammar or lexical violation.
    """
    reporter = ErrorReporter()
    parser = Parser(Lexer(source, reporter), TempAllocator(), reporter, config)
    return parser.parse()


def compile_expression(
    source: str, config: CompilerConfig = CompilerConfig()
) -> CompilationResult:
    """Parse and evaluate source, collecting the emitted IR.

    Args:
        source: Expression text.
        config: Parser limits.

    Returns:
        A CompilationResult with the integer value, the IR instructions
        in emission order, and the tree.

    Raises:
        ExpressionSyntaxError: If the source is malformed.
        DivisionByZeroError: If a divisor evaluates to zero.
    """
    logger.info("Compiling expression (%d bytes)", len(source.encode("utf-8")))
    tree = parse_source(source, config)
    value, instructions = evaluate_tree(tree)
    return CompilationResult(value=value, instructions=instructions, tree=tree)


def evaluate_source(source: str, config: CompilerConfig = CompilerConfig()) -> int:
    """Return the integer value of the expression in source."""
    return compile_expression(source, config).value


def dump_ir(
    source: str, config: CompilerConfig = CompilerConfig(), annotate: bool = False
) -> str:
    """Compile source and return its IR as text, one instruction per line.

    Args:
        source: Expression text.
        config: Parser limits.
        annotate: Append each instruction's source span as a ``#`` comment.

    Returns:
        Lines of the form ``t1 = 9000 + t0``; empty for a bare literal.
    """
    instructions = compile_expression(source, config).instructions
    if annotate:
        return "\n".join(inst.annotated() for inst in instructions)
    return "\n".join(str(inst) for inst in instructions)


def ir_stats(source: str, config: CompilerConfig = CompilerConfig()) -> dict[str, int]:
    """Compile source and return operator frequency counts over its IR."""
    return count_operators(compile_expression(source, config).instructions)
