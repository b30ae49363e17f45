"""Arithmetic expression compiler: recursive-descent parser, evaluator and IR emitter."""

from .run import run  # noqa: F401
from .api import (  # noqa: F401
    tokenize,
    parse_source,
    compile_expression,
    evaluate_source,
    dump_ir,
    ir_stats,
)
from .errors import (  # noqa: F401
    CompileError,
    ExpressionSyntaxError,
    InternalInvariantError,
    DivisionByZeroError,
)
