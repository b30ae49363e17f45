"""Orchestrator: timed run() entry point."""

from __future__ import annotations

import logging
import time

from .api import CompilationResult
from .ast_nodes import TempAllocator, walk
from .errors import ErrorReporter
from .evaluator import Evaluator
from .ir import IRInstruction
from .lexer import Lexer
from .parser import Parser
from .run_types import CompilerConfig, PipelineStats

logger = logging.getLogger(__name__)


def run(
    source: str,
    config: CompilerConfig = CompilerConfig(),
) -> tuple[CompilationResult, PipelineStats]:
    """End-to-end: scan → parse → evaluate and emit, with stage timings.

    Args:
        source: Expression text.
        config: Parser limits; ``verbose`` prints the IR and statistics.

    Returns:
        Tuple of (CompilationResult, PipelineStats).
    """
    pipeline_start = time.perf_counter()
    stats = PipelineStats(source_bytes=len(source.encode("utf-8")))

    # 1. Parse
    t0 = time.perf_counter()
    reporter = ErrorReporter()
    temps = TempAllocator()
    lexer = Lexer(source, reporter)
    tree = Parser(lexer, temps, reporter, config).parse()
    stats.parse_time = time.perf_counter() - t0
    stats.token_count = lexer.token_count
    stats.node_count = sum(1 for _ in walk(tree))
    stats.tree_height = tree.height
    stats.temp_count = temps.count

    # 2. Evaluate + emit
    instructions: list[IRInstruction] = []

    def emit(inst: IRInstruction):
        instructions.append(inst)
        if config.verbose:
            print(f"  {inst}")

    if config.verbose:
        print("═══ IR ═══")
    t0 = time.perf_counter()
    value = Evaluator(emit).evaluate(tree)
    stats.eval_time = time.perf_counter() - t0
    stats.ir_instruction_count = len(instructions)
    stats.total_time = time.perf_counter() - pipeline_start

    logger.info(
        "Evaluated to %s with %d IR instructions in %.1fms",
        _format_val(value),
        stats.ir_instruction_count,
        stats.total_time * 1000,
    )

    if config.verbose:
        print()
        print(f"═══ Result ═══\n  {_format_val(value)}")
        print()
        print(stats.report())

    return CompilationResult(value=value, instructions=instructions, tree=tree), stats


def _format_val(value: int) -> str:
    """Format a result for display; huge integers are summarised by size."""
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit integer>"
