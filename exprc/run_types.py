"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class CompilerConfig:
    """Groups parser limits and pipeline options."""

    max_nesting_depth: int = constants.DEFAULT_MAX_NESTING_DEPTH
    max_tree_height: int = constants.DEFAULT_MAX_TREE_HEIGHT
    verbose: bool = False


@dataclass
class PipelineStats:
    """Timing and size statistics for each pipeline stage."""

    source_bytes: int = 0
    token_count: int = 0

    # Stage timings (seconds)
    parse_time: float = 0.0
    eval_time: float = 0.0
    total_time: float = 0.0

    # Output sizes
    node_count: int = 0
    tree_height: int = 0
    temp_count: int = 0
    ir_instruction_count: int = 0

    def report(self) -> str:
        lines = [
            "═══ Pipeline Statistics ═══",
            f"  Source: {self.source_bytes} bytes, {self.token_count} tokens",
            "",
            f"  {'Stage':<20} {'Time':>10}  {'Output':>30}",
            f"  {'─' * 20} {'─' * 10}  {'─' * 30}",
        ]

        stages = [
            (
                "Parse",
                self.parse_time,
                f"{self.node_count} nodes, height {self.tree_height}",
            ),
            (
                "Evaluate + emit",
                self.eval_time,
                f"{self.ir_instruction_count} IR instructions",
            ),
        ]
        for name, t, output in stages:
            time_str = f"{t * 1000:>8.1f}ms"
            lines.append(f"  {name:<20} {time_str:>10}  {output:>30}")

        lines.append(f"  {'─' * 20} {'─' * 10}  {'─' * 30}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        lines.append("")
        lines.append(f"  Temporaries allocated: {self.temp_count}")
        return "\n".join(lines)
