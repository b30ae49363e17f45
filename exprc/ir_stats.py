"""Pure functions for computing statistics over IR instruction lists."""

from __future__ import annotations

from collections import Counter

from exprc.ir import IRInstruction


def count_operators(instructions: list[IRInstruction]) -> dict[str, int]:
    """Return a frequency map of operator symbols in the given instruction list.

    Args:
        instructions: A list of IR instructions.

    Returns:
        A dict mapping operator symbols ("+", "-", "*", "/") to their
        occurrence counts. Empty dict for an empty input list.
    """
    return dict(Counter(inst.operator.value for inst in instructions))
