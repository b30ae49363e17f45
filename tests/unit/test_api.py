"""Tests for the composable API functions in exprc.api."""

import pytest

from exprc import (
    CompileError,
    DivisionByZeroError,
    ExpressionSyntaxError,
    compile_expression,
    dump_ir,
    evaluate_source,
    parse_source,
    tokenize,
)
from exprc.api import CompilationResult
from exprc.ast_nodes import ExprNode, NodeKind
from exprc.ir import IRInstruction
from exprc.lexer import TokenKind
from exprc.run_types import CompilerConfig

EXAMPLE_SOURCE = "9000 + (6 * 4)"


class TestTokenize:
    def test_returns_tokens_ending_in_eof(self):
        tokens = tokenize(EXAMPLE_SOURCE)
        assert len(tokens) == 8
        assert tokens[-1].kind == TokenKind.EOF


class TestParseSource:
    def test_returns_tree(self):
        root = parse_source(EXAMPLE_SOURCE)
        assert isinstance(root, ExprNode)
        assert root.kind == NodeKind.ADD

    def test_config_is_applied(self):
        with pytest.raises(ExpressionSyntaxError):
            parse_source("((1))", CompilerConfig(max_nesting_depth=1))


class TestCompileExpression:
    def test_returns_compilation_result(self):
        result = compile_expression(EXAMPLE_SOURCE)
        assert isinstance(result, CompilationResult)
        assert all(isinstance(inst, IRInstruction) for inst in result.instructions)

    def test_end_to_end_example(self):
        result = compile_expression(EXAMPLE_SOURCE)
        assert result.value == 9024
        assert result.ir_text() == "t0 = 6 * 4\nt1 = 9000 + t0"

    def test_tree_is_returned(self):
        result = compile_expression("1 + 2")
        assert result.tree.value == "t0"

    def test_literal_has_no_ir(self):
        result = compile_expression("5")
        assert result.value == 5
        assert result.instructions == []
        assert result.ir_text() == ""

    def test_repeated_compilation_is_identical(self):
        first = compile_expression("(2 + 3) * 4 - 10 / 3")
        second = compile_expression("(2 + 3) * 4 - 10 / 3")
        assert first.value == second.value == 17
        assert first.ir_text() == second.ir_text()

    def test_unterminated_paren(self):
        with pytest.raises(ExpressionSyntaxError):
            compile_expression("(1 + 2")

    def test_errors_share_a_base_class(self):
        with pytest.raises(CompileError):
            compile_expression(")")
        with pytest.raises(CompileError):
            compile_expression("4 / (2 - 2)")

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            compile_expression("1 / 0")

    def test_oversized_literal_is_a_compile_error(self):
        with pytest.raises(CompileError, match="integer literal too long"):
            evaluate_source("1" * 5000)

    def test_huge_result_is_returned(self):
        value = evaluate_source(" * ".join(["9" * 1000] * 5))
        assert value == (10**1000 - 1) ** 5


class TestEvaluateSource:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("2 + 3 * 4", 14),
            ("(2 + 3) * 4", 20),
            ("9 - 3 - 2", 4),
            ("7 / 2", 3),
            ("(1 - 8) / 2", -3),
            ("  42  ", 42),
        ],
    )
    def test_values(self, source, expected):
        assert evaluate_source(source) == expected


class TestDumpIr:
    def test_returns_lines(self):
        assert dump_ir(EXAMPLE_SOURCE) == "t0 = 6 * 4\nt1 = 9000 + t0"

    def test_annotated_lines_carry_spans(self):
        lines = dump_ir(EXAMPLE_SOURCE, annotate=True).split("\n")
        assert lines == [
            "t0 = 6 * 4  # 1:11-1:12",
            "t1 = 9000 + t0  # 1:6-1:7",
        ]

    def test_literal_dumps_empty(self):
        assert dump_ir("3") == ""

    def test_malformed_input_emits_nothing(self):
        with pytest.raises(ExpressionSyntaxError):
            dump_ir("(1 + 2")
