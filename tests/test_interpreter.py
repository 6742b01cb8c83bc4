"""Tests for the tree-walking interpreter."""

import math

import pytest

from tests.utils import parse_expr, parse_text, run_text
from environment import Environment
from errors import ExecutionError
from interpreter import evaluate, execute, interpret_program


def test_simple_arithmetic():
    lines, _ = run_text("print 1 + 2 * 3;")
    assert lines == ["7"]


def test_grouping_changes_evaluation_order():
    lines, _ = run_text("print (1 + 2) * 3; print -(4 - 6);")
    assert lines == ["9", "2"]


@pytest.mark.parametrize(
    "a, op, b",
    [
        (1.5, "+", 2.25),
        (10, "-", 0.1),
        (0.1, "+", 0.2),
        (7, "*", 6),
        (22, "/", 7),
        (1, "/", 3),
    ],
)
def test_arithmetic_matches_float_semantics(a, op, b):
    value = evaluate(parse_expr(f"{a} {op} {b}"), Environment())
    expected = {
        "+": float(a) + float(b),
        "-": float(a) - float(b),
        "*": float(a) * float(b),
        "/": float(a) / float(b),
    }[op]
    assert value == expected


def test_division_by_zero_follows_ieee():
    env = Environment()
    assert evaluate(parse_expr("1 / 0"), env) == math.inf
    assert evaluate(parse_expr("-1 / 0"), env) == -math.inf
    assert evaluate(parse_expr("1 / -0"), env) == -math.inf
    assert math.isnan(evaluate(parse_expr("0 / 0"), env))


def test_print_renders_values():
    lines, _ = run_text(
        'print 2.5; print "text"; print true; print false; print nil; print 1 / 0; print 0 / 0;'
    )
    assert lines == ["2.5", "text", "true", "false", "nil", "inf", "NaN"]


def test_string_operands_fail_rather_than_concatenate():
    with pytest.raises(ExecutionError) as exc:
        run_text('"a" + "b";')
    assert exc.value.message == "Operands must be numbers, got 'a' and 'b'"
    assert exc.value.line == 1


def test_mixed_operands_fail():
    with pytest.raises(ExecutionError) as exc:
        run_text("print 1\n+ true;")
    assert "Operands must be numbers" in exc.value.message
    assert exc.value.line == 2


@pytest.mark.parametrize("src, op", [("1 == 1;", "=="), ("2 < 3;", "<"), ("1 != 2;", "!=")])
def test_non_arithmetic_binary_operators_fail(src, op):
    with pytest.raises(ExecutionError) as exc:
        run_text(src)
    assert exc.value.message == f"Invalid binary operator '{op}'"


def test_unary_minus_requires_number():
    with pytest.raises(ExecutionError) as exc:
        run_text('-"x";')
    assert exc.value.message == "Operand must be a number, got 'x'"


def test_bang_is_not_defined_at_runtime():
    with pytest.raises(ExecutionError) as exc:
        run_text("!1;")
    assert exc.value.message == "Invalid unary operator '!'"
    with pytest.raises(ExecutionError) as exc:
        run_text("!true;")
    assert exc.value.message == "Operand must be a number, got 'true'"


def test_left_operand_is_evaluated_first():
    with pytest.raises(ExecutionError) as exc:
        run_text("missingleft + missingright;")
    assert exc.value.message == "Undefined variable 'missingleft'."


def test_var_defaults_to_nil_and_redeclaration_overwrites():
    lines, env = run_text("var a; print a; var a = 1; var a = a + 1; print a;")
    assert lines == ["nil", "2"]
    assert env.get("a") == 2.0


def test_block_scoping_shadows_and_restores_outer_binding():
    lines, _ = run_text("var x = 1; { var x = 2; print x; } print x;")
    assert lines == ["2", "1"]


def test_block_reads_enclosing_scopes():
    lines, _ = run_text("var a = 1; { var b = a + 1; { print a + b; } }")
    assert lines == ["3"]


def test_block_declarations_do_not_leak():
    with pytest.raises(ExecutionError) as exc:
        run_text("{ var inner = 1; }\nprint inner;")
    assert exc.value.message == "Undefined variable 'inner'."
    assert exc.value.line == 2


def test_error_aborts_remaining_statements(capsys):
    env = Environment()
    stmts = parse_text('print 1; { print 2; "a" - 1; print 3; } print 4;')
    with pytest.raises(ExecutionError):
        interpret_program(stmts, env=env)
    assert capsys.readouterr().out.splitlines() == ["1", "2"]


def test_execute_writes_to_stdout_by_default(capsys):
    execute(parse_text("print 41 + 1;")[0], Environment())
    assert capsys.readouterr().out == "42\n"


def test_interpret_program_reuses_given_environment():
    env = Environment()
    env.define("seed", 10.0)
    interpret_program(parse_text("var doubled = seed * 2;"), env=env)
    assert env.get("doubled") == 20.0
