"""Tree-walking interpreter for parsed Y programs.

`evaluate` computes the value of an expression node and `execute` runs a
statement node; both work against an `Environment` and raise
`ExecutionError` on failure. `interpret_program` runs a whole statement list
against a global environment and stops at the first error.

Only arithmetic is defined: `+ - * /` on two numbers and unary `-` on a
number. Equality, comparison and `!` parse but fail at runtime. Division
follows float semantics, so `1 / 0` is `inf` rather than an error.
"""

import math
import sys
from typing import List, Optional, TextIO
from ast_nodes import *
from environment import Environment
from errors import ExecutionError
from values import Value, is_number, stringify


def _apply_binary(operator: Token, left: float, right: float) -> float:
    match operator.lexeme:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            if right == 0.0:
                # Python raises ZeroDivisionError where IEEE 754 gives inf/nan.
                if left == 0.0 or math.isnan(left):
                    return math.nan
                return math.copysign(math.inf, left) * math.copysign(1.0, right)
            return left / right
        case _:
            raise ExecutionError(
                f"Invalid binary operator '{operator.lexeme}'", operator.line
            )


def evaluate(node: ASTNode, env: Environment) -> Value:
    match node:
        case LiteralNode(value=v):
            return v
        case GroupingNode(expression=inner):
            return evaluate(inner, env)
        case VariableNode(name=name):
            return env.get(name.lexeme, name.line)
        case BinaryNode(left=l, operator=op, right=r):
            lv = evaluate(l, env)
            rv = evaluate(r, env)
            if not (is_number(lv) and is_number(rv)):
                raise ExecutionError(
                    f"Operands must be numbers, got '{stringify(lv)}' and '{stringify(rv)}'",
                    op.line,
                )
            return _apply_binary(op, lv, rv)
        case UnaryNode(operator=op, right=right):
            val = evaluate(right, env)
            if not is_number(val):
                raise ExecutionError(
                    f"Operand must be a number, got '{stringify(val)}'", op.line
                )
            if op.lexeme != "-":
                raise ExecutionError(
                    f"Invalid unary operator '{op.lexeme}'", op.line
                )
            return -val
        case _:
            raise TypeError(f"Unhandled expression node type: {node}")


def execute(stmt: ASTNode, env: Environment, out: Optional[TextIO] = None) -> None:
    match stmt:
        case ExpressionStatementNode(expression=expr):
            evaluate(expr, env)
        case PrintStatementNode(expression=expr):
            value = evaluate(expr, env)
            print(stringify(value), file=out or sys.stdout)
        case VarDeclarationNode(name=name, initializer=init):
            value = evaluate(init, env) if init is not None else None
            env.define(name.lexeme, value)
        case BlockNode(statements=stmts):
            execute_block(stmts, Environment(enclosing=env), out)
        case _:
            raise TypeError(f"Unhandled statement node: {stmt}")


def execute_block(
    statements: List[ASTNode], env: Environment, out: Optional[TextIO] = None
) -> None:
    """Run statements in order against `env`; the first error aborts the rest."""
    for s in statements:
        execute(s, env, out)


def interpret_program(
    statements: List[ASTNode],
    env: Optional[Environment] = None,
    out: Optional[TextIO] = None,
) -> Environment:
    """Interpret a parsed program and return the global environment.

    A fresh global environment is created unless one is passed in, which
    lets an embedding host keep state between runs.
    """
    if env is None:
        env = Environment()
    execute_block(statements, env, out)
    return env
