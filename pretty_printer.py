"""Pretty-printers for the AST.

Provides three renderings:
- `PrettyPrinter.print_expr(expr)`: parenthesized prefix form, e.g.
    `(* (group (+ 1 2)) 3)`. Useful for checking precedence in tests.
- `PrettyPrinter.print_ast(node, indent, prefix)`: readable multi-line tree.
- `PrettyPrinter.print_surface(node)`: compact source-like single line.

The printers are intended for debugging, tests and the CLI's diagnostic
stages rather than for producing final source code.

Examples:
    PrettyPrinter.print_ast(statements)
"""

from __future__ import annotations
from typing import List, Union
from ast_nodes import *
from values import stringify


class PrettyPrinter:
    @staticmethod
    def parenthesize(name: str, *exprs: ASTNode) -> str:
        parts = [name] + [PrettyPrinter.print_expr(e) for e in exprs]
        return "(" + " ".join(parts) + ")"

    @staticmethod
    def print_expr(node: ASTNode) -> str:
        """Render an expression in parenthesized prefix form."""
        match node:
            case BinaryNode(left=l, operator=op, right=r):
                return PrettyPrinter.parenthesize(op.lexeme, l, r)
            case UnaryNode(operator=op, right=right):
                return PrettyPrinter.parenthesize(op.lexeme, right)
            case LiteralNode(value=v):
                return stringify(v)
            case GroupingNode(expression=inner):
                return PrettyPrinter.parenthesize("group", inner)
            case VariableNode(name=name):
                return name.lexeme
            case _:
                raise TypeError(f"Not an expression node: {node}")

    @staticmethod
    def print_ast(
        node: Union[ASTNode, List[ASTNode]], indent: int = 0, prefix: str = ""
    ) -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if isinstance(node, list):
            lines.append(f"{indent_str}{prefix}Program")
            for i, stmt in enumerate(node):
                lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))
            return "\n".join(line for line in lines if line)

        match node:
            case LiteralNode(value=v):
                shown = f'"{v}"' if isinstance(v, str) else stringify(v)
                lines.append(f"{indent_str}{prefix}Literal({shown})")

            case VariableNode(name=name):
                lines.append(f"{indent_str}{prefix}Variable({name.lexeme})")

            case GroupingNode(expression=inner):
                lines.append(f"{indent_str}{prefix}Grouping")
                lines.append(PrettyPrinter.print_ast(inner, indent + 2))

            case BinaryNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Binary({op.lexeme})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case UnaryNode(operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Unary({op.lexeme})")
                lines.append(PrettyPrinter.print_ast(right, indent + 2))

            case ExpressionStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case PrintStatementNode(expression=expr):
                lines.append(f"{indent_str}{prefix}PrintStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case VarDeclarationNode(name=name, initializer=init):
                init_str = " = ..." if init is not None else ""
                lines.append(f"{indent_str}{prefix}VarDecl({name.lexeme}{init_str})")
                if init is not None:
                    lines.append(PrettyPrinter.print_ast(init, indent + 2, "init: "))

            case BlockNode(statements=stmts):
                lines.append(f"{indent_str}{prefix}Block")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax-like one-line representation of an AST node.

        Intended for places where a concise label is wanted, such as the
        nodes of the Graphviz AST rendering (e.g. `var x = 1 + 2;`).
        """
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n)

        match node:
            case LiteralNode(value=str() as v):
                return f'"{v}"'
            case LiteralNode(value=v):
                return stringify(v)
            case VariableNode(name=name):
                return name.lexeme
            case GroupingNode(expression=inner):
                return f"({_p(inner)})"
            case BinaryNode(left=l, operator=op, right=r):
                return f"{_p(l)} {op.lexeme} {_p(r)}"
            case UnaryNode(operator=op, right=right):
                return f"{op.lexeme}{_p(right)}"
            case ExpressionStatementNode(expression=expr):
                return f"{_p(expr)};"
            case PrintStatementNode(expression=expr):
                return f"print {_p(expr)};"
            case VarDeclarationNode(name=name, initializer=init):
                if init is not None:
                    return f"var {name.lexeme} = {_p(init)};"
                return f"var {name.lexeme};"
            case BlockNode():
                return "{...}"
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
