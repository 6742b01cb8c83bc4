"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(statements)` which returns a `graphviz.Digraph`
object (not rendered). Optionally `write_and_render` can write the file to
disk.

Layout: every AST node becomes a box labelled with its kind and a short
surface rendering; edges point from a node to its children and are
labelled with the child's role (`left`, `right`, `init`, `stmt[0]`, ...).
Statements are boxes, expressions are ellipses.
"""

from itertools import count
from typing import List, Optional, Tuple
from graphviz import Digraph
from ast_nodes import *
from pretty_printer import PrettyPrinter

_KIND_NAMES = {
    NodeType.BINARY: "Binary",
    NodeType.UNARY: "Unary",
    NodeType.LITERAL: "Literal",
    NodeType.GROUPING: "Grouping",
    NodeType.VARIABLE: "Variable",
    NodeType.EXPR_STMT: "Expression",
    NodeType.PRINT_STMT: "Print",
    NodeType.VAR_DECL: "Var",
    NodeType.BLOCK: "Block",
}

_STATEMENT_KINDS = {
    NodeType.EXPR_STMT,
    NodeType.PRINT_STMT,
    NodeType.VAR_DECL,
    NodeType.BLOCK,
}


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    match node:
        case BinaryNode(left=l, right=r):
            return [("left", l), ("right", r)]
        case UnaryNode(right=right):
            return [("operand", right)]
        case GroupingNode(expression=inner):
            return [("inner", inner)]
        case ExpressionStatementNode(expression=expr) | PrintStatementNode(
            expression=expr
        ):
            return [("expr", expr)]
        case VarDeclarationNode(initializer=init) if init is not None:
            return [("init", init)]
        case BlockNode(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case _:
            return []


def _label(node: ASTNode) -> str:
    kind = _KIND_NAMES.get(node.type, str(node.type))
    match node:
        case BinaryNode(operator=op) | UnaryNode(operator=op):
            detail = op.lexeme
        case BlockNode():
            detail = ""
        case _:
            detail = PrettyPrinter.print_surface(node)
    # DOT treats backslashes in labels as escapes; `\n` is a centered break.
    detail = detail.replace("\\", "\\\\").replace("\n", " ")
    if detail:
        return f"{kind}\\n{detail}\\nline {node.line}"
    return f"{kind}\\nline {node.line}"


def render_ast_dot(statements: List[ASTNode], title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the given statement list.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr(label=title)

    ids = count()

    def _emit(node: ASTNode) -> str:
        node_id = f"n{next(ids)}"
        shape = "box" if node.type in _STATEMENT_KINDS else "ellipse"
        dot.node(node_id, label=_label(node), shape=shape)
        for role, child in _children(node):
            child_id = _emit(child)
            dot.edge(node_id, child_id, label=role)
        return node_id

    root = f"n{next(ids)}"
    dot.node(root, label="Program", shape="doubleoctagon")
    for i, stmt in enumerate(statements):
        dot.edge(root, _emit(stmt), label=f"stmt[{i}]")

    return dot


def write_and_render(
    statements: List[ASTNode],
    out_path: str,
    fmt: str = "svg",
    title: Optional[str] = None,
) -> str:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(stmts, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz). Returns the rendered file's path."""
    dot = render_ast_dot(statements, title=title)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
