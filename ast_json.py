"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `program_to_json`
for a whole statement list. Numbers that JSON cannot represent (`inf`,
`NaN`) are exported as their printed text.
"""

import math
from typing import Any, List, Optional
from ast_nodes import *
from values import stringify


def _literal_value(value: Any) -> Any:
    if isinstance(value, float) and (math.isinf(value) or math.isnan(value)):
        return stringify(value)
    return value


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        case LiteralNode(value=v):
            return {"node_type": "Literal", "line": node.line, "value": _literal_value(v)}
        case VariableNode(name=name):
            return {"node_type": "Variable", "line": node.line, "name": name.lexeme}
        case GroupingNode(expression=inner):
            return {
                "node_type": "Grouping",
                "line": node.line,
                "expression": ast_to_json(inner),
            }
        case BinaryNode(left=l, operator=op, right=r):
            return {
                "node_type": "Binary",
                "line": node.line,
                "operator": op.lexeme,
                "left": ast_to_json(l),
                "right": ast_to_json(r),
            }
        case UnaryNode(operator=op, right=right):
            return {
                "node_type": "Unary",
                "line": node.line,
                "operator": op.lexeme,
                "right": ast_to_json(right),
            }
        case ExpressionStatementNode(expression=expr):
            return {
                "node_type": "ExprStmt",
                "line": node.line,
                "expression": ast_to_json(expr),
            }
        case PrintStatementNode(expression=expr):
            return {
                "node_type": "Print",
                "line": node.line,
                "expression": ast_to_json(expr),
            }
        case VarDeclarationNode(name=name, initializer=init):
            return {
                "node_type": "VarDecl",
                "line": node.line,
                "name": name.lexeme,
                "initializer": ast_to_json(init),
            }
        case BlockNode(statements=stmts):
            return {
                "node_type": "Block",
                "line": node.line,
                "statements": [ast_to_json(s) for s in stmts],
            }
        case _:
            raise TypeError(f"Cannot serialize node: {node!r}")


def program_to_json(statements: List[ASTNode]) -> Any:
    return {
        "node_type": "Program",
        "statements": [ast_to_json(s) for s in statements],
    }
