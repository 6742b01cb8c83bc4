"""AST node definitions for the Y scripting language.

This module defines the AST node dataclasses produced by the parser and
consumed by the interpreter, the pretty-printer and the exporters. The node
set is closed: expressions are `BinaryNode`, `UnaryNode`, `LiteralNode`,
`GroupingNode` and `VariableNode`; statements are `ExpressionStatementNode`,
`PrintStatementNode`, `VarDeclarationNode` and `BlockNode`. Consumers
dispatch over them with `match`, so adding a variant means extending each
`match` that handles the family.

Conventions:
- All node dataclasses inherit from `ASTNode` which records the node kind
    (`NodeType`) and the source `line` the node started on.
- Nodes are frozen: the parser builds them once and nothing mutates them
    afterwards.
- Operator and name fields keep the introducing `Token`, so runtime errors
    can report its lexeme and line.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union, List
from tokens import Token, TokenType
from values import Value


class NodeType(Enum):
    BINARY = auto()
    UNARY = auto()
    LITERAL = auto()
    GROUPING = auto()
    VARIABLE = auto()
    EXPR_STMT = auto()
    PRINT_STMT = auto()
    VAR_DECL = auto()
    BLOCK = auto()

    def __str__(self) -> str:
        return self.name


def _eof() -> Token:
    return Token(TokenType.EOF)


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = 0


# Expression Nodes
@dataclass(frozen=True)
class LiteralNode(ASTNode):
    type: NodeType = NodeType.LITERAL
    value: Value = None


@dataclass(frozen=True)
class GroupingNode(ASTNode):
    type: NodeType = NodeType.GROUPING
    expression: ASTNode = field(default_factory=LiteralNode)


@dataclass(frozen=True)
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    name: Token = field(default_factory=_eof)


@dataclass(frozen=True)
class BinaryNode(ASTNode):
    type: NodeType = NodeType.BINARY
    left: ASTNode = field(default_factory=LiteralNode)
    operator: Token = field(default_factory=_eof)
    right: ASTNode = field(default_factory=LiteralNode)


@dataclass(frozen=True)
class UnaryNode(ASTNode):
    type: NodeType = NodeType.UNARY
    operator: Token = field(default_factory=_eof)
    right: ASTNode = field(default_factory=LiteralNode)


Expr = Union[LiteralNode, GroupingNode, VariableNode, BinaryNode, UnaryNode]


# Statement Nodes
@dataclass(frozen=True)
class ExpressionStatementNode(ASTNode):
    type: NodeType = NodeType.EXPR_STMT
    expression: ASTNode = field(default_factory=LiteralNode)


@dataclass(frozen=True)
class PrintStatementNode(ASTNode):
    type: NodeType = NodeType.PRINT_STMT
    expression: ASTNode = field(default_factory=LiteralNode)


@dataclass(frozen=True)
class VarDeclarationNode(ASTNode):
    type: NodeType = NodeType.VAR_DECL
    name: Token = field(default_factory=_eof)
    initializer: Optional[ASTNode] = None


@dataclass(frozen=True)
class BlockNode(ASTNode):
    type: NodeType = NodeType.BLOCK
    statements: List[ASTNode] = field(default_factory=list)


Stmt = Union[ExpressionStatementNode, PrintStatementNode, VarDeclarationNode, BlockNode]
