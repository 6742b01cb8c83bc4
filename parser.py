"""
Parser for the Y scripting language.

Overview and approach:
- This parser implements a small, hand-written recursive-descent parser.
    Each grammar rule has its own method and binary operator precedence is
    encoded by which rule calls which (precedence climbing):

        program     -> declaration* EOF
        declaration -> "var" IDENT ("=" expression)? ";" | statement
        statement   -> "print" expression ";" | block | expression ";"
        block       -> "{" declaration* "}"
        expression  -> equality
        equality    -> comparison (("!=" | "==") comparison)*
        comparison  -> term (("<" | "<=" | ">" | ">=") term)*
        term        -> factor (("-" | "+") factor)*
        factor      -> unary (("/" | "*") unary)*
        unary       -> ("!" | "-") unary | primary
        primary     -> NUMBER | STRING | "true" | "false" | "nil"
                     | IDENTIFIER | "(" expression ")"

- Every binary level loops, folding each newly parsed right operand into a
    growing left-leaning tree, so `1 - 2 - 3` parses as `(1 - 2) - 3`.

Error handling:
- Parsing is fail-fast: the first missing or unexpected token raises a
    `ParserError` carrying the offending token's line.
- `synchronize()` skips ahead to the next statement boundary. It is the hook
    for collecting several errors per run but `parse()` does not call it.
"""

from __future__ import annotations
from typing import List, Optional
from tokens import Token, TokenType
from ast_nodes import *
from errors import ParserError

# Keywords that begin a statement; `synchronize` stops in front of them.
STATEMENT_STARTS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.current = tokens[0] if tokens else Token(TokenType.EOF)
        self.previous: Optional[Token] = None

    def is_at_end(self) -> bool:
        return self.current.type == TokenType.EOF

    def advance(self) -> Token:
        """Consume the current token and return it."""
        token = self.current
        if not self.is_at_end():
            self.pos += 1
            if self.pos < len(self.tokens):
                self.current = self.tokens[self.pos]
            else:
                self.current = Token(TokenType.EOF, line=token.line)
        self.previous = token
        return token

    def check(self, token_type: TokenType) -> bool:
        return self.current.type == token_type

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any type, consume if true."""
        if self.current.type in token_types:
            self.advance()
            return True
        return False

    def error(self, message: str) -> ParserError:
        return ParserError(message, self.current.line)

    def expect(self, expected_type: TokenType, message: str) -> Token:
        """Expect and consume token of given type."""
        if self.current.type == expected_type:
            return self.advance()
        raise self.error(f"{message} (found {self.current.type})")

    # Statements

    def parse(self) -> List[ASTNode]:
        """Parse a complete program into a list of statements."""
        statements: List[ASTNode] = []
        while not self.is_at_end():
            statements.append(self.parse_declaration())
        return statements

    def parse_declaration(self) -> ASTNode:
        if self.check(TokenType.VAR):
            return self.parse_var_declaration()
        return self.parse_statement()

    def parse_var_declaration(self) -> VarDeclarationNode:
        """Parse variable declaration: var identifier (= expression)? ;"""
        keyword = self.expect(TokenType.VAR, "Expect 'var'.")
        name = self.expect(TokenType.IDENTIFIER, "Expect variable name.")

        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.parse_expression()

        self.expect(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return VarDeclarationNode(
            line=keyword.line, name=name, initializer=initializer
        )

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        match self.current.type:
            case TokenType.PRINT:
                keyword = self.advance()
                value = self.parse_expression()
                self.expect(TokenType.SEMICOLON, "Expect ';' after value.")
                return PrintStatementNode(line=keyword.line, expression=value)

            case TokenType.LBRACE:
                return self.parse_block()

            case _:
                line = self.current.line
                expr = self.parse_expression()
                self.expect(TokenType.SEMICOLON, "Expect ';' after expression.")
                return ExpressionStatementNode(line=line, expression=expr)

    def parse_block(self) -> BlockNode:
        """Parse a block of declarations: { declaration* }"""
        brace = self.expect(TokenType.LBRACE, "Expect '{' before block.")
        statements: List[ASTNode] = []

        while not self.check(TokenType.RBRACE) and not self.is_at_end():
            statements.append(self.parse_declaration())

        self.expect(TokenType.RBRACE, "Expect '}' after block.")
        return BlockNode(line=brace.line, statements=statements)

    # Expressions

    def parse_expression(self) -> ASTNode:
        return self.parse_equality()

    def _parse_left_assoc(self, operand, *operators: TokenType) -> ASTNode:
        """Parse `operand (operator operand)*` into a left-leaning tree."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous
            right = operand()
            expr = BinaryNode(
                line=operator.line, left=expr, operator=operator, right=right
            )
        return expr

    def parse_equality(self) -> ASTNode:
        return self._parse_left_assoc(
            self.parse_comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL
        )

    def parse_comparison(self) -> ASTNode:
        return self._parse_left_assoc(
            self.parse_term,
            TokenType.GREATER,
            TokenType.GREATER_EQUAL,
            TokenType.LESS,
            TokenType.LESS_EQUAL,
        )

    def parse_term(self) -> ASTNode:
        return self._parse_left_assoc(
            self.parse_factor, TokenType.MINUS, TokenType.PLUS
        )

    def parse_factor(self) -> ASTNode:
        return self._parse_left_assoc(
            self.parse_unary, TokenType.SLASH, TokenType.STAR
        )

    def parse_unary(self) -> ASTNode:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous
            right = self.parse_unary()
            return UnaryNode(line=operator.line, operator=operator, right=right)
        return self.parse_primary()

    def parse_primary(self) -> ASTNode:
        """Parse primary expressions (literals, identifiers, parenthesized)."""
        token = self.current

        match token.type:
            case TokenType.FALSE:
                self.advance()
                return LiteralNode(line=token.line, value=False)

            case TokenType.TRUE:
                self.advance()
                return LiteralNode(line=token.line, value=True)

            case TokenType.NIL:
                self.advance()
                return LiteralNode(line=token.line, value=None)

            case TokenType.NUMBER:
                self.advance()
                # The lexer only emits well-formed numerals, so a failure
                # here is a bug and is left to propagate as ValueError.
                return LiteralNode(line=token.line, value=float(token.literal))

            case TokenType.STRING:
                self.advance()
                return LiteralNode(line=token.line, value=token.literal)

            case TokenType.IDENTIFIER:
                self.advance()
                return VariableNode(line=token.line, name=token)

            case TokenType.LPAREN:
                self.advance()  # Consume '('
                expr = self.parse_expression()
                self.expect(TokenType.RPAREN, "Expect ')' after expression.")
                return GroupingNode(line=token.line, expression=expr)

            case _:
                raise self.error(f"Unexpected token {token.type}")

    def synchronize(self) -> None:
        """Discard tokens until the start of the next statement.

        Inactive: `parse()` stops at the first error and never calls this.
        """
        self.advance()

        while not self.is_at_end():
            if self.previous.type == TokenType.SEMICOLON:
                return
            if self.current.type in STATEMENT_STARTS:
                return
            self.advance()
