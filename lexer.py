"""
Lexer for the Y scripting language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (e.g. `var`, `print`, `nil`), identifiers, number
    and string literals, single- and two-character operators (`!=`, `==`,
    `<=`, `>=`), punctuation (parentheses, braces, `,`, `.`, `;`) and skips
    whitespace and single-line comments starting with `//`.

Examples:
    Input:  'var greeting = "hi"; print greeting;'
    Tokens: [VAR, IDENTIFIER('greeting'), EQUAL, STRING('hi'), SEMICOLON, ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- Every token records the line it started on; a multi-line string keeps the
    line of its opening quote.
- Scanning is fail-fast: the first unrecognized character or unterminated
    string raises a `LexerError` and no partial token list is returned.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, KEYWORDS
from errors import UnexpectedCharacterError, UnterminatedStringError

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that may be followed by '=' to form a two-character operator.
EQUAL_SUFFIXED = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and "0" <= char <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char == "\n":
            self.line += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_comment(self) -> None:
        """Skip single-line comments (// ...)."""
        # The terminating newline is left for the main loop so the line
        # counter is updated in one place.
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

    def number(self) -> str:
        """Scan a numeral: digits, optionally '.' followed by more digits."""
        start = self.pos
        while _is_digit(self.current_char):
            self.advance()

        # A trailing '.' without digits after it is not part of the numeral.
        if self.current_char == "." and _is_digit(self.peek_char()):
            self.advance()
            while _is_digit(self.current_char):
                self.advance()

        return self.text[start : self.pos]

    def string(self) -> str:
        """Scan a string literal and return its contents without quotes."""
        start_line = self.line
        self.advance()  # opening quote
        start = self.pos

        while self.current_char is not None and self.current_char != '"':
            self.advance()

        if self.current_char is None:
            raise UnterminatedStringError(start_line)

        value = self.text[start : self.pos]
        self.advance()  # closing quote
        return value

    def identifier(self) -> str:
        """Scan an identifier or keyword."""
        start = self.pos
        while self.current_char is not None and self.current_char.isalnum():
            self.advance()
        return self.text[start : self.pos]

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            char = self.current_char
            line = self.line

            if char in " \r\t\n":
                self.advance()
                continue

            if char == "/":
                if self.peek_char() == "/":
                    self.skip_comment()
                    continue
                self.advance()
                return Token(TokenType.SLASH, "/", line=line)

            if char in SINGLE_CHAR_TOKENS:
                self.advance()
                return Token(SINGLE_CHAR_TOKENS[char], char, line=line)

            # Check for the two-character form first so `==` is not lexed
            # as `=` `=`.
            if char in EQUAL_SUFFIXED:
                short, long = EQUAL_SUFFIXED[char]
                if self.peek_char() == "=":
                    self.advance()
                    self.advance()
                    return Token(long, char + "=", line=line)
                self.advance()
                return Token(short, char, line=line)

            if char == '"':
                start = self.pos
                value = self.string()
                return Token(
                    TokenType.STRING, self.text[start : self.pos], value, line=line
                )

            if _is_digit(char):
                text = self.number()
                return Token(TokenType.NUMBER, text, text, line=line)

            if char.isalpha():
                ident = self.identifier()
                token_type = KEYWORDS.get(ident, TokenType.IDENTIFIER)
                return Token(token_type, ident, line=line)

            raise UnexpectedCharacterError(line, char)

        return Token(TokenType.EOF, "", line=self.line)

    def scan_tokens(self) -> List[Token]:
        """Return all tokens from the input string, ending with one EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
