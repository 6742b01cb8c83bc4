"""Error kinds raised by the pipeline.

Three independent families, one per stage: `LexerError` while scanning,
`ParserError` while parsing and `ExecutionError` while executing statements.
Every error carries the source line it originated from. They all derive from
`InterpreterError` so a caller can report any stage failure uniformly, but
none of them is retried or recovered inside the pipeline itself.
"""

from __future__ import annotations


class InterpreterError(Exception):
    def __init__(self, message: str, line: int):
        self.message = message
        self.line = line
        super().__init__(f"{message} at line {line}")


class LexerError(InterpreterError):
    pass


class UnexpectedCharacterError(LexerError):
    def __init__(self, line: int, character: str):
        self.character = character
        super().__init__(f"Unexpected character '{character}'", line)


class UnterminatedStringError(LexerError):
    def __init__(self, line: int):
        super().__init__("Unterminated string", line)


class ParserError(InterpreterError):
    pass


class ExecutionError(InterpreterError):
    """Runtime failure raised while evaluating an expression or statement."""
