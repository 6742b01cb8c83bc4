import io

from lexer import Lexer
from parser import Parser
from interpreter import interpret_program


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).scan_tokens()


def parse_text(text: str):
    """Convenience: lex+parse a source text into a list of statements."""
    return Parser(Lexer(text).scan_tokens()).parse()


def parse_expr(text: str):
    """Parse a single expression (no trailing semicolon needed)."""
    return Parser(Lexer(text).scan_tokens()).parse_expression()


def run_text(text: str):
    """Interpret source text and return (printed lines, global environment)."""
    out = io.StringIO()
    env = interpret_program(parse_text(text), out=out)
    return out.getvalue().splitlines(), env
