"""Command-line entry point and pipeline driver.

`run(source)` pushes one source string through lexer, parser and
interpreter and reports the outcome as a `RunStatus`; diagnostics go to the
`err` sink and `print` output to `out`. The CLI runs a script file or an
interactive prompt and can dump intermediate stages (tokens, AST tree, AST
JSON, Graphviz rendering).
"""

from __future__ import annotations
import json
import sys
from enum import Enum, auto
from subprocess import CalledProcessError
from typing import List, Optional, TextIO

from graphviz import ExecutableNotFound
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from environment import Environment
from errors import LexerError, ParserError, ExecutionError
from interpreter import interpret_program
from pretty_printer import PrettyPrinter
from ast_json import program_to_json
from ast_viz import write_and_render


class RunStatus(Enum):
    OK = auto()
    LEXER_ERROR = auto()
    PARSER_ERROR = auto()
    RUNTIME_ERROR = auto()


EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70

EXIT_CODES = {
    RunStatus.OK: 0,
    RunStatus.LEXER_ERROR: EXIT_DATA_ERROR,
    RunStatus.PARSER_ERROR: EXIT_DATA_ERROR,
    RunStatus.RUNTIME_ERROR: EXIT_SOFTWARE,
}


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.scan_tokens()


def parse_tokens(tokens: List[Token]) -> List[ASTNode]:
    """Parse tokens into a list of statements."""
    parser = Parser(tokens)
    return parser.parse()


def run(
    source: str,
    env: Optional[Environment] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> RunStatus:
    """Lex, parse and execute `source`, reporting any failure to `err`.

    Each call uses a fresh global environment unless `env` is given.
    """
    err = err or sys.stderr
    try:
        statements = parse_tokens(lex(source))
    except LexerError as e:
        print(f"Lexer error: {e}", file=err)
        return RunStatus.LEXER_ERROR
    except ParserError as e:
        print(f"Parser error: {e}", file=err)
        return RunStatus.PARSER_ERROR

    try:
        interpret_program(statements, env=env, out=out)
    except ExecutionError as e:
        print(f"Runtime error: {e}", file=err)
        return RunStatus.RUNTIME_ERROR
    return RunStatus.OK


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> RunStatus:
    """Process a single program: optionally print front-end stages, then run it.

    Flags control which intermediate stages are shown; the program itself
    is always executed through `run`.
    """
    out = out or sys.stdout
    err = err or sys.stderr

    if print_tokens or print_ast or dump_ast_path or viz_path:
        try:
            tokens = lex(text)
            if print_tokens:
                print(f"Tokens ({len(tokens)}):", file=out)
                for i, token in enumerate(tokens[:50]):
                    print(f"  {i:3}: {token}", file=out)
                if len(tokens) > 50:
                    print(f"  ... and {len(tokens) - 50} more", file=out)

            statements = parse_tokens(tokens)
        except (LexerError, ParserError):
            # `run` below reports the failure with its stage prefix.
            statements = None

        if statements is not None:
            if print_ast:
                print("\nAST:", file=out)
                print(PrettyPrinter.print_ast(statements), file=out)

            if dump_ast_path:
                try:
                    with open(dump_ast_path, "w", encoding="utf-8") as fh:
                        json.dump(program_to_json(statements), fh, indent=2)
                    print(f"Wrote AST JSON to {dump_ast_path}", file=out)
                except OSError as e:
                    print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=err)

            if viz_path:
                try:
                    write_and_render(statements, viz_path, fmt=viz_format)
                    print(f"Wrote AST visualization to {viz_path}.{viz_format}", file=out)
                except (ExecutableNotFound, CalledProcessError, OSError) as e:
                    # Rendering needs the Graphviz binaries, which are optional.
                    print(f"Failed to render AST visualization to {viz_path}: {e}", file=err)

    return run(text, out=out, err=err)


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = False,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> bool:
    """Run the REPL, one independent run per line.

    Returns True if any line failed. Failures are reported and the loop
    keeps going.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    had_error = False

    while True:
        try:
            print("> ", end="", file=out, flush=True)
            line = stdin.readline()
            if not line:
                print(file=out)
                break
            text = line.strip()
            if text.lower() in ("quit", "exit", "q"):
                break

            if not text:
                continue

            status = process_program(
                text, print_tokens=print_tokens, print_ast=print_ast, out=out, err=err
            )
            if status is not RunStatus.OK:
                had_error = True
        except KeyboardInterrupt:
            print("\n\nExiting...", file=out)
            break

    return had_error


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Run a Y script from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("script", nargs="?", help="Path to source file to run")
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to run"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode (default when no file is given)",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST tree"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_USAGE if e.code else 0

    path = args.script or args.file
    if path and not args.interactive:
        try:
            with open(path, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {path}: {e}", file=sys.stderr)
            return EXIT_NO_INPUT

        status = process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
        return EXIT_CODES[status]

    # A failed REPL line does not fail the session.
    interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
    return 0


if __name__ == "__main__":
    sys.exit(main())
