import pytest

from tests.utils import lex, parse_text, parse_expr
from ast_nodes import *
from errors import ParserError
from parser import Parser
from pretty_printer import PrettyPrinter
from tokens import TokenType


def test_parser_parses_declarations_and_statements():
    stmts = parse_text("var x = 5; var y; print x; x;")
    assert [s.type for s in stmts] == [
        NodeType.VAR_DECL,
        NodeType.VAR_DECL,
        NodeType.PRINT_STMT,
        NodeType.EXPR_STMT,
    ]
    assert stmts[0].name.lexeme == "x"
    assert stmts[0].initializer == LiteralNode(line=1, value=5.0)
    assert stmts[1].initializer is None


def test_factor_binds_tighter_than_term():
    expr = parse_expr("1 + 2 * 3")
    assert isinstance(expr, BinaryNode)
    assert expr.operator.lexeme == "+"
    assert expr.left == LiteralNode(line=1, value=1.0)
    assert isinstance(expr.right, BinaryNode)
    assert expr.right.operator.lexeme == "*"
    assert PrettyPrinter.print_expr(expr) == "(+ 1 (* 2 3))"


def test_binary_operators_left_associate():
    assert PrettyPrinter.print_expr(parse_expr("1 - 2 - 3")) == "(- (- 1 2) 3)"
    assert PrettyPrinter.print_expr(parse_expr("8 / 4 / 2")) == "(/ (/ 8 4) 2)"


def test_precedence_levels():
    expr = parse_expr("1 == 2 < 3 + 4 * -5")
    assert PrettyPrinter.print_expr(expr) == "(== 1 (< 2 (+ 3 (* 4 (- 5)))))"


def test_grouping_and_nested_unary():
    assert PrettyPrinter.print_expr(parse_expr("(1 + 2) * 3")) == "(* (group (+ 1 2)) 3)"
    assert PrettyPrinter.print_expr(parse_expr("!-x")) == "(! (- x))"


def test_primary_literals():
    stmts = parse_text('true; false; nil; "s"; 2.5; name;')
    exprs = [s.expression for s in stmts]
    assert [e.value for e in exprs[:5]] == [True, False, None, "s", 2.5]
    assert isinstance(exprs[5], VariableNode)
    assert exprs[5].name.lexeme == "name"


def test_block_statements_nest():
    stmts = parse_text("{ var a = 1; { print a; } }")
    assert len(stmts) == 1
    block = stmts[0]
    assert isinstance(block, BlockNode)
    assert isinstance(block.statements[0], VarDeclarationNode)
    assert isinstance(block.statements[1], BlockNode)
    assert isinstance(block.statements[1].statements[0], PrintStatementNode)


def test_operator_token_keeps_line():
    stmts = parse_text("print 1\n+\n2;")
    expr = stmts[0].expression
    assert expr.operator.type == TokenType.PLUS
    assert expr.operator.line == 2


@pytest.mark.parametrize(
    "src, message, line",
    [
        ("print 1", "Expect ';' after value.", 1),
        ("var = 1;", "Expect variable name.", 1),
        ("var x = 1", "Expect ';' after variable declaration.", 1),
        ("(1 + 2;", "Expect ')' after expression.", 1),
        ("1 + 2\n3;", "Expect ';' after expression.", 2),
        ("{ print 1;", "Expect '}' after block.", 1),
        ("\n\n;", "Unexpected token SEMICOLON", 3),
        ("fun f;", "Unexpected token FUN", 1),
    ],
)
def test_parser_errors_carry_message_and_line(src, message, line):
    with pytest.raises(ParserError) as exc:
        parse_text(src)
    assert exc.value.message.startswith(message)
    assert exc.value.line == line


def test_parse_stops_at_first_error():
    with pytest.raises(ParserError) as exc:
        parse_text("print 1\nprint ;")
    assert exc.value.line == 2
    assert "Expect ';' after value." in exc.value.message


def test_synchronize_skips_to_next_statement():
    parser = Parser(lex("1 + ; print 2; var x;"))
    with pytest.raises(ParserError):
        parser.parse_declaration()
    parser.synchronize()
    assert parser.current.type == TokenType.PRINT
    stmt = parser.parse_declaration()
    assert isinstance(stmt, PrintStatementNode)


def test_synchronize_stops_before_statement_keyword():
    parser = Parser(lex("1 2 3 var x;"))
    parser.synchronize()
    assert parser.current.type == TokenType.VAR


def test_empty_program_parses_to_no_statements():
    assert parse_text("// nothing") == []
