import re

import pytest

from flang import Parser, Scanner, Type, parse_program
from flang.error.error import CompilerException
from flang.error.scanner_error import ScannerException
from flang.util import Span
from tests.test_util import open_file

from flang.error.parser_error import (  # isort:skip
    ExpectedNameError,
    IllegalExpressionError,
    ParserException,
    UnexpectedTokenError,
)
from flang.tree.tree import (  # isort:skip
    BooleanNode,
    ConditionNode,
    FuncNode,
    FunCallNode,
    IdentifierNode,
    IntegerNode,
    LambdaCallNode,
    LambdaNode,
    ListNode,
    ProgNode,
    ProgramNode,
    QuoteNode,
    RealNode,
    SetqNode,
    WhileNode,
)


def parse_one(program: str):
    (expression,) = parse_program(program).expressions
    return expression


def test_parser(valid_file: str):
    # Ensure that we can scan and parse this program without Exceptions
    program: str = open_file(valid_file)

    scanner = Scanner(program)
    parser = Parser(scanner)
    tree = parser.parse()
    assert tree.expressions


def test_invalid(invalid_file: str):
    program: str = open_file(invalid_file)
    with pytest.raises(CompilerException) as excinfo:
        parse_program(program)
    message = str(excinfo.value)
    assert message.startswith(("SyntaxError: ", "ScannerError: "))
    assert "-> " in message


def test_empty():
    assert parse_program("") == ProgramNode(())
    assert parse_program("\n\n  \n") == ProgramNode(())


def test_atoms():
    tree = parse_program("1 2.5 true x PLUS")
    assert tree == ProgramNode(
        (
            IntegerNode(1),
            RealNode(2.5),
            BooleanNode(True),
            IdentifierNode("x"),
            IdentifierNode("plus"),
        )
    )


def test_function_call():
    assert parse_one("(plus 1 2)") == FunCallNode(
        "plus", (IntegerNode(1), IntegerNode(2))
    )


def test_function_call_canonical_name():
    assert parse_one("(Times 2 3)") == FunCallNode(
        "times", (IntegerNode(2), IntegerNode(3))
    )


@pytest.mark.parametrize("name", ["return", "break", "eval", "value", "head", "isnull"])
def test_keyword_heads_are_calls(name: str):
    assert parse_one(f"({name})") == FunCallNode(name, ())


def test_user_function_is_list():
    assert parse_one("(f 1 x)") == ListNode(
        (IdentifierNode("f"), IntegerNode(1), IdentifierNode("x"))
    )


def test_empty_list():
    assert parse_one("()") == ListNode(())


def test_nested_list():
    assert parse_one("((1) ())") == ListNode((ListNode((IntegerNode(1),)), ListNode(())))


def test_setq():
    assert parse_one("(setq x 5)") == SetqNode("x", IntegerNode(5))


def test_setq_keyword_name():
    assert parse_one("(setq Plus 1)") == SetqNode("plus", IntegerNode(1))


def test_cond_with_else():
    condition = parse_one("(cond (equal x 1) 10 20)")
    assert condition == ConditionNode(
        FunCallNode("equal", (IdentifierNode("x"), IntegerNode(1))),
        IntegerNode(10),
        IntegerNode(20),
    )


def test_cond_without_else():
    condition = parse_one("(cond (equal x 1) 10)")
    assert isinstance(condition, ConditionNode)
    assert condition.result_true == IntegerNode(10)
    assert condition.result_false is None


def test_func():
    func = parse_one("(func f (x y) (plus x y))")
    assert func == FuncNode(
        "f",
        ("x", "y"),
        (FunCallNode("plus", (IdentifierNode("x"), IdentifierNode("y"))),),
    )


def test_func_without_body_or_params():
    assert parse_one("(func nothing ())") == FuncNode("nothing", (), ())


def test_duplicate_params_allowed():
    assert parse_one("(lambda (x x) x)").params == ("x", "x")


def test_lambda():
    assert parse_one("(lambda (n) (plus n 1))") == LambdaNode(
        ("n",), FunCallNode("plus", (IdentifierNode("n"), IntegerNode(1)))
    )


def test_lambda_call():
    call = parse_one("((lambda (x) x) 1 2)")
    assert call == LambdaCallNode(
        LambdaNode(("x",), IdentifierNode("x")), (IntegerNode(1), IntegerNode(2))
    )


def test_lambda_requires_single_body():
    with pytest.raises(ParserException) as excinfo:
        parse_program("(lambda (x) x x)")
    (error,) = excinfo.value.errors
    assert isinstance(error, UnexpectedTokenError)
    assert error.expected == Type.RRB
    assert error.got.type == Type.ID


def test_prog(prog_program: str):
    prog = parse_one(prog_program)
    assert isinstance(prog, ProgNode)
    assert prog.params == ("i", "total")
    assert len(prog.body) == 4
    assert isinstance(prog.body[2], WhileNode)
    assert prog.body[3] == FunCallNode("return", (IdentifierNode("total"),))


def test_while():
    loop = parse_one("(while (less i 3) (setq i (plus i 1)))")
    assert loop == WhileNode(
        FunCallNode("less", (IdentifierNode("i"), IntegerNode(3))),
        (SetqNode("i", FunCallNode("plus", (IdentifierNode("i"), IntegerNode(1)))),),
    )


def test_while_without_body():
    assert parse_one("(while true)") == WhileNode(BooleanNode(True), ())


def test_quote_operator():
    assert parse_one("'(1 2)") == QuoteNode(ListNode((IntegerNode(1), IntegerNode(2))))


def test_quote_keyword():
    assert parse_one("(quote (1 2))") == QuoteNode(
        ListNode((IntegerNode(1), IntegerNode(2)))
    )
    assert parse_one("(QUOTE x)") == parse_one("'x")


def test_quote_keyword_single_expression():
    with pytest.raises(ParserException):
        parse_program("(quote x y)")


def test_quoted_head_is_list():
    assert parse_one("('plus 1)") == ListNode(
        (QuoteNode(IdentifierNode("plus")), IntegerNode(1))
    )


def test_quoted_keyword_is_identifier():
    assert parse_one("'setq") == QuoteNode(IdentifierNode("setq"))


def test_blank_lines_between_elements():
    program = "\n(setq\n\n  x\n  5\n)\n\n(plus\n 1\n 2)\n"
    assert parse_program(program) == ProgramNode(
        (
            SetqNode("x", IntegerNode(5)),
            FunCallNode("plus", (IntegerNode(1), IntegerNode(2))),
        )
    )


def test_unbalanced():
    with pytest.raises(ParserException) as excinfo:
        parse_program("(plus 1 2")
    (error,) = excinfo.value.errors
    assert isinstance(error, UnexpectedTokenError)
    assert error.expected == Type.RRB
    assert error.got.type == Type.EOF
    assert "SyntaxError" in str(excinfo.value) and "')'" in str(excinfo.value)


def test_unbalanced_mutation(factorial_program: str):
    # Removing any single bracket must make parsing fail
    bracket_pattern = re.compile(r"\(|\)")
    for bracket in bracket_pattern.finditer(factorial_program):
        mutation = (
            factorial_program[: bracket.start()] + factorial_program[bracket.end() :]
        )
        with pytest.raises(ParserException):
            parse_program(mutation)


def test_unopened():
    with pytest.raises(ParserException) as excinfo:
        parse_program("(setq x 1))")
    (error,) = excinfo.value.errors
    assert isinstance(error, IllegalExpressionError)
    assert error.got.type == Type.RRB
    assert error.span == Span(1, (10, 11))


@pytest.mark.parametrize(
    "program", ["(setq 5 1)", "(setq true 1)", "(func (x) x)", "(prog (a 1) a)", "(setq ' 1)"]
)
def test_expected_name(program: str):
    with pytest.raises(ParserException) as excinfo:
        parse_program(program)
    assert isinstance(excinfo.value.errors[0], ExpectedNameError)


def test_params_require_brackets():
    with pytest.raises(ParserException) as excinfo:
        parse_program("(func f x x)")
    (error,) = excinfo.value.errors
    assert error.expected == Type.LRB
    assert "-> 1. " in str(error)


def test_number_format_error_propagates():
    with pytest.raises(ScannerException):
        parse_program("(plus 1.2.3 4)")


def test_error_message_line():
    program = "(setq a 1)\n(setq b 2)\n(plus a b"
    with pytest.raises(ParserException) as excinfo:
        parse_program(program)
    message = str(excinfo.value)
    assert "end of input" in message and "line [3]" in message
    assert "-> 3. " in message


def test_stray_character_ends_program():
    # Scanning stops at '$', so the list is never closed
    with pytest.raises(ParserException):
        parse_program("(plus 1 $ 2)")

    scanner = Scanner("(plus 1 2) $ (minus 1)")
    tree = Parser(scanner).parse()
    assert len(tree.expressions) == 1
    assert len(scanner.warnings) == 1


def test_spans():
    tree = parse_program("(setq x\n  (plus 1 2))")
    setq = tree.expressions[0]
    assert setq.span == Span((1, 2), (0, 13))
    assert setq.value.span == Span(2, (2, 12))
    assert tree.span == setq.span


def test_idempotent(valid_file: str):
    program: str = open_file(valid_file)
    assert parse_program(program) == parse_program(program)


def test_contains():
    tree = parse_program("(func f (x) (cond x 1 (plus 2 3)))")
    assert IntegerNode(3) in tree
    assert FunCallNode("plus", (IntegerNode(2), IntegerNode(3))) in tree
    assert IntegerNode(4) not in tree
