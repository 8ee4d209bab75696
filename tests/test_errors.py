import pytest

from treecalc.common import ARGUMENT_MISMATCH, UNKNOWN_FUNCTION, UNKNOWN_VARIABLE
from treecalc.common import EMPTY_INPUT, UNEXPECTED_CHARACTER, UNEXPECTED_END
from treecalc.common import EvalError, ExprError, ParseError
from treecalc.expr import solve
from treecalc.__main__ import format_error


def error_for(line):
    with pytest.raises(ExprError) as info:
        solve(line)
    return info.value


def test_unknown_variable():
    e = error_for("foo")

    assert isinstance(e, EvalError)
    assert e.reason == UNKNOWN_VARIABLE
    assert e.span == (0, 3)


def test_unknown_variable_inside_expression():
    line = "1+2*bar"
    e = error_for(line)

    assert e.reason == UNKNOWN_VARIABLE
    start, end = e.span
    assert line[start:end] == "bar"


def test_constants_are_case_sensitive():
    e = error_for("PI")

    assert e.reason == UNKNOWN_VARIABLE


def test_unknown_function():
    e = error_for("foo(1)")

    assert isinstance(e, EvalError)
    assert e.reason == UNKNOWN_FUNCTION
    assert e.span == (0, 3)


def test_unary_name_with_two_arguments():
    e = error_for("sin(1,2)")

    assert e.reason == UNKNOWN_FUNCTION
    assert e.span == (0, 3)


def test_binary_name_with_one_argument():
    e = error_for("pow(2)")

    assert e.reason == UNKNOWN_FUNCTION


def test_argument_mismatch():
    line = "1+sin(1,2,3)"
    e = error_for(line)

    assert e.reason == ARGUMENT_MISMATCH
    assert e.span == (2, 12)
    assert line[2:12] == "sin(1,2,3)"


def test_argument_error_before_name_lookup():
    e = error_for("foo(bar)")

    assert e.reason == UNKNOWN_VARIABLE
    assert e.span == (4, 7)


def test_empty_input():
    e = error_for("")

    assert isinstance(e, ParseError)
    assert e.reason == EMPTY_INPUT
    assert e.span == (0, 0)


def test_unexpected_character():
    e = error_for("1$2")

    assert isinstance(e, ParseError)
    assert e.reason == UNEXPECTED_CHARACTER
    assert e.span == (1, 2)


def test_whitespace_is_not_part_of_the_grammar():
    e = error_for("1 +2")

    assert e.reason == UNEXPECTED_CHARACTER
    assert e.span == (1, 2)


def test_unbalanced_brackets():
    e = error_for("2)")
    assert e.reason == UNEXPECTED_CHARACTER
    assert e.span == (1, 2)

    e = error_for("(2")
    assert e.reason == UNEXPECTED_END
    assert e.span == (2, 2)


def test_unexpected_end():
    e = error_for("1+")

    assert isinstance(e, ParseError)
    assert e.reason == UNEXPECTED_END
    assert e.span == (2, 2)


def test_empty_argument_list():
    e = error_for("sin()")

    assert isinstance(e, ParseError)
    assert e.reason == UNEXPECTED_CHARACTER
    assert e.span == (4, 5)


def test_format_eval_error():
    line = "1+foo"
    e = error_for(line)

    assert format_error(line, e) == "Error: unknown variable 'foo' at 2...5"


def test_format_parse_error():
    line = "2*#"
    e = error_for(line)

    assert format_error(line, e) == "Error: unexpected character '#' at 2...3"
