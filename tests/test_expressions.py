import math

import pytest

from dsakit.expressions import (
    evaluate_postfix,
    evaluate_prefix,
    infix_to_postfix,
    precedence,
)


@pytest.mark.parametrize(
    "operator, expected",
    [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", -1), ("a", -1)],
)
def test_precedence(operator, expected):
    assert precedence(operator) == expected


def test_postfix_single_digit():
    assert evaluate_postfix("7") == 7


def test_postfix_basic_operations():
    assert evaluate_postfix("34*") == 3 * 4
    assert evaluate_postfix("82/") == 8 // 2
    assert evaluate_postfix("95-") == 9 - 5
    assert evaluate_postfix("12+") == 1 + 2


def test_postfix_division_truncates_toward_zero():
    assert evaluate_postfix("27-3/") == -1


def test_postfix_lone_operand_returned():
    assert evaluate_postfix("5+") == 5


def test_postfix_empty_raises():
    with pytest.raises(ValueError):
        evaluate_postfix("")


def test_postfix_leading_operator_raises():
    with pytest.raises(ValueError):
        evaluate_postfix("+")


def test_postfix_unknown_operator_raises():
    with pytest.raises(ValueError):
        evaluate_postfix("12%")


def test_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("10/")


def test_prefix_worked_example():
    assert evaluate_prefix("+9*26") == 21


def test_prefix_operand_order():
    assert evaluate_prefix("-93") == 9 - 3
    assert evaluate_prefix("/84") == 8 / 4


def test_prefix_division_by_zero_is_infinite():
    result = evaluate_prefix("/10")
    assert math.isinf(result) and result > 0


def test_prefix_missing_operands():
    with pytest.raises(ValueError):
        evaluate_prefix("-5")


def test_prefix_unknown_operator():
    with pytest.raises(ValueError):
        evaluate_prefix("%12")


def test_infix_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_infix_single_operand():
    assert infix_to_postfix("x") == "x"


@pytest.mark.parametrize("expression", ["a+b*c-d", "(a+b)*(c-d)/e", "a^b^c", "A*(B+C)"])
def test_infix_keeps_operand_order_and_drops_parentheses(expression):
    result = infix_to_postfix(expression)
    letters = [c for c in expression if c.isalpha()]
    assert [c for c in result if c.isalpha()] == letters
    assert "(" not in result and ")" not in result
    assert len(result) == len([c for c in expression if c not in "()"])