"""Evaluation of single-digit postfix and prefix expressions and infix-to-postfix conversion."""

from __future__ import annotations

import math
import string

_DIGITS = "0123456789"


def precedence(operator: str) -> int:
    """Return the binding strength of an operator; -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply_int(left: int, right: int, operator: str) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _truncating_divide(left, right)
    raise ValueError(f"unknown operator {operator!r}")


def _float_divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _apply_float(left: float, right: float, operator: str) -> float:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _float_divide(left, right)
    raise ValueError(f"unknown operator {operator!r}")


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits with integer arithmetic.

    Division truncates toward zero. An operator met with a single operand on
    the stack ends evaluation and yields that operand.
    """
    stack: list[int] = []
    for symbol in expression:
        if symbol in _DIGITS:
            stack.append(int(symbol))
            continue
        if not stack:
            raise ValueError(f"operator {symbol!r} has no operands")
        right = stack.pop()
        if not stack:
            return right
        left = stack.pop()
        stack.append(_apply_int(left, right, symbol))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def evaluate_prefix(expression: str) -> float:
    """Evaluate a prefix expression of single digits with floating-point arithmetic."""
    stack: list[float] = []
    for symbol in reversed(expression):
        if symbol in _DIGITS:
            stack.append(float(symbol))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {symbol!r} needs two operands")
        first = stack.pop()
        second = stack.pop()
        stack.append(_apply_float(first, second, symbol))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix."""
    stack: list[str] = []
    output: list[str] = []
    for symbol in expression:
        if symbol in string.ascii_letters:
            output.append(symbol)
        elif symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(symbol) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(symbol)
    output.extend(reversed(stack))
    return "".join(output)