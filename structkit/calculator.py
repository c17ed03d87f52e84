"""Arithmetic expression evaluator using operator and operand stacks."""

from __future__ import annotations

import math
import re

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_NUMBER = re.compile(r"\d*\.?\d*(?:[eE][+-]?\d+)?")


class CalculatorError(Exception):
    """Base class for evaluation failures."""


class InvalidInputError(CalculatorError):
    """The expression is malformed."""


class DivisionByZeroError(CalculatorError):
    """Division by zero or a power with no defined result."""


def _apply(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise DivisionByZeroError("division by zero")
        return left / right
    if op == "^":
        if left == 0 or (left < 0 and right < 1):
            raise DivisionByZeroError("undefined power")
        try:
            return math.pow(left, right)
        except OverflowError:
            return math.inf
        except ValueError:
            return math.nan
    raise InvalidInputError(f"unbalanced {op!r}")


def _reduce(numbers: list[float], operators: list[str]) -> None:
    if len(numbers) < 2:
        raise InvalidInputError("missing operand")
    right = numbers.pop()
    left = numbers.pop()
    numbers.append(_apply(operators.pop(), left, right))


def calculate(expression: str) -> float:
    """Evaluate ``expression`` built from numbers, ``+ - * / ^`` and parentheses.

    Operators of equal precedence, ``^`` included, group from the left.
    Whitespace is not allowed.
    """
    numbers: list[float] = []
    operators: list[str] = []
    pos = 0
    while pos < len(expression):
        char = expression[pos]
        if char.isdigit() or char == ".":
            text = _NUMBER.match(expression, pos).group()
            try:
                numbers.append(float(text))
            except ValueError:
                raise InvalidInputError(f"bad number at position {pos}") from None
            pos += len(text)
            continue
        if char == "(":
            operators.append(char)
        elif char in _PRECEDENCE:
            while operators and _PRECEDENCE.get(operators[-1], 0) >= _PRECEDENCE[char]:
                _reduce(numbers, operators)
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                _reduce(numbers, operators)
            if operators:
                operators.pop()
        else:
            raise InvalidInputError(f"unexpected {char!r} at position {pos}")
        pos += 1
    while operators:
        _reduce(numbers, operators)
    if not numbers:
        raise InvalidInputError("empty expression")
    return numbers[-1]