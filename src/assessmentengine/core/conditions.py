"""Condition evaluation for conditional-logic rules."""

from __future__ import annotations

import operator
from typing import Any, Callable

from .coercion import is_empty, to_number, to_text


def strict_equals(actual: Any, expected: Any) -> bool:
    """Equality without cross-type coercion (``"1" != 1``, ``True != 1``)."""
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    numeric = (int, float)
    if isinstance(actual, numeric) and isinstance(expected, numeric):
        return actual == expected
    if isinstance(actual, numeric) or isinstance(expected, numeric):
        return False
    if isinstance(actual, str) != isinstance(expected, str):
        return False
    return actual == expected


def _contains(actual: Any, expected: Any) -> bool:
    return to_text(expected).lower() in to_text(actual).lower()


def _numeric(compare: Callable[[float, float], bool]) -> Callable[[Any, Any], bool]:
    def check(actual: Any, expected: Any) -> bool:
        # NaN on either side makes every ordering comparison False.
        return compare(to_number(actual), to_number(expected))

    return check


_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "equals": strict_equals,
    "not_equals": lambda actual, expected: not strict_equals(actual, expected),
    "contains": _contains,
    "not_contains": lambda actual, expected: not _contains(actual, expected),
    "greater_than": _numeric(operator.gt),
    "less_than": _numeric(operator.lt),
    "greater_equal": _numeric(operator.ge),
    "less_equal": _numeric(operator.le),
    "is_empty": lambda actual, _expected: is_empty(actual),
    "is_not_empty": lambda actual, _expected: not is_empty(actual),
}

SUPPORTED_CONDITIONS: tuple[str, ...] = tuple(_OPERATORS)


def evaluate_condition(condition: str, actual: Any, expected: Any = None) -> bool:
    """Evaluate ``condition`` for a dependency value; unknown conditions are False."""
    check = _OPERATORS.get(condition)
    if check is None:
        return False
    return check(actual, expected)


__all__ = ["SUPPORTED_CONDITIONS", "evaluate_condition", "strict_equals"]
