"""
Numeric Validators

Numbers, booleans, integers, floats, ranges and multiples.

Strings are parsed with a fixed grammar rather than Python's ``float()``,
which would also accept ``"nan"``, ``"inf"`` and digit-group underscores.
"""

import math
import re
from decimal import Decimal, localcontext
from typing import Any, Optional

from ..config.options import CheckOptions
from .base import Kind, Outcome, Rule

# Whitespace allowed around numeric strings
_WS = "[ \t\n\r\v\f]*"

NUMBER_PATTERN = re.compile(
    _WS + r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?" + _WS
)
INTEGER_PATTERN = re.compile(_WS + r"[+-]?(?:0|[1-9][0-9]*)" + _WS)

TRUE_TOKENS = frozenset({"1", "true", "on", "yes"})
FALSE_TOKENS = frozenset({"0", "false", "off", "no", ""})


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a number exactly from an int, float or numeric string.

    Returns:
        The value as a finite Decimal, or None if it is not a number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value)) if math.isfinite(value) else None
    if isinstance(value, str) and NUMBER_PATTERN.fullmatch(value):
        try:
            return Decimal(value.strip())
        except ArithmeticError:
            # Exponent beyond what decimal can represent
            return None
    return None


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a number from an int, float or numeric string.

    Returns:
        The value as a finite float, or None if it is not a number or does
        not fit in a float
    """
    exact = parse_decimal(value)
    if exact is None:
        return None
    number = float(exact)
    return number if math.isfinite(number) else None


def is_multiple(dividend: Decimal, divisor: Decimal) -> bool:
    """
    Whether ``dividend`` is an exact multiple of ``divisor``.

    The remainder truncates toward zero, so the signs of either operand never
    change the answer, and fractional operands are compared exactly:
    7.5 is a multiple of 2.5 and 0.3 is a multiple of 0.1.
    """
    with localcontext() as ctx:
        # Enough digits for the integer quotient so the remainder is exact
        ctx.prec = max(ctx.prec, dividend.adjusted() - divisor.adjusted() + 2)
        return dividend % divisor == 0


class NumericRule(Rule):
    """Any int, float or numeric string"""

    kind = Kind.NUMERIC

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        number = parse_number(value)
        if number is None:
            return

        outcome.valid = True
        outcome.length = len(value) if isinstance(value, str) else len(str(value))
        outcome.value = number


class BooleanRule(Rule):
    """Recognised boolean tokens, case-insensitive"""

    kind = Kind.BOOLEAN

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        if isinstance(value, bool):
            outcome.valid = True
            outcome.value = value
            return

        if isinstance(value, int):
            if value in (0, 1):
                outcome.valid = True
                outcome.value = value == 1
            return

        if not isinstance(value, str):
            return

        token = value.strip().lower()

        if token in TRUE_TOKENS:
            outcome.valid = True
            outcome.value = True
        elif token in FALSE_TOKENS:
            outcome.valid = True
            outcome.value = False


class IntegerRule(Rule):
    """Integer literals without leading zeros, ints, and integral floats"""

    kind = Kind.INTEGER

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        if isinstance(value, bool):
            return

        if isinstance(value, int):
            parsed = value
        elif isinstance(value, float):
            if not (math.isfinite(value) and value.is_integer()):
                return
            parsed = int(value)
        elif isinstance(value, str) and INTEGER_PATTERN.fullmatch(value):
            # int(str) refuses very long digit strings; Decimal does not
            parsed = int(Decimal(value.strip()))
        else:
            return

        outcome.valid = True
        outcome.value = parsed


class FloatRule(Rule):
    """Floating-point literals (integers included)"""

    kind = Kind.FLOAT

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        number = parse_number(value)
        if number is not None:
            outcome.valid = True
            outcome.value = number


class RangeRule(Rule):
    """Number within the inclusive ``min``/``max`` bounds; missing bounds are open"""

    kind = Kind.RANGE

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        number = parse_number(value)
        if number is None:
            return

        if options.min is not None and number < options.min:
            return
        if options.max is not None and number > options.max:
            return

        outcome.valid = True
        outcome.value = number


class MultipleOfRule(Rule):
    """Number that divides exactly by the ``multiple`` option"""

    kind = Kind.MULTIPLE_OF

    def evaluate(self, value: Any, options: CheckOptions, outcome: Outcome) -> None:
        # Same domain as the other numeric kinds: the value must fit a float
        number = parse_number(value)
        if number is None:
            return

        dividend = parse_decimal(value)
        divisor = Decimal(repr(options.multiple))
        if is_multiple(dividend, divisor):
            outcome.valid = True
            outcome.value = number
