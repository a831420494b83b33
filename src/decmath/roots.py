"""
Roots — Квадратный корень и корень n-й степени

Newton–Raphson с начальным приближением y0 = value:
    sqrt:  y <- (y + value / y) / 2
    root:  y <- (y * (n - 1) + value / y^(n-1)) / n

Вычисление при precision + GUARD_DIGITS, результат округляется до контекста.
"""

from decimal import Context, Decimal
from typing import Final

from decmath.context import RoundingContext, as_rounding_context, round_to
from decmath.errors import InvalidArgumentError
from decmath.kernels import newton_raphson
from decmath.power import power_int
from decmath.validation import to_decimal, to_int, validate_non_negative

_ZERO: Final[Decimal] = Decimal(0)
_TWO: Final[Decimal] = Decimal(2)


def sqrt(value: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Квадратный корень.

    Args:
        value: Подкоренное значение (>= 0)
        context: Контекст округления результата

    Returns:
        value^(1/2); для value == 0 ровно 0

    Raises:
        InvalidArgumentError: Если value < 0

    Examples:
        >>> sqrt(Decimal(5), RoundingContext(precision=10))
        Decimal('2.236067977')
    """
    context = as_rounding_context(context)
    value = to_decimal(value, "value")
    validate_non_negative(value, "value")

    # Newton step делит на y: ноль обрабатывается отдельно
    if value == _ZERO:
        return _ZERO

    working = context.widen()
    decimal_context = working.to_decimal_context()

    def step(y: Decimal) -> Decimal:
        return decimal_context.divide(
            decimal_context.add(y, decimal_context.divide(value, y)), _TWO
        )

    return round_to(newton_raphson(value, step, decimal_context), context)


def root(
    base: Decimal | int,
    exponent: int,
    context: RoundingContext | Context,
) -> Decimal:
    """
    Корень степени exponent из base.

    Args:
        base: Подкоренное значение (>= 0)
        exponent: Порядок корня (int >= 1)
        context: Контекст округления результата

    Returns:
        base^(1/exponent); для base == 0 ровно 0

    Raises:
        InvalidArgumentError: Если base < 0 или exponent < 1

    Examples:
        >>> root(Decimal(27), 3, RoundingContext(precision=10)) == 3
        True
    """
    context = as_rounding_context(context)
    base = to_decimal(base, "base")
    exponent = to_int(exponent, "exponent")
    validate_non_negative(base, "base")

    if exponent < 1:
        raise InvalidArgumentError(f"exponent must be >= 1, got {exponent}")

    if base == _ZERO:
        return _ZERO

    if exponent == 1:
        return round_to(base, context)

    working = context.widen()
    decimal_context = working.to_decimal_context()
    order = Decimal(exponent)
    order_minus_one = Decimal(exponent - 1)

    def step(y: Decimal) -> Decimal:
        # y * (n - 1) + base / y^(n-1)
        numerator = decimal_context.add(
            decimal_context.multiply(y, order_minus_one),
            decimal_context.divide(base, power_int(y, exponent - 1, working)),
        )
        return decimal_context.divide(numerator, order)

    return round_to(newton_raphson(base, step, decimal_context), context)
