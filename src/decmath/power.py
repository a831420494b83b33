"""
Power — Целая и дробная части, целочисленная степень

get_whole / get_fraction — точные операции (без округления).
power_int — быстрое возведение в степень (square-and-multiply),
детерминированное, без цикла сходимости.
"""

from decimal import ROUND_DOWN, Context, Decimal

from decmath.context import EXACT_CONTEXT, RoundingContext, as_rounding_context
from decmath.validation import to_decimal, to_int

_ONE = Decimal(1)


# =============================================================================
# ЦЕЛАЯ И ДРОБНАЯ ЧАСТИ
# =============================================================================


def get_whole(number: Decimal | int) -> Decimal:
    """
    Целая часть числа (округление к нулю).

    Examples:
        >>> get_whole(Decimal("1.64"))
        Decimal('1')
        >>> get_whole(Decimal("-1.64"))
        Decimal('-1')
    """
    number = to_decimal(number, "number")
    return number.to_integral_value(rounding=ROUND_DOWN, context=EXACT_CONTEXT)


def get_fraction(number: Decimal | int) -> Decimal:
    """
    Дробная часть числа: number - get_whole(number).

    Знак совпадает со знаком number.

    Examples:
        >>> get_fraction(Decimal("1.64"))
        Decimal('0.64')
        >>> get_fraction(Decimal("-1.64"))
        Decimal('-0.64')
    """
    number = to_decimal(number, "number")
    return EXACT_CONTEXT.subtract(number, get_whole(number))


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ СТЕПЕНЬ
# =============================================================================


def power_int(
    base: Decimal | int,
    exponent: int,
    context: RoundingContext | Context,
) -> Decimal:
    """
    base^exponent для целого exponent.

    Алгоритм (биты exponent от младшего к старшему):
        result = 1
        while exponent > 0:
            if exponent & 1: result *= base
            exponent >>= 1
            if exponent: base *= base

    Каждое умножение округляется контекстом; guard digits НЕ добавляются.

    Args:
        base: Основание
        exponent: Целый показатель (может быть отрицательным)
        context: Контекст округления

    Returns:
        base^exponent; для exponent == 0 ровно 1

    Raises:
        InvalidArgumentError: Если exponent не int
        decimal.DivisionByZero: Если base == 0 и exponent < 0

    Examples:
        >>> power_int(Decimal("2.5"), 5, RoundingContext(precision=32))
        Decimal('97.65625')
    """
    context = as_rounding_context(context)
    base = to_decimal(base, "base")
    exponent = to_int(exponent, "exponent")
    decimal_context = context.to_decimal_context()

    # 1 / base^(-exponent)
    if exponent < 0:
        return decimal_context.divide(_ONE, power_int(base, -exponent, context))

    result = _ONE

    while exponent > 0:
        if exponent & 1:
            result = decimal_context.multiply(result, base)
        exponent >>= 1
        if exponent:
            base = decimal_context.multiply(base, base)

    return result
