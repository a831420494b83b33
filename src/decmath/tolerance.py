"""
Tolerance — Сравнение Decimal с допуском в единицах последнего разряда (ulp)

Результаты decmath корректны «в пределах округления контекста»: проверка
равенства ведётся с допуском в ulp, а не через ==.

Алгоритм:
    ulp(x, ctx) = 10^(adjusted(x) - precision + 1)
    |a - b| <= ulps * ulp(max(|a|, |b|), ctx)
"""

from decimal import Context, Decimal
from typing import Final

from decmath.context import EXACT_CONTEXT, RoundingContext, as_rounding_context
from decmath.errors import InvalidArgumentError
from decmath.validation import to_decimal

# Допуск по умолчанию: одна единица последнего разряда
DEFAULT_ULPS: Final[int] = 1

_ZERO: Final[Decimal] = Decimal(0)


def ulp(value: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Единица последнего разряда value при точности контекста.

    Для нуля берётся ulp единицы.

    Examples:
        >>> ulp(Decimal("148.4"), RoundingContext(precision=5))
        Decimal('0.01')
        >>> ulp(Decimal(0), RoundingContext(precision=3))
        Decimal('0.01')
    """
    context = as_rounding_context(context)
    value = to_decimal(value, "value")
    magnitude = 0 if value == _ZERO else value.adjusted()
    return Decimal((0, (1,), magnitude - context.precision + 1))


def is_close(
    a: Decimal | int,
    b: Decimal | int,
    context: RoundingContext | Context,
    ulps: int = DEFAULT_ULPS,
) -> bool:
    """
    Близость a и b в пределах ulps единиц последнего разряда.

    Args:
        a: Первое значение
        b: Второе значение
        context: Контекст, задающий точность
        ulps: Допуск в ulp (default: DEFAULT_ULPS)

    Returns:
        True если |a - b| <= ulps * ulp(max(|a|, |b|))

    Raises:
        InvalidArgumentError: Если ulps < 0
    """
    if ulps < 0:
        raise InvalidArgumentError(f"ulps must be non-negative, got {ulps}")

    a = to_decimal(a, "a")
    b = to_decimal(b, "b")

    difference = EXACT_CONTEXT.subtract(a, b).copy_abs()
    scale = max(a.copy_abs(), b.copy_abs())
    limit = EXACT_CONTEXT.multiply(ulp(scale, context), Decimal(ulps))
    return difference <= limit


def compare_with_tolerance(
    a: Decimal | int,
    b: Decimal | int,
    context: RoundingContext | Context,
    ulps: int = DEFAULT_ULPS,
) -> int:
    """
    Сравнение двух Decimal с учётом допуска.

    Returns:
        -1 если a < b (с учётом допуска)
         0 если a ≈ b (в пределах ulps)
        +1 если a > b (с учётом допуска)
    """
    if is_close(a, b, context, ulps):
        return 0
    elif to_decimal(a, "a") < to_decimal(b, "b"):
        return -1
    else:
        return 1
