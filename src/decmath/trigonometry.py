"""
Trigonometry — sin, cos, tan и обратные функции (угол в радианах)

РЕДУКЦИЯ УГЛА (sin/cos), строго в этом порядке:
1. angle >= 2π      → angle - 2π * floor(angle / 2π)
2. angle >= π       → sin: -(angle - π);  cos: -(angle - 2π)
3. angle > π/2      → -(angle - π); cos меняет знак результата ряда
4. angle < 0        → sin(-x) = -sin(x);  cos(-x) = cos(x)
5. angle == 0       → ровно 0 (sin) / ровно 1 (cos), без ряда
6. ряд Тейлора на угле из [0, π/2]

Шаг 2 для cos вычитает 2π, а не π: cos(2π - x) = cos(x). Поведение на
границе angle == π закреплено тестами.

ОБРАТНЫЕ ФУНКЦИИ:
    arctan: |x| > 1   → sign(x) * π/2 - arctan(1/x)
            |x| > 0.5 → arctan(x) = 2 * arctan(x / (1 + sqrt(1 + x^2)))
            ряд Тейлора на |x| <= 0.5
    1 - x^2 вычисляется как (1 - x)(1 + x) с точными множителями
    arcsin(x) = arctan(x / sqrt(1 - x^2)),  x = ±1 → ±π/2
    arccos(x) = arctan(sqrt(1 - x^2) / x),  x = 0 → π/2,  x < 0 → π - arccos(-x)
"""

from decimal import Context, Decimal
from typing import Final

from decmath.constants import PI
from decmath.context import EXACT_CONTEXT, RoundingContext, as_rounding_context, round_to
from decmath.kernels import arctan_series, cos_series, sin_series
from decmath.roots import sqrt
from decmath.validation import to_decimal, validate_in_range

# Порог сокращения аргумента arctan перед рядом Тейлора
ARCTAN_REDUCTION_LIMIT: Final[Decimal] = Decimal("0.5")

_ZERO: Final[Decimal] = Decimal(0)
_ONE: Final[Decimal] = Decimal(1)
_TWO: Final[Decimal] = Decimal(2)


# =============================================================================
# SIN / COS
# =============================================================================


def _reduce_full_turns(angle: Decimal, decimal_context: Context) -> Decimal:
    """angle >= 2π → angle - 2π * n, n = floor(angle / 2π)."""
    two_pi = decimal_context.multiply(PI, _TWO)

    if angle >= two_pi:
        turns = int(decimal_context.divide(angle, two_pi))
        angle = decimal_context.subtract(angle, decimal_context.multiply(PI, Decimal(turns * 2)))

    return angle


def sin(angle: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Синус угла в радианах.

    Examples:
        >>> sin(Decimal("1.5"), RoundingContext(precision=32))
        Decimal('0.99749498660405443094172337114149')
    """
    context = as_rounding_context(context)
    angle = to_decimal(angle, "angle")
    working = context.widen()
    decimal_context = working.to_decimal_context()

    angle = _reduce_full_turns(angle, decimal_context)

    # sin(x) = -sin(x - π)
    if angle >= PI:
        angle = decimal_context.subtract(angle, PI).copy_negate()

    # sin(x) = sin(π - x)
    if angle > decimal_context.divide(PI, _TWO):
        angle = decimal_context.subtract(angle, PI).copy_negate()

    if angle < _ZERO:
        return round_to(sin(angle.copy_negate(), working).copy_negate(), context)

    if angle == _ZERO:
        return _ZERO

    return round_to(sin_series(angle, decimal_context), context)


def cos(angle: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Косинус угла в радианах.

    Examples:
        >>> cos(Decimal(0), RoundingContext())
        Decimal('1')
    """
    context = as_rounding_context(context)
    angle = to_decimal(angle, "angle")
    working = context.widen()
    decimal_context = working.to_decimal_context()

    angle = _reduce_full_turns(angle, decimal_context)

    # cos(x) = cos(2π - x)
    if angle >= PI:
        two_pi = decimal_context.multiply(PI, _TWO)
        angle = decimal_context.subtract(angle, two_pi).copy_negate()

    # cos(x) = -cos(π - x)
    if angle > decimal_context.divide(PI, _TWO):
        angle = decimal_context.subtract(angle, PI).copy_negate()
        return round_to(cos_series(angle, decimal_context).copy_negate(), context)

    if angle < _ZERO:
        return round_to(cos(angle.copy_negate(), working), context)

    if angle == _ZERO:
        return _ONE

    return round_to(cos_series(angle, decimal_context), context)


def tan(angle: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Тангенс: sin / cos с общей редукцией угла.

    Raises:
        decimal.DivisionByZero: Если cos(angle) округляется до нуля
    """
    context = as_rounding_context(context)
    angle = to_decimal(angle, "angle")
    working = context.widen()
    decimal_context = working.to_decimal_context()

    return round_to(
        decimal_context.divide(sin(angle, working), cos(angle, working)), context
    )


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def arctan(value: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Арктангенс, результат в (-π/2, π/2).

    Examples:
        >>> arctan(Decimal(1), RoundingContext(precision=20))
        Decimal('0.78539816339744830962')
    """
    context = as_rounding_context(context)
    value = to_decimal(value, "value")

    if value == _ZERO:
        return _ZERO

    working = context.widen()
    decimal_context = working.to_decimal_context()

    # arctan(x) = sign(x) * π/2 - arctan(1/x)
    if value.copy_abs() > _ONE:
        half_pi = decimal_context.divide(PI, _TWO)
        if value < _ZERO:
            half_pi = half_pi.copy_negate()
        reciprocal = arctan(decimal_context.divide(_ONE, value), working)
        return round_to(decimal_context.subtract(half_pi, reciprocal), context)

    halvings = 0
    reduced = value

    # arctan(x) = 2 * arctan(x / (1 + sqrt(1 + x^2)))
    while reduced.copy_abs() > ARCTAN_REDUCTION_LIMIT:
        hypotenuse = sqrt(decimal_context.add(_ONE, decimal_context.multiply(reduced, reduced)), working)
        reduced = decimal_context.divide(reduced, decimal_context.add(_ONE, hypotenuse))
        halvings += 1

    result = decimal_context.multiply(arctan_series(reduced, decimal_context), Decimal(2**halvings))
    return round_to(result, context)


def _one_minus_square(value: Decimal, decimal_context: Context) -> Decimal:
    """
    1 - x^2 как (1 - x)(1 + x).

    Множители точные, округляется только произведение: при |x| близком к 1
    округлённый x^2 совпал бы с 1, и разность потеряла бы все цифры.
    """
    return decimal_context.multiply(
        EXACT_CONTEXT.subtract(_ONE, value), EXACT_CONTEXT.add(_ONE, value)
    )


def arcsin(value: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Арксинус, результат в [-π/2, π/2].

    Raises:
        InvalidArgumentError: Если |value| > 1
    """
    context = as_rounding_context(context)
    value = to_decimal(value, "value")
    validate_in_range(value, "value", -_ONE, _ONE)

    working = context.widen()
    decimal_context = working.to_decimal_context()

    # sqrt(1 - x^2) == 0: arctan не определён, ответ ±π/2
    if value.copy_abs() == _ONE:
        half_pi = decimal_context.divide(PI, _TWO)
        return round_to(half_pi if value > _ZERO else half_pi.copy_negate(), context)

    cosine = sqrt(_one_minus_square(value, decimal_context), working)
    return round_to(arctan(decimal_context.divide(value, cosine), working), context)


def arccos(value: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Арккосинус, результат в [0, π].

    Raises:
        InvalidArgumentError: Если |value| > 1
    """
    context = as_rounding_context(context)
    value = to_decimal(value, "value")
    validate_in_range(value, "value", -_ONE, _ONE)

    working = context.widen()
    decimal_context = working.to_decimal_context()

    if value == _ZERO:
        return round_to(decimal_context.divide(PI, _TWO), context)

    # arccos(-x) = π - arccos(x)
    if value < _ZERO:
        mirrored = arccos(value.copy_negate(), working)
        return round_to(decimal_context.subtract(PI, mirrored), context)

    sine = sqrt(_one_minus_square(value, decimal_context), working)
    return round_to(arctan(decimal_context.divide(sine, value), working), context)

