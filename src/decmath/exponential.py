"""
Exponential — Экспонента, натуральный логарифм, степень с дробным показателем

Граф вызовов (ацикличный):
    exp   -> exp_series, power_int
    ln    -> root, exp (внутри шага Newton–Raphson)
    power -> power_int | ln, exp

РЕДУКЦИЯ АРГУМЕНТА:
    exp:  x = w + f (w целая часть, f дробная)
          e^x = (e^(1 + f/w))^w, где 1 + f/w всегда близко к 1
    ln:   d = число цифр целой части x
          ln x = d * ln(x^(1/d)), где x^(1/d) близко к 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ln(x <= 0) → InvalidArgumentError до начала итераций
2. power с целым показателем совпадает с power_int бит-в-бит
3. Все промежуточные вычисления при precision + GUARD_DIGITS
"""

import sys
from decimal import Context, Decimal
from typing import Final

from decmath.context import (
    EXACT_CONTEXT,
    RoundingContext,
    as_rounding_context,
    round_to,
)
from decmath.kernels import exp_series, newton_raphson
from decmath.power import get_fraction, get_whole, power_int
from decmath.roots import root
from decmath.validation import to_decimal, validate_positive

# =============================================================================
# ПАРАМЕТРЫ РЕДУКЦИИ
# =============================================================================

# Если число цифр целой части меньше порога, Newton–Raphson применяется
# к ln напрямую, без извлечения корня
LN_NEWTON_THRESHOLD: Final[int] = 3

# Максимальный шаг показателя для power_int; больший показатель
# раскладывается на части не больше MAX_POWER_STEP
MAX_POWER_STEP: Final[int] = sys.maxsize

_ZERO: Final[Decimal] = Decimal(0)
_ONE: Final[Decimal] = Decimal(1)


# =============================================================================
# EXP
# =============================================================================


def exp(exponent: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    e^exponent.

    Алгоритм:
        exponent < 0        → 1 / e^(-exponent)
        exponent == 0       → ровно 1
        whole in {0, 1}     → ряд Тейлора напрямую
        иначе               → (e^(1 + fraction/whole))^whole

    Если whole > MAX_POWER_STEP, возведение в степень выполняется
    частями: e^x = e^a * e^b * ..., каждая часть не больше MAX_POWER_STEP.

    Args:
        exponent: Показатель
        context: Контекст округления результата

    Returns:
        e^exponent, округлённое до контекста

    Raises:
        decimal.Overflow: Если результат выходит за пределы экспоненты Decimal

    Examples:
        >>> exp(Decimal(5), RoundingContext(precision=32))
        Decimal('148.41315910257660342111558004055')
    """
    context = as_rounding_context(context)
    exponent = to_decimal(exponent, "exponent")
    working = context.widen()
    decimal_context = working.to_decimal_context()

    # 1 / e^(-exponent)
    if exponent < _ZERO:
        reciprocal = exp(exponent.copy_negate(), working)
        return round_to(decimal_context.divide(_ONE, reciprocal), context)

    if exponent == _ZERO:
        return _ONE

    whole = get_whole(exponent)

    # Показатель уже близок к 1: ряд сходится быстро
    if whole == _ZERO or whole == _ONE:
        return round_to(exp_series(exponent, decimal_context), context)

    fraction = get_fraction(exponent)

    # e^x = (e^(1 + fraction/whole))^whole
    reduced = decimal_context.add(_ONE, decimal_context.divide(fraction, whole))
    taylor = exp_series(reduced, decimal_context)

    result = _ONE
    remaining = whole
    max_step = Decimal(MAX_POWER_STEP)

    while remaining > max_step:
        result = decimal_context.multiply(result, power_int(taylor, MAX_POWER_STEP, working))
        remaining = EXACT_CONTEXT.subtract(remaining, max_step)

    result = decimal_context.multiply(result, power_int(taylor, int(remaining), working))
    return round_to(result, context)


# =============================================================================
# LN
# =============================================================================


def _ln_newton_raphson(value: Decimal, working: RoundingContext) -> Decimal:
    """
    ln как корень f(y) = e^y - value.

    y <- y - (e^y - value) / e^y, начальное приближение y0 = value.
    """
    decimal_context = working.to_decimal_context()

    def step(y: Decimal) -> Decimal:
        exp_y = exp(y, working)
        reduction = decimal_context.divide(decimal_context.subtract(exp_y, value), exp_y)
        return decimal_context.subtract(y, reduction)

    return newton_raphson(value, step, decimal_context)


def ln(value: Decimal | int, context: RoundingContext | Context) -> Decimal:
    """
    Натуральный логарифм.

    Для значений с >= LN_NEWTON_THRESHOLD цифрами целой части:
        ln value = d * ln(value^(1/d)), d = число цифр целой части

    Args:
        value: Аргумент (> 0)
        context: Контекст округления результата

    Returns:
        ln value; для value == 1 ровно 0

    Raises:
        InvalidArgumentError: Если value <= 0

    Examples:
        >>> ln(Decimal(5), RoundingContext(precision=32))
        Decimal('1.6094379124341003746007593332262')
        >>> ln(Decimal(0), RoundingContext())  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgumentError: value must be positive (> 0), got 0
    """
    context = as_rounding_context(context)
    value = to_decimal(value, "value")
    validate_positive(value, "value")

    # Newton сходится к ~10^-(precision) вместо нуля
    if value == _ONE:
        return _ZERO

    working = context.widen()
    whole_digits = value.adjusted() + 1

    if whole_digits < LN_NEWTON_THRESHOLD:
        return round_to(_ln_newton_raphson(value, working), context)

    decimal_context = working.to_decimal_context()
    reduced = root(value, whole_digits, working)
    result = decimal_context.multiply(
        Decimal(whole_digits), _ln_newton_raphson(reduced, working)
    )
    return round_to(result, context)


# =============================================================================
# POWER
# =============================================================================


def power(
    base: Decimal | int,
    exponent: Decimal | int,
    context: RoundingContext | Context,
) -> Decimal:
    """
    base^exponent для произвольного показателя.

    Целый показатель (int или Decimal с нулевой дробной частью)
    делегируется power_int: быстрее и точнее.
    Иначе: base^exponent = e^(exponent * ln base).

    Args:
        base: Основание (> 0 для дробного показателя)
        exponent: Показатель
        context: Контекст округления результата

    Raises:
        InvalidArgumentError: Если показатель дробный, а base <= 0

    Examples:
        >>> power(Decimal("2.5"), Decimal("2.5"), RoundingContext(precision=32))
        Decimal('9.8821176880261854124965423263522')
        >>> power(Decimal("2.5"), Decimal("5.0"), RoundingContext(precision=32))
        Decimal('97.65625')
    """
    context = as_rounding_context(context)

    if isinstance(exponent, int) and not isinstance(exponent, bool):
        return power_int(base, exponent, context)

    exponent = to_decimal(exponent, "exponent")

    if get_fraction(exponent) == _ZERO:
        return power_int(base, int(exponent), context)

    base = to_decimal(base, "base")
    working = context.widen()
    decimal_context = working.to_decimal_context()

    # e^(exponent * ln base)
    ln_base = ln(base, working)
    product = decimal_context.multiply(exponent, ln_base)
    return round_to(exp(product, working), context)
