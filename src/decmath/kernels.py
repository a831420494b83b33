"""
Kernels — Итерационные численные примитивы

Два обобщённых ядра и четыре рекуррентности рядов Тейлора:
- sum_series: суммирование ряда до неподвижной точки
- newton_raphson: итерация Ньютона–Рафсона до неподвижной точки
- exp_series, sin_series, cos_series, arctan_series: рекуррентности членов

Ядра не знают, какую функцию вычисляют: рекуррентность задаёт вызывающий код.
Ядра работают с decimal.Context напрямую; расширение точности и редукция
аргумента — ответственность диспетчерского уровня.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Остановка на первой паре последовательных приближений, равных
   при рабочей точности (Newton также на цикле длины 2)
2. Сходимость гарантирована только внутри радиуса быстрой сходимости;
   аргументы вне его здесь не проверяются
3. Число итераций не ограничено (нет таймаута)
"""

from decimal import Context, Decimal
from typing import Callable

_ZERO = Decimal(0)
_ONE = Decimal(1)

# (numerator, denominator, index) -> (numerator, denominator)
TermAdvance = Callable[[Decimal, Decimal, int], tuple[Decimal, Decimal]]


# =============================================================================
# ОБОБЩЁННЫЕ ЯДРА
# =============================================================================


def sum_series(
    numerator: Decimal,
    denominator: Decimal,
    advance: TermAdvance,
    context: Context,
) -> Decimal:
    """
    Суммирование ряда: term_n = numerator_n / denominator_n.

    Алгоритм:
        sum = 0
        repeat:
            sum += numerator / denominator
            (numerator, denominator) = advance(numerator, denominator, n)
        until sum не изменилась при точности context

    Args:
        numerator: Числитель первого члена
        denominator: Знаменатель первого члена
        advance: Рекуррентность для следующего члена; index начинается с 1
        context: Рабочий контекст (округление каждой операции)

    Returns:
        Сумма ряда при точности context
    """
    total = _ZERO
    index = 0

    while True:
        index += 1
        previous = total

        term = context.divide(numerator, denominator)
        total = context.add(total, term)

        if total == previous:
            return total

        numerator, denominator = advance(numerator, denominator, index)


def newton_raphson(
    initial: Decimal,
    step: Callable[[Decimal], Decimal],
    context: Context,
) -> Decimal:
    """
    Итерация y <- step(y) до неподвижной точки.

    Остановка:
    - y_k == y_(k-1): неподвижная точка
    - y_k == y_(k-2): цикл длины 2 между соседними значениями сетки,
      когда корень лежит у середины между ними; возвращается y_k

    context нужен только для округления начального приближения; step
    сам округляет свои операции.

    Raises:
        decimal.DivisionByZero: Если step делит на приближение, округлённое до нуля
    """
    y = context.plus(initial)
    previous = None

    while True:
        before_previous, previous = previous, y
        y = step(y)

        if y == previous or y == before_previous:
            return y


# =============================================================================
# РЯДЫ ТЕЙЛОРА
# =============================================================================


def exp_series(exponent: Decimal, context: Context) -> Decimal:
    """
    e^x = Σ x^n / n!

    Быстро сходится при 0 <= x < 2; диспетчер exp обеспечивает этот диапазон.
    """

    def advance(numerator: Decimal, denominator: Decimal, index: int) -> tuple[Decimal, Decimal]:
        return (
            context.multiply(numerator, exponent),
            context.multiply(denominator, Decimal(index)),
        )

    return sum_series(_ONE, _ONE, advance, context)


def sin_series(angle: Decimal, context: Context) -> Decimal:
    """sin x = Σ (-1)^n x^(2n+1) / (2n+1)!, угол в [0, π/2]."""
    square = context.multiply(angle, angle)

    def advance(numerator: Decimal, denominator: Decimal, index: int) -> tuple[Decimal, Decimal]:
        k = 2 * index + 1
        return (
            context.multiply(numerator, square).copy_negate(),
            context.multiply(denominator, Decimal(k * (k - 1))),
        )

    return sum_series(angle, _ONE, advance, context)


def cos_series(angle: Decimal, context: Context) -> Decimal:
    """cos x = Σ (-1)^n x^(2n) / (2n)!, угол в [0, π/2]."""
    square = context.multiply(angle, angle)

    def advance(numerator: Decimal, denominator: Decimal, index: int) -> tuple[Decimal, Decimal]:
        k = 2 * index
        return (
            context.multiply(numerator, square).copy_negate(),
            context.multiply(denominator, Decimal(k * (k - 1))),
        )

    return sum_series(_ONE, _ONE, advance, context)


def arctan_series(value: Decimal, context: Context) -> Decimal:
    """
    arctan x = Σ (-1)^n x^(2n+1) / (2n+1)

    Сходится при |x| <= 1, но при |x| близком к 1 крайне медленно;
    диспетчер arctan сокращает аргумент до |x| <= 0.5.
    """
    square = context.multiply(value, value)

    def advance(numerator: Decimal, denominator: Decimal, index: int) -> tuple[Decimal, Decimal]:
        return (
            context.multiply(numerator, square).copy_negate(),
            Decimal(2 * index + 1),
        )

    return sum_series(value, _ONE, advance, context)
