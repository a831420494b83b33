"""
Тесты для RoundingContext

Проверяет:
1. Значения по умолчанию и валидацию модели
2. Immutability (frozen=True)
3. Расширение точности (guard digits)
4. Конверсию в decimal.Context и обратно
5. Независимость от thread-local контекста decimal
"""

from decimal import (
    ROUND_DOWN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)

import pytest
from pydantic import ValidationError

from decmath import exp, sqrt
from decmath.context import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    EXACT_CONTEXT,
    GUARD_DIGITS,
    GUARD_ROUNDING,
    RoundingContext,
    RoundingMode,
    as_rounding_context,
    round_to,
)
from decmath.errors import InvalidArgumentError

# =============================================================================
# ТЕСТЫ МОДЕЛИ
# =============================================================================


class TestRoundingContextModel:
    """Тесты создания и валидации RoundingContext"""

    def test_defaults(self) -> None:
        """Контекст по умолчанию: 32 цифры, HALF_UP"""
        context = RoundingContext()
        assert context.precision == DEFAULT_PRECISION == 32
        assert context.rounding == DEFAULT_ROUNDING == RoundingMode.HALF_UP

    def test_explicit_values(self) -> None:
        """Явно заданные точность и режим"""
        context = RoundingContext(precision=50, rounding=RoundingMode.DOWN)
        assert context.precision == 50
        assert context.rounding == RoundingMode.DOWN

    def test_rounding_from_decimal_constant(self) -> None:
        """Режим принимается строковой константой decimal"""
        context = RoundingContext(precision=10, rounding=ROUND_HALF_EVEN)
        assert context.rounding == RoundingMode.HALF_EVEN

    def test_zero_precision_rejected(self) -> None:
        """precision < 1 отклоняется"""
        with pytest.raises(ValidationError):
            RoundingContext(precision=0)

        with pytest.raises(ValidationError):
            RoundingContext(precision=-5)

    def test_unknown_rounding_rejected(self) -> None:
        """Неизвестный режим округления отклоняется"""
        with pytest.raises(ValidationError):
            RoundingContext(rounding="ROUND_SIDEWAYS")

    def test_frozen(self) -> None:
        """Модель immutable"""
        context = RoundingContext()
        with pytest.raises(ValidationError):
            context.precision = 10

    def test_equality_by_value(self) -> None:
        """Контексты с одинаковыми полями равны"""
        assert RoundingContext(precision=20) == RoundingContext(precision=20)
        assert RoundingContext(precision=20) != RoundingContext(precision=21)


# =============================================================================
# ТЕСТЫ GUARD DIGITS
# =============================================================================


class TestWiden:
    """Тесты расширения точности"""

    def test_widen_adds_guard_digits(self) -> None:
        """widen() добавляет GUARD_DIGITS"""
        assert GUARD_DIGITS == 3
        assert RoundingContext(precision=32).widen().precision == 35

    def test_widen_custom_digits(self) -> None:
        """widen(n) добавляет n цифр"""
        assert RoundingContext(precision=10).widen(7).precision == 17

    def test_widen_uses_guard_rounding(self) -> None:
        """Промежуточные вычисления округляются HALF_UP при любом режиме"""
        context = RoundingContext(precision=10, rounding=RoundingMode.CEILING)
        assert context.widen().rounding == GUARD_ROUNDING == RoundingMode.HALF_UP

    def test_widen_returns_new_instance(self) -> None:
        """Исходный контекст не изменяется"""
        context = RoundingContext(precision=10)
        context.widen()
        assert context.precision == 10


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestDecimalContextConversion:
    """Тесты to_decimal_context / as_rounding_context"""

    def test_to_decimal_context(self) -> None:
        """Точность и режим переносятся в decimal.Context"""
        decimal_context = RoundingContext(precision=12, rounding=RoundingMode.DOWN).to_decimal_context()
        assert decimal_context.prec == 12
        assert decimal_context.rounding == ROUND_DOWN

    def test_traps_enabled(self) -> None:
        """Арифметические сбои не маскируются"""
        decimal_context = RoundingContext().to_decimal_context()
        assert decimal_context.traps[InvalidOperation]
        assert decimal_context.traps[DivisionByZero]
        assert decimal_context.traps[Overflow]

    def test_division_by_zero_raises(self) -> None:
        """Деление на ноль в рабочем контексте → decimal.DivisionByZero"""
        decimal_context = RoundingContext().to_decimal_context()
        with pytest.raises(DivisionByZero):
            decimal_context.divide(Decimal(1), Decimal(0))

    def test_rounding_context_passthrough(self) -> None:
        """RoundingContext возвращается без изменений"""
        context = RoundingContext(precision=7)
        assert as_rounding_context(context) is context

    def test_from_decimal_context(self) -> None:
        """decimal.Context приводится по prec и rounding"""
        context = as_rounding_context(Context(prec=15, rounding=ROUND_HALF_EVEN))
        assert context == RoundingContext(precision=15, rounding=RoundingMode.HALF_EVEN)

    def test_unsupported_type_rejected(self) -> None:
        """Неподдерживаемый тип контекста → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="context must be"):
            as_rounding_context(32)

    def test_exact_context_does_not_round(self) -> None:
        """EXACT_CONTEXT складывает без потери цифр"""
        a = Decimal("1" + "0" * 80 + ".5")
        assert EXACT_CONTEXT.subtract(a, Decimal("0.5")) == Decimal("1" + "0" * 80)


class TestRoundTo:
    """Тесты финального округления"""

    def test_round_half_up(self) -> None:
        """HALF_UP округляет 5 вверх"""
        assert round_to(Decimal("2.345"), RoundingContext(precision=3)) == Decimal("2.35")

    def test_round_down(self) -> None:
        """DOWN отбрасывает цифры"""
        context = RoundingContext(precision=3, rounding=RoundingMode.DOWN)
        assert round_to(Decimal("2.349"), context) == Decimal("2.34")

    def test_short_value_unchanged(self) -> None:
        """Значение короче точности не изменяется"""
        assert round_to(Decimal("97.65625"), RoundingContext()) == Decimal("97.65625")


class TestThreadLocalIndependence:
    """Результаты не зависят от decimal.getcontext()"""

    def test_result_ignores_local_context(self) -> None:
        """localcontext с другой точностью не влияет на результат"""
        context = RoundingContext(precision=30)
        expected = exp(Decimal("2.5"), context)

        with localcontext() as local:
            local.prec = 5
            local.rounding = ROUND_DOWN
            assert exp(Decimal("2.5"), context) == expected
            assert sqrt(Decimal(7), context) == sqrt(Decimal(7), RoundingContext(precision=30))

    def test_decimal_context_argument(self) -> None:
        """decimal.Context как аргумент даёт тот же результат"""
        assert sqrt(Decimal(2), Context(prec=20)) == sqrt(
            Decimal(2), RoundingContext(precision=20, rounding=RoundingMode.HALF_EVEN)
        )
