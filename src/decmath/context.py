"""
RoundingContext — Явный контекст округления

Каждая операция decmath принимает контекст последним параметром.
Глобальный (thread-local) контекст decimal НЕ читается и НЕ изменяется:
результат зависит только от аргументов, а не от decimal.getcontext().

Guard digits:
    Внутренние вычисления ведутся с precision + GUARD_DIGITS значащими
    цифрами и округлением GUARD_ROUNDING; результат округляется обратно
    до precision в режиме вызывающего.
    Запас в 3 цифры — эвристика, а не доказанная оценка погрешности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. RoundingContext immutable (frozen=True)
2. Все арифметические методы вызываются через явный decimal.Context
3. Traps InvalidOperation / DivisionByZero / Overflow всегда включены
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_05UP,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

from decmath.errors import InvalidArgumentError

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Запас точности для промежуточных вычислений
GUARD_DIGITS: Final[int] = 3

# Точность по умолчанию (значащие цифры)
DEFAULT_PRECISION: Final[int] = 32

_TRAPS: Final[list] = [InvalidOperation, DivisionByZero, Overflow]


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления (значения совпадают с константами decimal)"""

    UP = ROUND_UP
    DOWN = ROUND_DOWN
    CEILING = ROUND_CEILING
    FLOOR = ROUND_FLOOR
    HALF_UP = ROUND_HALF_UP
    HALF_DOWN = ROUND_HALF_DOWN
    HALF_EVEN = ROUND_HALF_EVEN
    ZERO_FIVE_UP = ROUND_05UP


DEFAULT_ROUNDING: Final[RoundingMode] = RoundingMode.HALF_UP

# Режим округления промежуточных вычислений. Направленные режимы (UP, CEILING)
# здесь недопустимы: каждый малый член ряда сдвигал бы сумму на ulp, и ряд
# не достигал бы неподвижной точки
GUARD_ROUNDING: Final[RoundingMode] = RoundingMode.HALF_UP


# =============================================================================
# ROUNDING CONTEXT MODEL
# =============================================================================


class RoundingContext(BaseModel):
    """
    Контекст округления: точность (значащие цифры) + режим округления.

    Immutable модель (frozen=True). Расширение точности создаёт новый
    экземпляр через widen().
    """

    precision: int = Field(
        default=DEFAULT_PRECISION, ge=1, description="Число значащих цифр результата"
    )
    rounding: RoundingMode = Field(
        default=DEFAULT_ROUNDING, description="Режим округления результата"
    )

    model_config = {"frozen": True}  # Immutable

    def widen(self, digits: int = GUARD_DIGITS) -> "RoundingContext":
        """
        Контекст для промежуточных вычислений.

        Args:
            digits: Сколько значащих цифр добавить (default: GUARD_DIGITS)

        Returns:
            Новый RoundingContext с precision + digits и режимом GUARD_ROUNDING

        Examples:
            >>> RoundingContext(precision=32).widen().precision
            35
        """
        return RoundingContext(precision=self.precision + digits, rounding=GUARD_ROUNDING)

    def to_decimal_context(self) -> Context:
        """
        Эквивалентный decimal.Context.

        Диапазон экспоненты максимальный, чтобы ограничением была только
        точность, а не Emax/Emin.
        """
        return Context(
            prec=self.precision,
            rounding=self.rounding.value,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
            traps=list(_TRAPS),
        )


# Контекст без потери точности для сложения/вычитания целых и дробных частей.
# Деление в нём недопустимо (бесконечные дроби).
EXACT_CONTEXT: Final[Context] = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=list(_TRAPS),
)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def as_rounding_context(context: RoundingContext | Context) -> RoundingContext:
    """
    Приведение контекста к RoundingContext.

    decimal.Context принимается для удобства: из него берутся только prec
    и rounding, остальные настройки (traps, Emax) не наследуются.

    Raises:
        InvalidArgumentError: Если context неподдерживаемого типа
    """
    if isinstance(context, RoundingContext):
        return context

    if isinstance(context, Context):
        return RoundingContext(precision=context.prec, rounding=RoundingMode(context.rounding))

    raise InvalidArgumentError(
        f"context must be a RoundingContext or decimal.Context, "
        f"got {type(context).__name__}"
    )


def round_to(value: Decimal, context: RoundingContext) -> Decimal:
    """
    Округление значения до точности и режима контекста.

    Examples:
        >>> round_to(Decimal("2.71828"), RoundingContext(precision=3))
        Decimal('2.72')
    """
    return context.to_decimal_context().plus(value)
