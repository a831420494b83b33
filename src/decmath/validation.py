"""
Validation — Проверка входных значений

Все публичные функции принимают Decimal или int. float и str отклоняются:
float несёт двоичную погрешность, а разбор числовых литералов не входит
в задачи библиотеки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Infinity никогда не попадают в итерационные ядра
2. Нарушение области определения → InvalidArgumentError до вычислений
3. Преобразование int → Decimal точное (не зависит от контекста)
"""

from decimal import Decimal

from decmath.errors import InvalidArgumentError

_ZERO = Decimal(0)


# =============================================================================
# ПРЕОБРАЗОВАНИЕ ТИПОВ
# =============================================================================


def to_decimal(value: Decimal | int, name: str) -> Decimal:
    """
    Приведение аргумента к конечному Decimal.

    Args:
        value: Decimal или int
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Decimal с тем же значением (int конвертируется точно)

    Raises:
        InvalidArgumentError: Если тип не поддерживается или значение NaN/Inf

    Examples:
        >>> to_decimal(5, "x")
        Decimal('5')
        >>> to_decimal(Decimal("2.5"), "x")
        Decimal('2.5')
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a Decimal or int, got bool")

    if isinstance(value, int):
        return Decimal(value)

    if not isinstance(value, Decimal):
        raise InvalidArgumentError(
            f"{name} must be a Decimal or int, got {type(value).__name__}"
        )

    validate_finite(value, name)
    return value


def to_int(value: int, name: str) -> int:
    """Приведение целочисленного параметра (порядок корня, показатель степени)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    return value


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: Decimal, name: str) -> None:
    """
    Валидация, что значение конечное (не NaN, не Infinity).

    Raises:
        InvalidArgumentError: Если value NaN или Infinity
    """
    if not value.is_finite():
        raise InvalidArgumentError(
            f"{name} must be a finite Decimal (not NaN/Inf), got {value}"
        )


def validate_positive(value: Decimal, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Raises:
        InvalidArgumentError: Если value <= 0
    """
    validate_finite(value, name)

    if value <= _ZERO:
        raise InvalidArgumentError(f"{name} must be positive (> 0), got {value}")


def validate_non_negative(value: Decimal, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Raises:
        InvalidArgumentError: Если value < 0
    """
    validate_finite(value, name)

    if value < _ZERO:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: Decimal,
    name: str,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> None:
    """
    Валидация, что значение в заданном замкнутом диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        InvalidArgumentError: Если value вне диапазона или NaN/Inf
    """
    validate_finite(value, name)

    if min_value is not None and value < min_value:
        raise InvalidArgumentError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise InvalidArgumentError(f"{name} must be <= {max_value}, got {value}")
