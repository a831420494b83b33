"""
Constants — Неизменяемые константы уровня процесса

PI задаётся литералом (102 значащие цифры) и никогда не пересчитывается.
Точность тригонометрии ограничена этим литералом: при precision выше
~95 цифр последние знаки результата не гарантируются.
"""

from decimal import Decimal
from typing import Final

from decmath.context import RoundingContext, as_rounding_context, round_to

PI: Final[Decimal] = Decimal(
    "3.1415926535897932384626433832795028841971693993751"
    "0582097494459230781640628620899862803482534211706798"
)


def pi(context: RoundingContext) -> Decimal:
    """
    PI, округлённое до контекста.

    Examples:
        >>> pi(RoundingContext(precision=5))
        Decimal('3.1416')
    """
    return round_to(PI, as_rounding_context(context))
