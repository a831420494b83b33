"""
Errors — Иерархия исключений decmath

Собственные исключения библиотеки. Арифметические сбои самого decimal
(decimal.DivisionByZero, decimal.Overflow, decimal.InvalidOperation)
НЕ оборачиваются и пропагируют к вызывающему коду без изменений.
"""


class DecimalMathError(ArithmeticError):
    """Базовое исключение decmath."""

    pass


class InvalidArgumentError(DecimalMathError, ValueError):
    """
    Аргумент вне области определения функции.

    Возбуждается ДО начала любой итерации:
    - ln от значения <= 0
    - корень из отрицательного значения, порядок корня < 1
    - arcsin/arccos вне [-1, 1]
    - NaN/Infinity или значение неподдерживаемого типа
    """

    pass
