"""
Errors — Иерархия исключений восстановления секрета

Все ошибки терминальны для текущей попытки восстановления: ничего не
повторяется внутри, частичный результат не формируется.

Две ветви:
- Арифметические (Rational): ZeroDenominator, DivideByZero,
  ZeroHasNoInverse, NotAnInteger. Наследуют ArithmeticError.
- Входные данные: InvalidBase, InvalidDigit, PointCountMismatch,
  InvalidThreshold, DuplicateAbscissa. Наследуют ValueError через InvalidInput.

ContractViolation — данные не соответствуют JSON Schema контракту.
"""


class ShareRecoveryError(Exception):
    """Базовое исключение для всех ошибок восстановления."""

    pass


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class RationalArithmeticError(ShareRecoveryError, ArithmeticError):
    """Ошибка точной рациональной арифметики."""

    pass


class ZeroDenominator(RationalArithmeticError, ZeroDivisionError):
    """Rational сконструирован со знаменателем 0."""

    pass


class DivideByZero(RationalArithmeticError, ZeroDivisionError):
    """Деление на Rational с нулевым числителем."""

    pass


class ZeroHasNoInverse(RationalArithmeticError, ZeroDivisionError):
    """Обращение нуля."""

    pass


class NotAnInteger(RationalArithmeticError):
    """Попытка извлечь целое из дробного значения."""

    pass


# =============================================================================
# ВХОДНЫЕ ДАННЫЕ
# =============================================================================


class InvalidInput(ShareRecoveryError, ValueError):
    """Некорректный набор долей или параметров восстановления."""

    pass


class InvalidBase(InvalidInput):
    """Основание системы счисления вне [2, 36]."""

    pass


class InvalidDigit(InvalidInput):
    """Символ вне алфавита заявленного основания."""

    pass


class PointCountMismatch(InvalidInput):
    """Заявленное n не совпадает с фактическим числом точек."""

    pass


class InvalidThreshold(InvalidInput):
    """
    Порог k вне [1, point_count] либо некорректное подмножество точек.
    """

    pass


class DuplicateAbscissa(InvalidInput):
    """
    Две точки с одинаковым x.

    Интерполяция при этом не определена: произведение (x_i - x_j) обнуляется.
    Проверяется явно до построения многочлена.
    """

    pass


# =============================================================================
# КОНТРАКТЫ
# =============================================================================


class ContractViolation(ShareRecoveryError):
    """
    Данные не соответствуют JSON Schema контракту.

    Исходная jsonschema.ValidationError доступна через __cause__.
    """

    pass
