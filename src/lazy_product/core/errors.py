"""
Errors — таксономия ошибок lazy-product

Все ошибки являются немедленными, не-retryable ошибками валидации:
в чистой арифметике нет транзиентных сбоев.

Каждая ошибка наследует LazyProductError и одновременно builtin-категорию
(ValueError / IndexError / OverflowError / RuntimeError), поэтому вызывающий
код может ловить как базовый класс пакета, так и стандартную категорию.
"""

from typing import Final

# Значения шире этого порога в сообщениях заменяются их разрядностью:
# str(int) для длинных чисел упирается в sys.get_int_max_str_digits()
_MAX_INLINE_BITS: Final[int] = 256


def format_integer(value: int) -> str:
    """
    Представление целого для сообщений об ошибках и логов.

    Examples:
        >>> format_integer(42)
        '42'
        >>> format_integer(2**300)
        '<301-bit integer>'
    """
    if value.bit_length() <= _MAX_INLINE_BITS:
        return str(value)
    sign = "-" if value < 0 else ""
    return f"<{sign}{value.bit_length()}-bit integer>"


class LazyProductError(Exception):
    """Базовый класс для всех ошибок пакета."""

    pass


# =============================================================================
# ОШИБКИ ПРОСТРАНСТВА КОМБИНАЦИЙ
# =============================================================================


class EmptyDomainListError(LazyProductError, ValueError):
    """Список доменов пуст: пространство не определено."""

    def __init__(self) -> None:
        super().__init__("The given list of domains cannot be empty")


class EmptyDomainError(LazyProductError, ValueError):
    """
    Один из доменов пуст.

    Attributes:
        position: Позиция (0-based) пустого домена
    """

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Domain at position {position} cannot be empty")


class IndexOutOfRangeError(LazyProductError, IndexError):
    """
    Индекс вне диапазона [0, total_size).

    Attributes:
        index: Запрошенный индекс
        total_size: Размер пространства
    """

    def __init__(self, index: int, total_size: int) -> None:
        self.index = index
        self.total_size = total_size
        super().__init__(
            f"Index {format_integer(index)} is out of range "
            f"for a space of size {format_integer(total_size)}"
        )


# =============================================================================
# ОШИБКИ СЭМПЛИРОВАНИЯ
# =============================================================================


class InvalidSampleSizeError(LazyProductError, ValueError):
    """Размер выборки вне диапазона [0, total_size]."""

    def __init__(self, sample_size: int, total_size: int) -> None:
        self.sample_size = sample_size
        self.total_size = total_size
        super().__init__(
            f"Sample size {format_integer(sample_size)} is out of range "
            f"[0, {format_integer(total_size)}]"
        )


class ExhaustedSamplerError(LazyProductError, RuntimeError):
    """next() вызван после того, как квота сэмплера исчерпана."""

    def __init__(self, sample_size: int) -> None:
        self.sample_size = sample_size
        super().__init__(f"Sampler already produced all {sample_size} values")


# =============================================================================
# ОШИБКИ ЦЕЛОЧИСЛЕННОГО КОНТРАКТА
# =============================================================================


class IntegerWidthExceededError(LazyProductError, OverflowError):
    """Значение не помещается в разрядность выбранного integer backend."""

    def __init__(self, value: int, backend_name: str, max_value: int) -> None:
        self.value = value
        self.backend_name = backend_name
        self.max_value = max_value
        super().__init__(
            f"Value {format_integer(value)} exceeds the '{backend_name}' backend "
            f"limit {format_integer(max_value)}"
        )


class InvalidIntegerLiteralError(LazyProductError, ValueError):
    """Строка не является десятичной записью целого числа."""

    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(f"Not a base-10 integer literal: {literal!r}")


# =============================================================================
# ОШИБКИ ОБРАТНОГО ОТОБРАЖЕНИЯ (combination → index)
# =============================================================================


class DimensionMismatchError(LazyProductError, ValueError):
    """Длина комбинации не совпадает с размерностью пространства."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Combination has {actual} symbols, the space has {expected} positions"
        )


class UnknownSymbolError(LazyProductError, ValueError):
    """Символ отсутствует в домене своей позиции."""

    def __init__(self, symbol: str, position: int) -> None:
        self.symbol = symbol
        self.position = position
        super().__init__(f"Symbol {symbol!r} is not in the domain at position {position}")
