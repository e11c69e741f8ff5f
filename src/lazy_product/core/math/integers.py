"""
Integers — контракт целочисленной арифметики

Модуль задаёт единый integer-контракт, против которого написаны indexer и
сэмплер. Арифметика (+, -, *, //, %, сравнения) выполняется встроенным int,
который в Python всегда произвольной точности. Binding добавляет к нему:
- разбор значения из int или десятичной строки
- контроль разрядности (для fixed-width binding)
- равномерную выборку из включительного диапазона [low, high]

Bindings:
- fixed64: беззнаковое 64-битное целое, переполнение → IntegerWidthExceededError
- arbitrary: без ограничения разрядности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не происходит молча (нет wrap-around)
2. Все значения, возвращаемые parse(), неотрицательны
3. uniform() возвращает значение строго в [low, high]
"""

import random
import re
from dataclasses import dataclass
from typing import Final, Literal, get_args

from lazy_product.core.errors import (
    IntegerWidthExceededError,
    InvalidIntegerLiteralError,
    format_integer,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное значение беззнакового 64-битного целого
UINT64_MAX: Final[int] = 2**64 - 1

# Имена конкретных binding; константы ниже выводятся отсюда
BackendName = Literal["fixed64", "arbitrary"]
FIXED64, ARBITRARY = get_args(BackendName)

AUTO: Final[str] = "auto"
BackendChoice = Literal["auto", BackendName]

# Необязательный знак, затем хотя бы одна десятичная цифра
_DECIMAL_LITERAL: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

# Длина блока при переводе int ↔ десятичная строка. Встроенные int(str) и
# str(int) отказывают после sys.get_int_max_str_digits() цифр (4300 по
# умолчанию), поэтому длинные значения обрабатываются блоками.
DECIMAL_CHUNK_DIGITS: Final[int] = 1000
_DECIMAL_CHUNK_BASE: Final[int] = 10**DECIMAL_CHUNK_DIGITS


# =============================================================================
# ДЕСЯТИЧНОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def decimal_to_int(digits: str) -> int:
    """
    Перевод строки десятичных цифр (без знака) в int любой длины.

    Examples:
        >>> decimal_to_int("0042")
        42
    """
    value = 0
    for start in range(0, len(digits), DECIMAL_CHUNK_DIGITS):
        chunk = digits[start : start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def int_to_decimal(value: int) -> str:
    """
    Десятичная запись int любой длины.

    Examples:
        >>> int_to_decimal(-120)
        '-120'
    """
    if value < 0:
        return "-" + int_to_decimal(-value)
    if value < _DECIMAL_CHUNK_BASE:
        return str(value)

    chunks = []
    while value:
        value, rest = divmod(value, _DECIMAL_CHUNK_BASE)
        chunks.append(rest)

    head = str(chunks[-1])
    return head + "".join(f"{chunk:0{DECIMAL_CHUNK_DIGITS}d}" for chunk in reversed(chunks[:-1]))


# =============================================================================
# РАЗБОР ЗНАЧЕНИЙ
# =============================================================================


def parse_integer(value: int | str) -> int:
    """
    Разбор целого из int или десятичной строки.

    Строки допускают пробелы по краям и знак. bool отвергается, чтобы True
    не превращался молча в индекс 1.

    Args:
        value: int или десятичная строка (например, "18446744073709551616")

    Returns:
        Целое значение (может быть отрицательным)

    Raises:
        InvalidIntegerLiteralError: Если строка не является десятичным числом
        TypeError: Если value не int и не str

    Examples:
        >>> parse_integer(42)
        42
        >>> parse_integer(" 100000000000000000000 ")
        100000000000000000000
    """
    if isinstance(value, bool):
        raise TypeError("bool is not accepted as an integer value")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        literal = value.strip()
        if not _DECIMAL_LITERAL.fullmatch(literal):
            raise InvalidIntegerLiteralError(value)
        sign, digits = (literal[0], literal[1:]) if literal[0] in "+-" else ("+", literal)
        magnitude = decimal_to_int(digits)
        return -magnitude if sign == "-" else magnitude

    raise TypeError(f"Expected int or str, got {type(value).__name__}")


# =============================================================================
# INTEGER BACKENDS
# =============================================================================


@dataclass(frozen=True)
class IntegerBackend:
    """
    Binding целочисленного контракта.

    Attributes:
        name: Имя binding ("fixed64" или "arbitrary")
        max_value: Максимально допустимое значение (None = без ограничения)
    """

    name: str
    max_value: int | None = None

    def fits(self, value: int) -> bool:
        """True если value помещается в разрядность binding."""
        return self.max_value is None or value <= self.max_value

    def ensure_fits(self, value: int) -> int:
        """
        Проверка разрядности.

        Raises:
            IntegerWidthExceededError: Если value > max_value
        """
        if not self.fits(value):
            raise IntegerWidthExceededError(value, self.name, self.max_value)
        return value

    def parse(self, value: int | str) -> int:
        """Разбор значения с проверкой разрядности."""
        return self.ensure_fits(parse_integer(value))

    def uniform(self, rng: random.Random, low: int, high: int) -> int:
        """
        Равномерная выборка из включительного диапазона [low, high].

        random.Random.randint работает с int произвольной точности, поэтому
        оба binding используют один и тот же генератор.

        Raises:
            ValueError: Если low > high
        """
        if low > high:
            raise ValueError(
                f"Empty range: low={format_integer(low)} > high={format_integer(high)}"
            )
        self.ensure_fits(high)
        return rng.randint(low, high)


FIXED64_BACKEND: Final[IntegerBackend] = IntegerBackend(FIXED64, UINT64_MAX)
ARBITRARY_BACKEND: Final[IntegerBackend] = IntegerBackend(ARBITRARY, None)

_BACKENDS: Final[dict[str, IntegerBackend]] = {
    FIXED64: FIXED64_BACKEND,
    ARBITRARY: ARBITRARY_BACKEND,
}


def get_backend(name: str) -> IntegerBackend:
    """
    Поиск binding по имени.

    Raises:
        ValueError: Если имя неизвестно ("auto" здесь не допускается,
            его разрешает select_backend)
    """
    try:
        return _BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown integer backend {name!r}, expected one of {sorted(_BACKENDS)}"
        ) from None


def select_backend(name: str, total_size: int) -> IntegerBackend:
    """
    Выбор binding при построении пространства.

    "auto" выбирает fixed64, если total_size помещается в 64 бита,
    иначе arbitrary.
    """
    if name == AUTO:
        return FIXED64_BACKEND if FIXED64_BACKEND.fits(total_size) else ARBITRARY_BACKEND
    return get_backend(name)
