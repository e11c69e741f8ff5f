"""
Indexer — отображение индекс ↔ комбинация

decode: индекс → комбинация за O(L) через извлечение цифр смешанного
основания. encode: обратное отображение комбинация → индекс.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Диапазон индекса проверяется ДО вычислений (сравнением точных int)
2. decode есть биекция [0, total_size) → декартово произведение доменов
3. encode(decode(i)) == i для любого i из [0, total_size)
4. Чистые функции: нет побочных эффектов, входы не мутируют
"""

from collections.abc import Sequence

from lazy_product.core.domain.space import CombinationSpace, Domain
from lazy_product.core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    UnknownSymbolError,
)
from lazy_product.core.math.integers import parse_integer
from lazy_product.core.math.mixed_radix import from_digits, to_digits

Combination = tuple[str, ...]


# =============================================================================
# ВАЛИДАЦИЯ ИНДЕКСА
# =============================================================================


def resolve_index(space: CombinationSpace, index: int | str) -> int:
    """
    Разбор и проверка индекса.

    Args:
        space: Пространство комбинаций
        index: int или десятичная строка

    Returns:
        Индекс как int из [0, total_size)

    Raises:
        InvalidIntegerLiteralError: Если строка не является десятичным числом
        IndexOutOfRangeError: Если index < 0 или index >= total_size
    """
    # Разрядность binding здесь не проверяется: слишком большой индекс
    # означает out of range, а не переполнение
    value = parse_integer(index)
    if value < 0 or value >= space.total_size:
        raise IndexOutOfRangeError(value, space.total_size)
    return value


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def decode(space: CombinationSpace, domains: Sequence[Domain], index: int | str) -> Combination:
    """
    Комбинация, соответствующая индексу.

    digit[i] = (index // place_values[i]) % moduli[i];  symbol[i] = domains[i][digit[i]]

    Args:
        space: Пространство, построенное из тех же domains
        domains: Домены
        index: Индекс из [0, total_size) (int или десятичная строка)

    Returns:
        Кортеж из L символов

    Raises:
        IndexOutOfRangeError: Если индекс вне диапазона

    Examples:
        >>> domains = [["Thin", "Thick"], ["Marinara", "BBQ"]]
        >>> decode(build_space(domains), domains, 3)
        ('Thick', 'BBQ')
    """
    value = resolve_index(space, index)
    digits = to_digits(value, space.place_values, space.moduli)
    return tuple(domain[digit] for domain, digit in zip(domains, digits))


def encode(space: CombinationSpace, domains: Sequence[Domain], combination: Sequence[str]) -> int:
    """
    Индекс комбинации (обратное к decode).

    Если символ встречается в домене несколько раз, берётся первое вхождение.

    Raises:
        DimensionMismatchError: Если len(combination) != L
        UnknownSymbolError: Если символа нет в домене своей позиции
    """
    if len(combination) != space.dimensions:
        raise DimensionMismatchError(space.dimensions, len(combination))

    digits = []
    for position, (domain, symbol) in enumerate(zip(domains, combination)):
        try:
            digits.append(list(domain).index(symbol))
        except ValueError:
            raise UnknownSymbolError(symbol, position) from None

    return from_digits(digits, space.place_values)
