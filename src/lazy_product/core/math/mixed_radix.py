"""
Mixed Radix — позиционная система со смешанным основанием

Индекс пространства записывается цифрами, у которых основание i-й позиции
равно размеру i-го домена, а вес позиции равен произведению размеров всех
доменов справа от неё. Позиция 0 старшая.

ФОРМУЛЫ:
    place_value[i] = Π_{j=i+1}^{L-1} modulus[j],   place_value[L-1] = 1
    total_size     = Π_{i=0}^{L-1} modulus[i]
    digit[i]       = (index // place_value[i]) % modulus[i]
    index          = Σ digit[i] * place_value[i]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все промежуточные значения являются точными int (без усечения разрядности)
2. digit[i] < modulus[i] для любого индекса из [0, total_size)
3. decode/encode взаимно обратны на [0, total_size)
"""

from collections.abc import Sequence

from lazy_product.core.math.integers import ARBITRARY_BACKEND, IntegerBackend

# =============================================================================
# ВЕСА ПОЗИЦИЙ
# =============================================================================


def compute_place_values(
    moduli: Sequence[int],
    backend: IntegerBackend = ARBITRARY_BACKEND,
) -> tuple[tuple[int, ...], int]:
    """
    Вычисление весов позиций и общего размера.

    Проход справа налево с накапливаемым factor. Для fixed-width binding
    factor проверяется после каждого умножения.

    Args:
        moduli: Основания позиций (все >= 1)
        backend: Integer binding для контроля разрядности

    Returns:
        (place_values, total_size)

    Raises:
        IntegerWidthExceededError: Если factor выходит за разрядность binding

    Examples:
        >>> compute_place_values([2, 3, 4])
        ((12, 4, 1), 24)
    """
    place_values = [0] * len(moduli)
    factor = 1

    for i in range(len(moduli) - 1, -1, -1):
        place_values[i] = factor
        factor = backend.ensure_fits(factor * moduli[i])

    return tuple(place_values), factor


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def to_digits(
    index: int,
    place_values: Sequence[int],
    moduli: Sequence[int],
) -> list[int]:
    """
    Разложение индекса на цифры смешанного основания.

    Диапазон индекса не проверяется: это задача вызывающего кода.

    Examples:
        >>> to_digits(23, (12, 4, 1), (2, 3, 4))
        [1, 2, 3]
    """
    return [(index // weight) % base for weight, base in zip(place_values, moduli)]


def from_digits(digits: Sequence[int], place_values: Sequence[int]) -> int:
    """
    Сборка индекса из цифр смешанного основания.

    Examples:
        >>> from_digits([1, 2, 3], (12, 4, 1))
        23
    """
    return sum(digit * weight for digit, weight in zip(digits, place_values))
