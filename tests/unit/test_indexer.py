"""
Тесты для Indexer (decode / encode)

Проверяет:
1. Конкретные сценарии декодирования
2. Границы диапазона: 0 и N-1 проходят, -1 и N отвергаются
3. Биекцию и порядок (совпадает с itertools.product)
4. Чистоту decode и обратимость encode
5. Пространства за пределами 64 бит
"""

import itertools

import pytest

from lazy_product.core.domain import build_space
from lazy_product.core.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidIntegerLiteralError,
    UnknownSymbolError,
)
from lazy_product.indexing import decode, encode, resolve_index


@pytest.fixture
def pizza_domains() -> list[list[str]]:
    return [["Thin", "Thick"], ["Marinara", "BBQ"]]


@pytest.fixture
def menu_domains() -> list[list[str]]:
    return [
        ["Thin", "Thick", "Stuffed", "Gluten-free"],
        ["Marinara", "BBQ", "Pesto"],
        ["Mozzarella", "Cheddar", "Vegan"],
        ["Olives", "Peppers", "Onions", "Mushrooms"],
    ]


# =============================================================================
# DECODE
# =============================================================================


class TestDecode:
    """Тесты для decode"""

    def test_pizza_scenario(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)

        assert decode(space, pizza_domains, 0) == ("Thin", "Marinara")
        assert decode(space, pizza_domains, 1) == ("Thin", "BBQ")
        assert decode(space, pizza_domains, 2) == ("Thick", "Marinara")
        assert decode(space, pizza_domains, 3) == ("Thick", "BBQ")

    def test_decimal_string_index(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        assert decode(space, pizza_domains, "3") == ("Thick", "BBQ")

    def test_malformed_string_index(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        with pytest.raises(InvalidIntegerLiteralError):
            decode(space, pizza_domains, "three")

    def test_pure(self, menu_domains: list[list[str]]) -> None:
        """Повторный вызов с тем же индексом даёт тот же результат"""
        space = build_space(menu_domains)
        assert decode(space, menu_domains, 77) == decode(space, menu_domains, 77)

    def test_bijection(self, menu_domains: list[list[str]]) -> None:
        """N индексов → N различных комбинаций, покрывающих всё произведение"""
        space = build_space(menu_domains)
        decoded = {decode(space, menu_domains, i) for i in range(space.total_size)}

        assert len(decoded) == space.total_size == 144
        assert decoded == set(itertools.product(*menu_domains))

    def test_order_matches_product(self, menu_domains: list[list[str]]) -> None:
        """Позиция 0 — старший разряд, как в itertools.product"""
        space = build_space(menu_domains)
        decoded = [decode(space, menu_domains, i) for i in range(space.total_size)]
        assert decoded == list(itertools.product(*menu_domains))


class TestDecodeBoundaries:
    """Границы диапазона индекса"""

    def test_first_and_last_succeed(self, menu_domains: list[list[str]]) -> None:
        space = build_space(menu_domains)
        assert decode(space, menu_domains, 0) == ("Thin", "Marinara", "Mozzarella", "Olives")
        assert decode(space, menu_domains, space.total_size - 1) == (
            "Gluten-free",
            "Pesto",
            "Vegan",
            "Mushrooms",
        )

    def test_total_size_rejected(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            decode(space, pizza_domains, 4)

        assert exc_info.value.index == 4
        assert exc_info.value.total_size == 4

    def test_negative_rejected(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        with pytest.raises(IndexOutOfRangeError):
            decode(space, pizza_domains, -1)

    def test_out_of_range_is_index_error(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        with pytest.raises(IndexError):
            decode(space, pizza_domains, 100)

    def test_resolve_index(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        assert resolve_index(space, " 2 ") == 2
        with pytest.raises(IndexOutOfRangeError):
            resolve_index(space, "-1")


class TestDecodeHugeSpace:
    """Пространство 2**70 (arbitrary binding)"""

    @pytest.fixture
    def binary_domains(self) -> list[list[str]]:
        return [["0", "1"]] * 70

    def test_last_index(self, binary_domains: list[list[str]]) -> None:
        space = build_space(binary_domains)
        assert decode(space, binary_domains, 2**70 - 1) == ("1",) * 70

    def test_most_significant_position(self, binary_domains: list[list[str]]) -> None:
        space = build_space(binary_domains)
        assert decode(space, binary_domains, str(2**69)) == ("1",) + ("0",) * 69

    def test_beyond_total_rejected(self, binary_domains: list[list[str]]) -> None:
        space = build_space(binary_domains)
        with pytest.raises(IndexOutOfRangeError):
            decode(space, binary_domains, str(2**70))


# =============================================================================
# ENCODE
# =============================================================================


class TestEncode:
    """Тесты для encode"""

    def test_pizza(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        assert encode(space, pizza_domains, ("Thick", "BBQ")) == 3
        assert encode(space, pizza_domains, ["Thin", "Marinara"]) == 0

    def test_inverse_of_decode(self, menu_domains: list[list[str]]) -> None:
        space = build_space(menu_domains)
        for index in range(space.total_size):
            assert encode(space, menu_domains, decode(space, menu_domains, index)) == index

    def test_dimension_mismatch(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        with pytest.raises(DimensionMismatchError):
            encode(space, pizza_domains, ("Thin",))

    def test_unknown_symbol(self, pizza_domains: list[list[str]]) -> None:
        space = build_space(pizza_domains)
        with pytest.raises(UnknownSymbolError) as exc_info:
            encode(space, pizza_domains, ("Thin", "Alfredo"))

        assert exc_info.value.position == 1
        assert exc_info.value.symbol == "Alfredo"
