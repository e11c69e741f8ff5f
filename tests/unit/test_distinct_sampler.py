"""
Тесты для DistinctSampler (потоковый k-of-N сэмплер)

Проверяемые свойства:
1. Строгая монотонность и различность значений
2. Все значения в [0, N) (0-based) или [1, N] (one_based=True)
3. Ровно k значений, затем ExhaustedSamplerError
4. Валидация k (0 <= k <= N)
5. Крайние выборы генератора (всегда минимум / всегда максимум)
6. Пространства за пределами 64 бит

Равномерность выборки не гарантируется алгоритмом; проверяется только
достижимость всех значений при k = 1.
"""

import random

import pytest

from lazy_product.core.errors import ExhaustedSamplerError, InvalidSampleSizeError
from lazy_product.core.math.integers import FIXED64_BACKEND, UINT64_MAX
from lazy_product.sampling import DistinctSampler


class MaxRandom(random.Random):
    """Генератор, всегда выбирающий верхнюю границу диапазона"""

    def randint(self, a: int, b: int) -> int:
        return b


class MinRandom(random.Random):
    """Генератор, всегда выбирающий нижнюю границу диапазона"""

    def randint(self, a: int, b: int) -> int:
        return a


def draw_all(sampler: DistinctSampler) -> list[int]:
    values = []
    while sampler.has_next():
        values.append(sampler.next())
    return values


# =============================================================================
# СВОЙСТВА ВЫХОДА
# =============================================================================


class TestDistinctSamplerOutput:
    """Монотонность, диапазон, количество"""

    @pytest.mark.parametrize("seed", range(20))
    def test_ten_of_144(self, seed: int) -> None:
        values = draw_all(DistinctSampler(10, 144, rng=random.Random(seed)))

        assert len(values) == 10
        assert all(a < b for a, b in zip(values, values[1:]))
        assert all(0 <= v < 144 for v in values)

    def test_exhaustive_small_grid(self) -> None:
        """Все k <= N <= 12 и несколько seed: инварианты выполняются"""
        for n in range(0, 13):
            for k in range(0, n + 1):
                for seed in range(5):
                    values = draw_all(DistinctSampler(k, n, rng=random.Random(seed)))
                    assert len(values) == k
                    assert len(set(values)) == k
                    assert values == sorted(values)
                    assert all(0 <= v < n for v in values)

    def test_full_range_yields_every_index(self) -> None:
        """k == N → range_width == 1 на каждом шаге → 0..N-1"""
        assert draw_all(DistinctSampler(25, 25, rng=random.Random(3))) == list(range(25))

    def test_single_value_from_single_slot(self) -> None:
        assert draw_all(DistinctSampler(1, 1)) == [0]

    def test_always_max_stays_in_range(self) -> None:
        """Генератор на верхней границе не выводит значения за N - 1"""
        values = draw_all(DistinctSampler(1, 10, rng=MaxRandom()))
        assert values == [9]

        values = draw_all(DistinctSampler(4, 10, rng=MaxRandom()))
        assert all(0 <= v < 10 for v in values)
        assert values == sorted(set(values))
        assert values[-1] == 9

    def test_always_min_yields_prefix(self) -> None:
        """Генератор на нижней границе → 0, 1, ..., k-1"""
        assert draw_all(DistinctSampler(5, 1000, rng=MinRandom())) == [0, 1, 2, 3, 4]

    def test_every_value_reachable_for_single_draw(self) -> None:
        """k = 1: любое значение из [0, N) достижимо"""
        rng = random.Random(11)
        seen = {DistinctSampler(1, 10, rng=rng).next() for _ in range(2000)}
        assert seen == set(range(10))

    def test_same_seed_same_sequence(self) -> None:
        a = draw_all(DistinctSampler(8, 10**6, rng=random.Random(42)))
        b = draw_all(DistinctSampler(8, 10**6, rng=random.Random(42)))
        assert a == b

    def test_default_rng_works(self) -> None:
        """Без rng используется random.Random() с энтропией ОС"""
        values = draw_all(DistinctSampler(50, 100))
        assert len(set(values)) == 50


# =============================================================================
# СМЕЩЕНИЕ НА ЕДИНИЦУ
# =============================================================================


class TestIndexOrigin:
    """0-based (default) и 1-based выход"""

    def test_zero_based_default(self) -> None:
        sampler = DistinctSampler(5, 5, rng=random.Random(0))
        assert draw_all(sampler) == [0, 1, 2, 3, 4]

    def test_one_based(self) -> None:
        sampler = DistinctSampler(5, 5, rng=random.Random(0), one_based=True)
        assert draw_all(sampler) == [1, 2, 3, 4, 5]

    def test_one_based_range(self) -> None:
        for seed in range(20):
            values = draw_all(DistinctSampler(7, 30, rng=random.Random(seed), one_based=True))
            assert all(1 <= v <= 30 for v in values)

    def test_conventions_differ_by_exactly_one(self) -> None:
        zero = draw_all(DistinctSampler(6, 50, rng=random.Random(9)))
        one = draw_all(DistinctSampler(6, 50, rng=random.Random(9), one_based=True))
        assert [v + 1 for v in zero] == one

    def test_one_based_max_rng_reaches_n(self) -> None:
        assert draw_all(DistinctSampler(1, 10, rng=MaxRandom(), one_based=True)) == [10]


# =============================================================================
# ИСЧЕРПАНИЕ И ВАЛИДАЦИЯ
# =============================================================================


class TestDistinctSamplerLifecycle:
    """Исчерпание, итерация, валидация k"""

    def test_exhausted_raises(self) -> None:
        sampler = DistinctSampler(3, 10, rng=random.Random(0))
        draw_all(sampler)

        assert not sampler.has_next()
        with pytest.raises(ExhaustedSamplerError):
            sampler.next()

    def test_exhausted_is_runtime_error(self) -> None:
        sampler = DistinctSampler(0, 10)
        with pytest.raises(RuntimeError):
            sampler.next()

    def test_zero_sample(self) -> None:
        sampler = DistinctSampler(0, 0)
        assert not sampler.has_next()
        assert list(sampler) == []

    def test_iterator_protocol(self) -> None:
        sampler = DistinctSampler(4, 20, rng=random.Random(5))
        values = list(sampler)

        assert len(values) == 4
        assert list(sampler) == []

    def test_len_counts_remaining(self) -> None:
        sampler = DistinctSampler(3, 10, rng=random.Random(0))
        assert len(sampler) == 3
        sampler.next()
        assert len(sampler) == 2
        assert sampler.remaining == 2

    def test_sample_larger_than_range(self) -> None:
        with pytest.raises(InvalidSampleSizeError):
            DistinctSampler(11, 10)

    def test_negative_sample(self) -> None:
        with pytest.raises(InvalidSampleSizeError):
            DistinctSampler(-1, 10)


# =============================================================================
# БОЛЬШИЕ ПРОСТРАНСТВА
# =============================================================================


class TestDistinctSamplerHugeRange:
    """N за пределами и на границе 64 бит"""

    def test_beyond_64_bits(self) -> None:
        n = 2**100
        values = draw_all(DistinctSampler(5, n, rng=random.Random(1)))

        assert len(values) == 5
        assert all(0 <= v < n for v in values)
        assert values == sorted(set(values))

    def test_fixed64_at_boundary(self) -> None:
        values = draw_all(
            DistinctSampler(3, UINT64_MAX, rng=random.Random(2), backend=FIXED64_BACKEND)
        )
        assert all(0 <= v < UINT64_MAX for v in values)
