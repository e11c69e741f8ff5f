"""DistinctSampler — потоковая выборка k различных индексов из [0, N).

Однопроходный алгоритм: хранит только последнее выданное значение и счётчик
оставшихся, не материализует диапазон и не ведёт множество посещённых
значений. Подходит для N за пределами 64 бит.

Алгоритм (внутренняя индексация 1-based, last = 0 означает «ещё ничего»):
    range_width = (N - last) // remaining
    offset      ~ U[0, range_width - 1]
    value       = last + offset + 1          # value ∈ [1, N]
    last        = value
    remaining  -= 1

Оставшийся диапазон делится на remaining равных срезов, выборка идёт только
в первом. Это даёт строгую монотонность и покрытие, но не доказанно
равномерную выборку без возвращения.

Смещение на единицу: по умолчанию наружу отдаётся value - 1 (0-based,
[0, N)); one_based=True отдаёт value как есть ([1, N]).
"""

import logging
import random

from lazy_product.core.errors import (
    ExhaustedSamplerError,
    InvalidSampleSizeError,
    format_integer,
)
from lazy_product.core.math.integers import ARBITRARY_BACKEND, IntegerBackend

logger = logging.getLogger(__name__)


class DistinctSampler:
    """Потоковый k-of-N сэмплер со строго возрастающим выходом.

    Экземпляр принадлежит одному вызывающему: внутреннее состояние мутирует
    при каждом next() и не защищено блокировками.
    """

    def __init__(
        self,
        sample_size: int,
        upper_bound: int,
        *,
        rng: random.Random | None = None,
        backend: IntegerBackend = ARBITRARY_BACKEND,
        one_based: bool = False,
    ):
        """
        Args:
            sample_size: k, число значений для выдачи
            upper_bound: N, верхняя граница (exclusive для 0-based выхода)
            rng: генератор; по умолчанию random.Random() с энтропией ОС
            backend: integer binding для равномерной выборки
            one_based: выдавать значения в [1, N] вместо [0, N)

        Raises:
            InvalidSampleSizeError: если sample_size < 0 или sample_size > upper_bound
        """
        if sample_size < 0 or sample_size > upper_bound:
            raise InvalidSampleSizeError(sample_size, upper_bound)

        self.sample_size = sample_size
        self.upper_bound = upper_bound
        self.one_based = one_based
        self._backend = backend
        self._rng = rng if rng is not None else random.Random()

        self._remaining = sample_size
        self._last = 0

        logger.debug(
            "Created distinct sampler: sample_size=%d upper_bound=%s one_based=%s",
            sample_size,
            format_integer(upper_bound),
            one_based,
        )

    @property
    def remaining(self) -> int:
        """Сколько значений ещё может быть выдано."""
        return self._remaining

    def has_next(self) -> bool:
        return self._remaining > 0

    def next(self) -> int:
        """
        Следующее значение строго возрастающей последовательности.

        Raises:
            ExhaustedSamplerError: если все sample_size значений уже выданы
        """
        if self._remaining == 0:
            raise ExhaustedSamplerError(self.sample_size)

        # upper_bound - last >= remaining, поэтому range_width >= 1
        range_width = (self.upper_bound - self._last) // self._remaining
        offset = self._backend.uniform(self._rng, 0, range_width - 1)
        value = self._last + offset + 1

        self._last = value
        self._remaining -= 1

        return value if self.one_based else value - 1

    def __iter__(self) -> "DistinctSampler":
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __len__(self) -> int:
        return self._remaining
