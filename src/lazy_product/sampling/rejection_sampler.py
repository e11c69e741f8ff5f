"""RejectionSampler — выборка с отбраковкой повторов для малых выборок.

Индексы тянутся равномерно из [0, N) с возвращением в set, пока не наберётся
k различных, затем сортируются. Выборка точно равномерная, память O(k).
Ожидаемое число попыток растёт как N * (H_N - H_{N-k}), поэтому стратегия
разумна только при k заметно меньше N.

Интерфейс совпадает с DistinctSampler: has_next() / next() / итерация.
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


class RejectionSampler:
    """k различных индексов из [0, N) через set + sort."""

    def __init__(
        self,
        sample_size: int,
        upper_bound: int,
        *,
        rng: random.Random | None = None,
        backend: IntegerBackend = ARBITRARY_BACKEND,
        one_based: bool = False,
    ):
        if sample_size < 0 or sample_size > upper_bound:
            raise InvalidSampleSizeError(sample_size, upper_bound)

        self.sample_size = sample_size
        self.upper_bound = upper_bound
        self.one_based = one_based
        rng = rng if rng is not None else random.Random()

        candidates: set[int] = set()
        draws = 0
        while len(candidates) < sample_size:
            candidates.add(backend.uniform(rng, 0, upper_bound - 1))
            draws += 1

        shift = 1 if one_based else 0
        # Обратный порядок: pop() с конца списка выдаёт значения по возрастанию
        self._pending = sorted((value + shift for value in candidates), reverse=True)

        logger.debug(
            "Rejection sampler collected %d distinct values in %d draws (upper_bound=%s)",
            sample_size,
            draws,
            format_integer(upper_bound),
        )

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def has_next(self) -> bool:
        return bool(self._pending)

    def next(self) -> int:
        """
        Raises:
            ExhaustedSamplerError: если все sample_size значений уже выданы
        """
        if not self._pending:
            raise ExhaustedSamplerError(self.sample_size)
        return self._pending.pop()

    def __iter__(self) -> "RejectionSampler":
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __len__(self) -> int:
        return len(self._pending)
