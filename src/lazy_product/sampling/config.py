"""Конфигурация сэмплирования: стратегия, integer binding, seed."""

import random
from dataclasses import dataclass
from enum import Enum

from lazy_product.core.math.integers import AUTO


class SamplingStrategy(str, Enum):
    """Стратегия выбора различных индексов.

    STREAMING: однопроходный сэмплер, O(1) дополнительной памяти (default)
    REJECTION: выборка с возвращением в set до k различных значений + сортировка
    """

    STREAMING = "streaming"
    REJECTION = "rejection"


@dataclass(frozen=True)
class SamplingConfig:
    """Конфигурация SampleProducer.

    seed=None означает свежую энтропию ОС для каждого сэмплера;
    детерминизм между запусками не гарантируется.
    """

    strategy: SamplingStrategy = SamplingStrategy.STREAMING
    backend: str = AUTO
    seed: int | None = None

    def make_rng(self) -> random.Random:
        """Новый генератор для одного сэмплера."""
        return random.Random(self.seed)
