"""
SampleProducer — выборка различных комбинаций из пространства

Оркеструет сэмплер индексов и Indexer:
- sample_size == total_size → все индексы 0..N-1 по порядку (сэмплер не нужен)
- иначе → сэмплер выбранной стратегии, каждый индекс декодируется

Результат: ровно sample_size различных комбинаций в порядке возрастания индекса.
"""

import logging
from collections.abc import Iterator, Sequence

from lazy_product.core.domain.space import CombinationSpace, Domain
from lazy_product.core.errors import (
    EmptyDomainListError,
    InvalidSampleSizeError,
    format_integer,
)
from lazy_product.core.math.integers import parse_integer
from lazy_product.indexing.indexer import Combination, decode
from lazy_product.sampling.config import SamplingConfig, SamplingStrategy
from lazy_product.sampling.distinct_sampler import DistinctSampler
from lazy_product.sampling.rejection_sampler import RejectionSampler

logger = logging.getLogger(__name__)


def make_sampler(
    space: CombinationSpace,
    sample_size: int,
    config: SamplingConfig | None = None,
) -> DistinctSampler | RejectionSampler:
    """
    Сэмплер индексов [0, total_size) согласно стратегии конфигурации.

    Raises:
        InvalidSampleSizeError: Если sample_size вне [0, total_size]
    """
    config = config or SamplingConfig()
    sampler_cls = (
        RejectionSampler if config.strategy == SamplingStrategy.REJECTION else DistinctSampler
    )
    logger.debug(
        "Using %s for %d of %s",
        sampler_cls.__name__,
        sample_size,
        format_integer(space.total_size),
    )
    return sampler_cls(
        sample_size,
        space.total_size,
        rng=config.make_rng(),
        backend=space.backend,
    )


def iter_sample_indices(
    space: CombinationSpace,
    sample_size: int | str,
    config: SamplingConfig | None = None,
) -> Iterator[int]:
    """
    Возрастающая последовательность sample_size различных индексов.

    Валидация выполняется сразу при вызове, а не при первой итерации.

    Raises:
        InvalidSampleSizeError: Если sample_size < 0 или sample_size > total_size
        InvalidIntegerLiteralError: Если строка не является десятичным числом
    """
    count = parse_integer(sample_size)
    if count < 0 or count > space.total_size:
        raise InvalidSampleSizeError(count, space.total_size)

    if count == space.total_size:
        # Выборка совпадает со всем пространством
        return iter(range(space.total_size))

    return make_sampler(space, count, config)


def iter_samples(
    space: CombinationSpace,
    domains: Sequence[Domain],
    sample_size: int | str,
    config: SamplingConfig | None = None,
) -> Iterator[Combination]:
    """
    Ленивая форма generate_samples: комбинации декодируются по мере итерации.

    Raises:
        EmptyDomainListError: Если domains пуст
        InvalidSampleSizeError: Если sample_size вне [0, total_size]
    """
    if len(domains) == 0:
        raise EmptyDomainListError()

    indices = iter_sample_indices(space, sample_size, config)
    return (decode(space, domains, index) for index in indices)


def generate_samples(
    space: CombinationSpace,
    domains: Sequence[Domain],
    sample_size: int | str,
    config: SamplingConfig | None = None,
) -> list[Combination]:
    """
    Ровно sample_size различных комбинаций в порядке возрастания индекса.

    Args:
        space: Пространство, построенное из domains
        domains: Домены
        sample_size: Размер выборки (int или десятичная строка)
        config: Конфигурация сэмплирования (default: SamplingConfig())

    Returns:
        Список комбинаций

    Raises:
        EmptyDomainListError: Если domains пуст
        InvalidSampleSizeError: Если sample_size вне [0, total_size]
    """
    return list(iter_samples(space, domains, sample_size, config))
