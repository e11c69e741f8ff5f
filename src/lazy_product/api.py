"""
Public API — операции для внешних потребителей (CLI, экспорт)

Stateless функции поверх CombinationSpace, Indexer и SampleProducer.
Индексы и размеры принимаются как int или десятичная строка.
"""

import logging
from collections.abc import Sequence
from typing import Any

from lazy_product.core.contracts import validate_sample_result
from lazy_product.core.domain.space import CombinationSpace, Domain, build_space
from lazy_product.core.errors import EmptyDomainListError, format_integer
from lazy_product.core.math.integers import AUTO, int_to_decimal
from lazy_product.indexing.indexer import Combination, decode, encode
from lazy_product.sampling import producer
from lazy_product.sampling.config import SamplingConfig
from lazy_product.sampling.request import SampleRequest

logger = logging.getLogger(__name__)

RESULT_SCHEMA_VERSION = "1"


def compute_space(domains: Sequence[Domain], backend: str = AUTO) -> CombinationSpace:
    """
    Пространство комбинаций для списка доменов.

    Raises:
        EmptyDomainListError: Если domains пуст
        EmptyDomainError: Если какой-либо домен пуст
        IntegerWidthExceededError: Если backend="fixed64" и размер не помещается
    """
    return build_space(domains, backend)


def entry_at(domains: Sequence[Domain], index: int | str, backend: str = AUTO) -> Combination:
    """
    Комбинация с заданным индексом.

    Examples:
        >>> entry_at([["Thin", "Thick"], ["Marinara", "BBQ"]], 0)
        ('Thin', 'Marinara')

    Raises:
        EmptyDomainListError / EmptyDomainError: Если домены некорректны
        IndexOutOfRangeError: Если index вне [0, total_size)
    """
    space = build_space(domains, backend)
    return decode(space, domains, index)


def index_of(domains: Sequence[Domain], combination: Sequence[str], backend: str = AUTO) -> int:
    """Индекс комбинации (обратное к entry_at)."""
    space = build_space(domains, backend)
    return encode(space, domains, combination)


def generate_samples(
    domains: Sequence[Domain],
    sample_size: int | str,
    config: SamplingConfig | None = None,
) -> list[Combination]:
    """
    sample_size различных комбинаций в порядке возрастания индекса.

    Raises:
        EmptyDomainListError: Если domains пуст
        EmptyDomainError: Если какой-либо домен пуст
        InvalidSampleSizeError: Если sample_size вне [0, total_size]
    """
    if len(domains) == 0:
        raise EmptyDomainListError()

    config = config or SamplingConfig()
    space = build_space(domains, config.backend)
    return producer.generate_samples(space, domains, sample_size, config)


def max_size(domains: Sequence[Domain]) -> int:
    """
    Произведение размеров доменов без построения пространства.

    Пустой список даёт 1 (пустое произведение), пустой домен даёт 0.
    """
    size = 1
    for domain in domains:
        size *= len(domain)
    return size


def run_request(document: dict[str, Any]) -> dict[str, Any]:
    """
    Обработка JSON документа sample_request → sample_result.

    Большие значения (индексы, размеры) в результате записаны десятичными строками.

    Raises:
        jsonschema.ValidationError: Если документ не соответствует контракту
        InvalidSampleSizeError: Если sample_size > total_size
    """
    request = SampleRequest.from_document(document)
    space = build_space(request.domains, request.backend)
    indices = producer.iter_sample_indices(space, request.sample_size, request.to_config())

    samples = [
        {
            "index": int_to_decimal(index),
            "combination": list(decode(space, request.domains, index)),
        }
        for index in indices
    ]

    result = {
        "schema_version": RESULT_SCHEMA_VERSION,
        "total_size": int_to_decimal(space.total_size),
        "sample_size": int_to_decimal(request.sample_size),
        "backend": space.integer_backend,
        "samples": samples,
    }
    validate_sample_result(result)

    logger.debug(
        "Processed sample request: %s of %s",
        format_integer(request.sample_size),
        format_integer(space.total_size),
    )
    return result
