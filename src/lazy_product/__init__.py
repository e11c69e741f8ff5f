"""
lazy-product — ленивое декартово произведение конечных доменов.

Индексация произвольной комбинации за O(L) и выборка k различных комбинаций
с памятью O(k), без материализации пространства.
"""

import logging

from lazy_product.api import (
    compute_space,
    entry_at,
    generate_samples,
    index_of,
    max_size,
    run_request,
)
from lazy_product.core.domain import CombinationSpace
from lazy_product.core.errors import (
    DimensionMismatchError,
    EmptyDomainError,
    EmptyDomainListError,
    ExhaustedSamplerError,
    IndexOutOfRangeError,
    IntegerWidthExceededError,
    InvalidIntegerLiteralError,
    InvalidSampleSizeError,
    LazyProductError,
    UnknownSymbolError,
)
from lazy_product.sampling import (
    DistinctSampler,
    RejectionSampler,
    SampleRequest,
    SamplingConfig,
    SamplingStrategy,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.1.0"

__all__ = [
    # API
    "compute_space",
    "entry_at",
    "generate_samples",
    "index_of",
    "max_size",
    "run_request",
    # Models
    "CombinationSpace",
    "SampleRequest",
    "SamplingConfig",
    "SamplingStrategy",
    "DistinctSampler",
    "RejectionSampler",
    # Errors
    "LazyProductError",
    "EmptyDomainListError",
    "EmptyDomainError",
    "IndexOutOfRangeError",
    "InvalidSampleSizeError",
    "ExhaustedSamplerError",
    "IntegerWidthExceededError",
    "InvalidIntegerLiteralError",
    "DimensionMismatchError",
    "UnknownSymbolError",
]
