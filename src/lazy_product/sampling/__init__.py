"""Sampling — выборка различных индексов и комбинаций из пространства.

- DistinctSampler: потоковый k-of-N сэмплер, O(1) дополнительной памяти
- RejectionSampler: set + sort для малых выборок
- SampleProducer: generate_samples / iter_samples
"""

from .config import SamplingConfig, SamplingStrategy
from .distinct_sampler import DistinctSampler
from .producer import generate_samples, iter_sample_indices, iter_samples, make_sampler
from .rejection_sampler import RejectionSampler
from .request import SampleRequest

__all__ = [
    "SamplingConfig",
    "SamplingStrategy",
    "DistinctSampler",
    "RejectionSampler",
    "SampleRequest",
    "make_sampler",
    "iter_sample_indices",
    "iter_samples",
    "generate_samples",
]
