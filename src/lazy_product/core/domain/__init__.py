"""
Domain models and value objects.

Contains the CombinationSpace model and its builder.
"""

from lazy_product.core.domain.space import CombinationSpace, Domain, build_space

__all__ = [
    "CombinationSpace",
    "Domain",
    "build_space",
]
