"""
Core math modules для lazy-product

Целочисленный контракт и позиционная система со смешанным основанием.
"""

# Integer Contract
from lazy_product.core.math.integers import (
    ARBITRARY,
    ARBITRARY_BACKEND,
    AUTO,
    FIXED64,
    FIXED64_BACKEND,
    UINT64_MAX,
    BackendChoice,
    BackendName,
    IntegerBackend,
    decimal_to_int,
    get_backend,
    int_to_decimal,
    parse_integer,
    select_backend,
)

# Mixed Radix
from lazy_product.core.math.mixed_radix import (
    compute_place_values,
    from_digits,
    to_digits,
)

__all__ = [
    # Integer Contract — Constants
    "ARBITRARY",
    "AUTO",
    "FIXED64",
    "UINT64_MAX",
    "BackendName",
    "BackendChoice",
    # Integer Contract — Backends
    "IntegerBackend",
    "ARBITRARY_BACKEND",
    "FIXED64_BACKEND",
    "get_backend",
    "select_backend",
    "parse_integer",
    "decimal_to_int",
    "int_to_decimal",
    # Mixed Radix
    "compute_place_values",
    "to_digits",
    "from_digits",
]
