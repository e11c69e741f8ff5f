"""
Contract Validation Module

Валидация JSON документов запроса и результата сэмплирования.
"""

from .validators import (
    ContractValidator,
    SampleRequestValidator,
    SampleResultValidator,
    SchemaLoader,
    validate_sample_request,
    validate_sample_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SampleRequestValidator",
    "SampleResultValidator",
    # Functions
    "validate_sample_request",
    "validate_sample_result",
]
