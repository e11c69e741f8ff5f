"""
SampleRequest — модель запроса на выборку

Immutable Pydantic модель, соответствующая контракту sample_request.json.
sample_size принимается как int или десятичная строка (для пространств
за пределами 64 бит).
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from lazy_product.core.contracts import validate_sample_request
from lazy_product.core.math.integers import AUTO, BackendChoice, parse_integer
from lazy_product.sampling.config import SamplingConfig, SamplingStrategy


class SampleRequest(BaseModel):
    """
    Запрос на выборку sample_size различных комбинаций.

    Инвариант 0 <= sample_size <= total_size проверяется при производстве
    выборки, когда total_size уже известен.
    """

    schema_version: Literal["1"] = Field("1", description="Версия контракта")
    domains: tuple[tuple[str, ...], ...] = Field(..., description="Домены по позициям")
    sample_size: int = Field(..., ge=0, description="Размер выборки")
    backend: BackendChoice = Field(
        AUTO, description="Integer binding"
    )
    strategy: SamplingStrategy = Field(
        SamplingStrategy.STREAMING, description="Стратегия выбора индексов"
    )
    seed: int | None = Field(None, description="Seed генератора (None = энтропия ОС)")

    model_config = {"frozen": True}

    @field_validator("sample_size", mode="before")
    @classmethod
    def parse_sample_size(cls, v: Any) -> Any:
        """Десятичная строка → int."""
        if isinstance(v, str):
            return parse_integer(v)
        return v

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> "SampleRequest":
        """
        Построение из JSON документа с предварительной проверкой контракта.

        Raises:
            jsonschema.ValidationError: Если документ не соответствует sample_request.json
        """
        validate_sample_request(data)
        return cls.model_validate(data)

    def to_config(self) -> SamplingConfig:
        return SamplingConfig(strategy=self.strategy, backend=self.backend, seed=self.seed)
