"""
CombinationSpace — модель пространства комбинаций

Immutable Pydantic модель с предвычисленными весами позиций и общим размером
декартова произведения доменов. Строится один раз через build_space и
безопасно разделяется между потоками (read-only).
"""

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field, model_validator

from lazy_product.core.errors import EmptyDomainError, EmptyDomainListError, format_integer
from lazy_product.core.math.integers import (
    ARBITRARY_BACKEND,
    AUTO,
    BackendName,
    IntegerBackend,
    get_backend,
    select_backend,
)
from lazy_product.core.math.mixed_radix import compute_place_values

logger = logging.getLogger(__name__)

Domain = Sequence[str]


# =============================================================================
# COMBINATION SPACE MODEL
# =============================================================================


class CombinationSpace(BaseModel):
    """
    Пространство комбинаций (декартово произведение доменов).

    Immutable модель (frozen=True): после построения не меняется.
    Позиция 0 является старшим разрядом.
    """

    moduli: tuple[int, ...] = Field(..., min_length=1, description="Размеры доменов по позициям")
    place_values: tuple[int, ...] = Field(
        ..., min_length=1, description="Веса позиций смешанного основания"
    )
    total_size: int = Field(..., ge=1, description="Общее число комбинаций")
    integer_backend: BackendName = Field(
        ARBITRARY_BACKEND.name, description="Integer binding, выбранный при построении"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "CombinationSpace":
        """
        Проверка согласованности moduli, place_values и total_size.

        Защищает от вручную собранных экземпляров с противоречивыми полями.
        """
        if len(self.moduli) != len(self.place_values):
            raise ValueError(
                f"moduli ({len(self.moduli)}) and place_values "
                f"({len(self.place_values)}) must have the same length"
            )

        if any(m < 1 for m in self.moduli):
            raise ValueError(f"every modulus must be >= 1, got {self.moduli}")

        expected_place_values, expected_total = compute_place_values(self.moduli)
        if self.place_values != expected_place_values:
            mismatched = [
                i
                for i, (actual, expected) in enumerate(zip(self.place_values, expected_place_values))
                if actual != expected
            ]
            raise ValueError(f"place_values do not match moduli at positions {mismatched}")
        if self.total_size != expected_total:
            raise ValueError(
                f"total_size {format_integer(self.total_size)} does not match "
                f"moduli product {format_integer(expected_total)}"
            )

        if not self.backend.fits(self.total_size):
            raise ValueError(
                f"total_size {format_integer(self.total_size)} exceeds "
                f"the '{self.integer_backend}' backend"
            )
        return self

    @property
    def dimensions(self) -> int:
        """Число позиций L."""
        return len(self.moduli)

    @property
    def backend(self) -> IntegerBackend:
        """Integer binding пространства."""
        return get_backend(self.integer_backend)


# =============================================================================
# BUILD
# =============================================================================


def build_space(domains: Sequence[Domain], backend: str = AUTO) -> CombinationSpace:
    """
    Построение пространства из списка доменов.

    Args:
        domains: Упорядоченный список непустых доменов
        backend: "fixed64", "arbitrary" или "auto" (fixed64 если помещается)

    Returns:
        CombinationSpace

    Raises:
        EmptyDomainListError: Если domains пуст
        EmptyDomainError: Если какой-либо домен пуст
        IntegerWidthExceededError: Если backend="fixed64" и размер > 2**64 - 1

    Examples:
        >>> build_space([["Thin", "Thick"], ["Marinara", "BBQ"]]).total_size
        4
    """
    if len(domains) == 0:
        raise EmptyDomainListError()

    moduli = []
    for position, domain in enumerate(domains):
        if len(domain) == 0:
            raise EmptyDomainError(position)
        moduli.append(len(domain))

    # Для "auto" считаем в arbitrary, затем выбираем binding по результату
    working_backend = ARBITRARY_BACKEND if backend == AUTO else get_backend(backend)
    place_values, total_size = compute_place_values(moduli, working_backend)
    chosen = select_backend(backend, total_size)

    logger.debug(
        "Built combination space: dimensions=%d total_size=%s backend=%s",
        len(moduli),
        format_integer(total_size),
        chosen.name,
    )

    return CombinationSpace(
        moduli=tuple(moduli),
        place_values=place_values,
        total_size=total_size,
        integer_backend=chosen.name,
    )
