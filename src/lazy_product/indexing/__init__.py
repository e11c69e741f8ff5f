"""Indexing — отображение индекс ↔ комбинация."""

from .indexer import Combination, decode, encode, resolve_index

__all__ = [
    "Combination",
    "decode",
    "encode",
    "resolve_index",
]
