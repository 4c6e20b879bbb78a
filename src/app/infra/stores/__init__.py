"""Stores de infraestrutura."""

from app.infra.stores.memory_stores import MemoryDedupeStore

__all__ = ["MemoryDedupeStore"]
