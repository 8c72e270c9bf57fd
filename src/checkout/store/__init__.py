"""Order store port and adapters."""

from checkout.store.port import OrderStore
from checkout.store.repository_adapter import RepositoryOrderStore

__all__ = ["OrderStore", "RepositoryOrderStore"]
