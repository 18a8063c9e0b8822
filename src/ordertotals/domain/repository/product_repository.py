"""Abstract source of Product records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordertotals.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in source order."""
