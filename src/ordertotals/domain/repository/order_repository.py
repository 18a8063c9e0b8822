"""Abstract source of Order records.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON/CSV files, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordertotals.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order line item, in source order."""
