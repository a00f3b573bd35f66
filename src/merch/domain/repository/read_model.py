"""Read model ports consulted before a command runs.

The aggregate receives their results as plain arguments; it never holds
a reference to a read model. Orchestration calls each port exactly once
per request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from merch.domain.model.product import Product
from merch.domain.model.value_objects import DisplayOrder, ProductNames

ReadProductNames = Callable[[], ProductNames]
ReadDisplayOrders = Callable[[], DisplayOrder]


class ProductReadModel(ABC):
    """Query side of the catalog.

    Bound methods of an implementation satisfy ``ReadProductNames`` and
    ``ReadDisplayOrders``.
    """

    @abstractmethod
    def product_names(self) -> ProductNames:
        """Return the names of every registered product."""

    @abstractmethod
    def next_display_order(self) -> DisplayOrder:
        """Return the position for the next product (append at end)."""

    @abstractmethod
    def list_all(self) -> list[tuple[Product, DisplayOrder]]:
        """Return every product with its position, ordered by position."""
