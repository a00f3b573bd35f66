"""Abstract repository for the Merchandise aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Implementations must give read-then-write consistency:
a save following ``restore()`` fails if another writer got in between.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from merch.domain.model.merchandise import Merchandise
from merch.domain.model.product import Product
from merch.domain.model.value_objects import DisplayOrder

SaveProduct = Callable[[Product, DisplayOrder], None]
RestoreMerchandiseState = Callable[[], Merchandise]


class MerchandiseRepository(ABC):

    @abstractmethod
    def restore(self) -> Merchandise:
        """Rebuild the current state from the latest committed data."""

    @abstractmethod
    def save_product(self, product: Product, display_order: DisplayOrder) -> None:
        """Project a ProductAdded event; product and order are stored together."""

    @abstractmethod
    def save_state(self, merchandise: Merchandise) -> None:
        """Persist a suspension or resumption."""
