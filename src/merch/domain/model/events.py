"""Domain events emitted by the Merchandise aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from merch.domain.model.product import Product
from merch.domain.model.value_objects import DisplayOrder


@dataclass(frozen=True)
class ProductAdded:
    """A product joined the catalog at ``display_order``."""

    product: Product
    display_order: DisplayOrder
