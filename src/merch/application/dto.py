"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from merch.domain.model.product import ProductMetaData
from merch.domain.model.value_objects import Identifier, NonEmptyString
from merch.domain.result import Result


def _field(label: str, raw: str) -> Result[NonEmptyString, str]:
    return NonEmptyString.of(raw).map_err(
        lambda _: f"Invalid product {label}: {raw!r}"
    )


@dataclass(frozen=True)
class AddProductRequest:
    """Input: a product as submitted by the client.

    No identifier, timestamp or display order is accepted; those are
    derived or looked up internally.
    """

    name: str
    description: str
    category: str

    def to_meta_data(
        self, new_product_id: Callable[[], Identifier]
    ) -> Result[ProductMetaData, str]:
        """Validate each field, stopping at the first invalid one.

        An identifier is only minted once every field is valid.
        """
        return _field("name", self.name).and_then(
            lambda name: _field("description", self.description).and_then(
                lambda description: _field("category", self.category).map(
                    lambda category: ProductMetaData(
                        product_id=new_product_id(),
                        name=name,
                        description=description,
                        category=category,
                    )
                )
            )
        )


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    name: str
    description: str
    category: str
    display_order: int


@dataclass(frozen=True)
class MerchandiseDTO:
    """Output: the catalog state as displayed to the user."""

    state: str
    suspended_reason: str | None
    product_count: int
