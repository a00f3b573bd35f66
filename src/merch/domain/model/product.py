"""Product entity and the metadata it is built from."""

from __future__ import annotations

from dataclasses import dataclass

from merch.domain.model.value_objects import Identifier, NonEmptyString


@dataclass(frozen=True)
class ProductMetaData:
    """Validated payload for a product that does not exist yet.

    Built once per request, by the application layer, from raw input.
    """

    product_id: Identifier
    name: NonEmptyString
    description: NonEmptyString
    category: NonEmptyString


@dataclass(frozen=True)
class Product:
    """A product registered in the merchandise catalog."""

    id: Identifier
    name: NonEmptyString
    description: NonEmptyString
    category: NonEmptyString

    @staticmethod
    def create(meta_data: ProductMetaData) -> Product:
        return Product(
            id=meta_data.product_id,
            name=meta_data.name,
            description=meta_data.description,
            category=meta_data.category,
        )
