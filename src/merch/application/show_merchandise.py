"""Application service: Show catalog state and list products (read-only)."""

from __future__ import annotations

from merch.application.dto import MerchandiseDTO, ProductDTO
from merch.domain.model.merchandise import Suspended, state_name
from merch.domain.repository.merchandise_repository import MerchandiseRepository
from merch.domain.repository.read_model import ProductReadModel


class ListProductsHandler:

    def __init__(self, read_model: ProductReadModel) -> None:
        self._read_model = read_model

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                id=str(product.id),
                name=str(product.name),
                description=str(product.description),
                category=str(product.category),
                display_order=display_order.value,
            )
            for product, display_order in self._read_model.list_all()
        ]


class ShowMerchandiseHandler:

    def __init__(
        self,
        merchandise_repo: MerchandiseRepository,
        read_model: ProductReadModel,
    ) -> None:
        self._merchandise_repo = merchandise_repo
        self._read_model = read_model

    def handle(self) -> MerchandiseDTO:
        merchandise = self._merchandise_repo.restore()
        reason = (
            str(merchandise.reason) if isinstance(merchandise, Suspended) else None
        )
        return MerchandiseDTO(
            state=state_name(merchandise),
            suspended_reason=reason,
            product_count=len(self._read_model.product_names()),
        )
