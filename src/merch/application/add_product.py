"""Application service: Add Product use case.

Orchestrates one request end to end:

1. Translate the request into ProductMetaData.
2. Read product names and the next display order.
3. Restore the current Merchandise state.
4. Run the command against that state.
5. Project the resulting event, then publish it.

Every stage returns a Result; the first Err stops the request and
nothing is written.
"""

from __future__ import annotations

import uuid
from typing import Callable

import structlog

from merch.application.dto import AddProductRequest
from merch.application.errors import AddProductError, DomainError, InvalidRequest
from merch.domain.model.events import ProductAdded
from merch.domain.model.merchandise import Added, try_add_product
from merch.domain.model.product import ProductMetaData
from merch.domain.model.value_objects import Identifier, NonEmptyString
from merch.domain.repository.merchandise_repository import (
    RestoreMerchandiseState,
    SaveProduct,
)
from merch.domain.repository.read_model import ReadDisplayOrders, ReadProductNames
from merch.domain.result import Result

logger = structlog.get_logger(__name__)


def random_product_id() -> Identifier:
    return Identifier.of(NonEmptyString(str(uuid.uuid4())))


def discard_event(event: ProductAdded) -> None:
    """Default publisher: events are not forwarded anywhere."""


class AddProductHandler:

    def __init__(
        self,
        read_product_names: ReadProductNames,
        read_display_orders: ReadDisplayOrders,
        save_product: SaveProduct,
        restore_merchandise: RestoreMerchandiseState,
        new_product_id: Callable[[], Identifier] = random_product_id,
        publish: Callable[[ProductAdded], None] = discard_event,
    ) -> None:
        self._read_product_names = read_product_names
        self._read_display_orders = read_display_orders
        self._save_product = save_product
        self._restore_merchandise = restore_merchandise
        self._new_product_id = new_product_id
        self._publish = publish

    def handle(self, request: AddProductRequest) -> Result[Added, AddProductError]:
        """Add a new product to the catalog."""
        outcome = (
            request.to_meta_data(self._new_product_id)
            .map_err(InvalidRequest)
            .and_then(self._decide)
            .map(self._project)
        )
        if outcome.is_err():
            logger.warning(
                "add_product_rejected",
                error=type(outcome.error).__name__,
                reason=outcome.error.message,
            )
        return outcome

    def _decide(self, meta_data: ProductMetaData) -> Result[Added, DomainError]:
        product_names = self._read_product_names()
        display_order = self._read_display_orders()

        merchandise = self._restore_merchandise()

        return try_add_product(
            merchandise,
            meta_data=meta_data,
            display_order=display_order,
            all_product_names=product_names,
        ).map_err(DomainError)

    def _project(self, added: Added) -> Added:
        self._save_product(added.product, added.display_order)
        self._publish(added.event)

        logger.info(
            "product_added",
            product_id=str(added.product.id),
            product_name=str(added.product.name),
            display_order=added.display_order.value,
        )
        return added
