"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from merch.application.add_product import AddProductHandler
from merch.infrastructure.config import get_settings
from merch.infrastructure.persistence.json_merchandise_repository import (
    JsonMerchandiseRepository,
)


def merchandise_repository() -> JsonMerchandiseRepository:
    return JsonMerchandiseRepository(get_settings().merchandise_file)


def add_product_handler() -> AddProductHandler:
    repo = merchandise_repository()
    return AddProductHandler(
        read_product_names=repo.product_names,
        read_display_orders=repo.next_display_order,
        save_product=repo.save_product,
        restore_merchandise=repo.restore,
    )
