"""Merchandise aggregate — the core of the domain.

The catalog is always in exactly one of three states, each its own
immutable type:

- ``Empty``      no product registered yet, accepts the first one
- ``Open``       normal operation, accepts further products
- ``Suspended``  additions forbidden, carries the reason

Commands never mutate a state object. They return the successor state
(plus an event where one applies) wrapped in ``Ok``, or an ``Err``
holding a ``MerchandiseError``, in which case the caller keeps the state
it already had.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from merch.domain.model.events import ProductAdded
from merch.domain.model.product import Product, ProductMetaData
from merch.domain.model.value_objects import (
    DisplayOrder,
    NonEmptyString,
    ProductNames,
)
from merch.domain.result import Err, Ok, Result


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DuplicateProductName:
    name: NonEmptyString

    @property
    def message(self) -> str:
        return f"Product '{self.name}' already exists"


@dataclass(frozen=True)
class OperationNotAllowed:
    """The current state does not permit the command.

    ``message`` is the full explanation, including any suspension reason.
    """

    message: str


MerchandiseError = Union[DuplicateProductName, OperationNotAllowed]


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------


class _AcceptsProducts:
    """Shared ``add_product`` for the states that allow additions."""

    def add_product(
        self,
        meta_data: ProductMetaData,
        display_order: DisplayOrder,
        all_product_names: ProductNames,
    ) -> Result[Added, MerchandiseError]:
        """Register a new product.

        ``display_order`` is used as given; the read model decides it.
        """
        if meta_data.name in all_product_names:
            return Err(DuplicateProductName(meta_data.name))

        event = ProductAdded(
            product=Product.create(meta_data),
            display_order=display_order,
        )
        return Ok(Added(merchandise=Open(), event=event))

    def suspend(self, reason: NonEmptyString) -> Result[Suspended, MerchandiseError]:
        return Ok(Suspended(reason=reason))


@dataclass(frozen=True)
class Empty(_AcceptsProducts):
    """No product registered yet."""


@dataclass(frozen=True)
class Open(_AcceptsProducts):
    """At least one product registered; further additions allowed."""


@dataclass(frozen=True)
class Suspended:
    """Intake stopped. No product may be added until resumed."""

    reason: NonEmptyString

    def resume(self) -> Result[Open, MerchandiseError]:
        return Ok(Open())


Merchandise = Union[Empty, Open, Suspended]


@dataclass(frozen=True)
class Added:
    """Successful outcome of ``add_product``: the new state and its event."""

    merchandise: Open
    event: ProductAdded

    @property
    def product(self) -> Product:
        return self.event.product

    @property
    def display_order(self) -> DisplayOrder:
        return self.event.display_order


# ---------------------------------------------------------------------------
# State dispatch
# ---------------------------------------------------------------------------


def try_add_product(
    merchandise: Merchandise,
    meta_data: ProductMetaData,
    display_order: DisplayOrder,
    all_product_names: ProductNames,
) -> Result[Added, MerchandiseError]:
    """Run ``add_product`` if the current state permits it."""
    if isinstance(merchandise, (Empty, Open)):
        return merchandise.add_product(meta_data, display_order, all_product_names)
    if isinstance(merchandise, Suspended):
        return Err(
            OperationNotAllowed(
                "Cannot add products: merchandise intake is suspended: "
                f"{merchandise.reason}"
            )
        )
    raise TypeError(f"Unknown merchandise state: {type(merchandise).__name__}")


def try_suspend(
    merchandise: Merchandise, reason: NonEmptyString
) -> Result[Suspended, MerchandiseError]:
    if isinstance(merchandise, (Empty, Open)):
        return merchandise.suspend(reason)
    if isinstance(merchandise, Suspended):
        return Err(
            OperationNotAllowed(
                f"Merchandise intake is already suspended: {merchandise.reason}"
            )
        )
    raise TypeError(f"Unknown merchandise state: {type(merchandise).__name__}")


def try_resume(merchandise: Merchandise) -> Result[Open, MerchandiseError]:
    if isinstance(merchandise, Suspended):
        return merchandise.resume()
    if isinstance(merchandise, (Empty, Open)):
        return Err(OperationNotAllowed("Merchandise intake is not suspended"))
    raise TypeError(f"Unknown merchandise state: {type(merchandise).__name__}")


def state_name(merchandise: Merchandise) -> str:
    if isinstance(merchandise, Empty):
        return "EMPTY"
    if isinstance(merchandise, Open):
        return "OPEN"
    if isinstance(merchandise, Suspended):
        return "SUSPENDED"
    raise TypeError(f"Unknown merchandise state: {type(merchandise).__name__}")
