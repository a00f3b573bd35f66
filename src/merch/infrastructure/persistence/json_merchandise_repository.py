"""JSON-file-backed Merchandise repository and product read model.

The whole catalog lives in one document::

    {
      "version": 3,
      "suspended_reason": null,
      "products": [
        {"id": "...", "name": "...", "description": "...",
         "category": "...", "display_order": 1}
      ]
    }

The aggregate state is derived from it rather than stored: a suspension
reason means ``Suspended``, otherwise any product means ``Open``,
otherwise ``Empty``.

Writers serialize on a sidecar ``<file>.lock``; the version check and
the replace happen while holding it.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from filelock import FileLock

from merch.domain.exceptions import ConcurrentModificationError
from merch.domain.model.merchandise import (
    Empty,
    Merchandise,
    Open,
    Suspended,
)
from merch.domain.model.product import Product
from merch.domain.model.value_objects import (
    DisplayOrder,
    Identifier,
    NonEmptyString,
    ProductNames,
)
from merch.domain.repository.merchandise_repository import MerchandiseRepository
from merch.domain.repository.read_model import ProductReadModel

_EMPTY_DOCUMENT = {"version": 0, "suspended_reason": None, "products": []}


class JsonMerchandiseRepository(MerchandiseRepository, ProductReadModel):
    """One instance serves one request.

    The version seen by the first read is remembered; a save fails with
    ``ConcurrentModificationError`` if the file moved on since then.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._seen_version: int | None = None
        self._lock = FileLock(str(file_path) + ".lock")
        self._ensure_file()

    # --- MerchandiseRepository interface --------------------------------------

    def restore(self) -> Merchandise:
        doc = self._load()
        if doc["suspended_reason"]:
            return Suspended(reason=NonEmptyString(doc["suspended_reason"]))
        if doc["products"]:
            return Open()
        return Empty()

    def save_product(self, product: Product, display_order: DisplayOrder) -> None:
        with self._lock:
            doc = self._load_for_write()
            doc["products"].append(self._product_to_raw(product, display_order))
            self._persist(doc)

    def save_state(self, merchandise: Merchandise) -> None:
        if isinstance(merchandise, Suspended):
            reason = str(merchandise.reason)
        elif isinstance(merchandise, (Empty, Open)):
            reason = None
        else:
            raise TypeError(f"Unknown merchandise state: {type(merchandise).__name__}")

        with self._lock:
            doc = self._load_for_write()
            doc["suspended_reason"] = reason
            self._persist(doc)

    # --- ProductReadModel interface -------------------------------------------

    def product_names(self) -> ProductNames:
        return ProductNames.of(raw["name"] for raw in self._load()["products"])

    def next_display_order(self) -> DisplayOrder:
        orders = [raw["display_order"] for raw in self._load()["products"]]
        if not orders:
            return DisplayOrder.first()
        return DisplayOrder(max(orders)).next()

    def list_all(self) -> list[tuple[Product, DisplayOrder]]:
        rows = sorted(self._load()["products"], key=lambda raw: raw["display_order"])
        return [self._product_to_domain(raw) for raw in rows]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(product: Product, display_order: DisplayOrder) -> dict:
        return {
            "id": str(product.id),
            "name": str(product.name),
            "description": str(product.description),
            "category": str(product.category),
            "display_order": display_order.value,
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> tuple[Product, DisplayOrder]:
        product = Product(
            id=Identifier.of(NonEmptyString(raw["id"])),
            name=NonEmptyString(raw["name"]),
            description=NonEmptyString(raw["description"]),
            category=NonEmptyString(raw["category"]),
        )
        return product, DisplayOrder(raw["display_order"])

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        doc = json.loads(self._file_path.read_text(encoding="utf-8"))
        if self._seen_version is None:
            self._seen_version = doc["version"]
        return doc

    def _load_for_write(self) -> dict:
        expected = self._seen_version
        doc = self._load()
        if expected is not None and doc["version"] != expected:
            raise ConcurrentModificationError(
                f"Merchandise was modified concurrently "
                f"(expected version {expected}, found {doc['version']})"
            )
        return doc

    def _persist(self, doc: dict) -> None:
        """Replace the document atomically. Caller holds the lock."""
        doc["version"] += 1
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self._file_path.parent,
            prefix=self._file_path.name + ".",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp.write(json.dumps(doc, indent=2, ensure_ascii=False) + "\n")
        try:
            os.replace(tmp.name, self._file_path)
        except OSError:
            os.unlink(tmp.name)
            raise
        self._seen_version = doc["version"]

    def _ensure_file(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            if not self._file_path.exists():
                self._file_path.write_text(
                    json.dumps(_EMPTY_DOCUMENT, indent=2) + "\n", encoding="utf-8"
                )
