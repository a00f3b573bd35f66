"""Integration tests for the suspend / resume / show use cases."""

from merch.application.add_product import AddProductHandler
from merch.application.dto import AddProductRequest
from merch.application.errors import DomainError, InvalidRequest
from merch.application.show_merchandise import ListProductsHandler, ShowMerchandiseHandler
from merch.application.suspend_merchandise import (
    ResumeMerchandiseHandler,
    SuspendMerchandiseHandler,
)
from merch.domain.model.merchandise import Open, OperationNotAllowed, Suspended
from merch.domain.model.value_objects import NonEmptyString
from tests.fakes import FakeMerchandiseRepository, SequentialIds


class TestSuspend:

    def test_suspend_open_catalog(self):
        repo = FakeMerchandiseRepository(state=Open())
        result = SuspendMerchandiseHandler(repo).handle("stocktake")

        assert result.unwrap() == Suspended(reason=NonEmptyString("stocktake"))
        assert repo.state == Suspended(reason=NonEmptyString("stocktake"))

    def test_blank_reason_rejected(self):
        repo = FakeMerchandiseRepository()
        result = SuspendMerchandiseHandler(repo).handle("  ")

        assert isinstance(result.error, InvalidRequest)
        assert "save_state" not in repo.calls

    def test_already_suspended_rejected(self):
        repo = FakeMerchandiseRepository(state=Suspended(reason=NonEmptyString("a")))
        result = SuspendMerchandiseHandler(repo).handle("b")

        assert isinstance(result.error, DomainError)
        assert isinstance(result.error.error, OperationNotAllowed)
        assert repo.state == Suspended(reason=NonEmptyString("a"))


class TestResume:

    def test_resume_suspended_catalog(self):
        repo = FakeMerchandiseRepository(state=Suspended(reason=NonEmptyString("a")))
        result = ResumeMerchandiseHandler(repo).handle()

        assert result.unwrap() == Open()
        assert repo.state == Open()

    def test_resume_open_catalog_rejected(self):
        repo = FakeMerchandiseRepository(state=Open())
        result = ResumeMerchandiseHandler(repo).handle()

        assert isinstance(result.error, DomainError)
        assert "save_state" not in repo.calls


class TestShowAndList:

    def test_show_suspended(self):
        repo = FakeMerchandiseRepository(
            state=Suspended(reason=NonEmptyString("stocktake")), names=["Mug"]
        )
        dto = ShowMerchandiseHandler(repo, repo).handle()

        assert dto.state == "SUSPENDED"
        assert dto.suspended_reason == "stocktake"
        assert dto.product_count == 1

    def test_list_products_in_display_order(self):
        repo = FakeMerchandiseRepository()
        handler = AddProductHandler(
            read_product_names=repo.product_names,
            read_display_orders=repo.next_display_order,
            save_product=repo.save_product,
            restore_merchandise=repo.restore,
            new_product_id=SequentialIds(),
        )
        handler.handle(AddProductRequest("Mug", "Ceramic mug", "Kitchen"))
        handler.handle(AddProductRequest("Plate", "Flat plate", "Kitchen"))

        products = ListProductsHandler(repo).handle()

        assert [(p.name, p.display_order) for p in products] == [("Mug", 1), ("Plate", 2)]
        assert products[0].id == "prod-1"


class TestSuspendShortCircuit:

    def test_blank_reason_never_restores(self):
        repo = FakeMerchandiseRepository()
        SuspendMerchandiseHandler(repo).handle("")
        assert repo.calls == []

    def test_rejection_carries_full_message(self):
        repo = FakeMerchandiseRepository(state=Suspended(reason=NonEmptyString("a")))
        result = SuspendMerchandiseHandler(repo).handle("b")
        assert result.error.error == OperationNotAllowed(
            message="Merchandise intake is already suspended: a"
        )
