"""Unit tests for domain value objects."""

import pytest

from merch.domain.exceptions import ValidationError
from merch.domain.model.value_objects import (
    DisplayOrder,
    Identifier,
    NonEmptyString,
    ProductNames,
)
from merch.domain.result import Err, Ok


# ── NonEmptyString ───────────────────────────────────────────────────────────


class TestNonEmptyString:

    def test_creation(self):
        s = NonEmptyString("Mug")
        assert s.value == "Mug"
        assert str(s) == "Mug"

    def test_surrounding_whitespace_stripped(self):
        assert NonEmptyString("  Mug  ").value == "Mug"

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            NonEmptyString("")

    def test_whitespace_only_rejected(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            NonEmptyString(" \t\n")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="Expected a string"):
            NonEmptyString(42)

    def test_of_returns_ok(self):
        assert NonEmptyString.of("Mug") == Ok(NonEmptyString("Mug"))

    def test_of_returns_err_instead_of_raising(self):
        result = NonEmptyString.of("   ")
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)

    def test_equality_by_value(self):
        assert NonEmptyString("Mug") == NonEmptyString(" Mug")


# ── Identifier ───────────────────────────────────────────────────────────────


class TestIdentifier:

    def test_wraps_non_empty_string(self):
        ident = Identifier.of(NonEmptyString("abc-123"))
        assert str(ident) == "abc-123"
        assert ident == Identifier(NonEmptyString("abc-123"))


# ── DisplayOrder ─────────────────────────────────────────────────────────────


class TestDisplayOrder:

    def test_first_is_one(self):
        assert DisplayOrder.first() == DisplayOrder(1)

    def test_next(self):
        assert DisplayOrder(4).next() == DisplayOrder(5)

    def test_ordering(self):
        assert DisplayOrder(1) < DisplayOrder(2)

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            DisplayOrder(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            DisplayOrder(True)


# ── ProductNames ─────────────────────────────────────────────────────────────


class TestProductNames:

    def test_contains_plain_and_wrapped_names(self):
        names = ProductNames.of(["Mug", "Plate"])
        assert "Mug" in names
        assert NonEmptyString("Plate") in names
        assert len(names) == 2

    def test_membership_is_case_sensitive(self):
        names = ProductNames.of(["Mug"])
        assert "mug" not in names
        assert NonEmptyString("MUG") not in names

    def test_empty_by_default(self):
        assert len(ProductNames()) == 0
        assert "Mug" not in ProductNames()
