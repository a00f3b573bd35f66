"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist: once a
``NonEmptyString`` has been built, nothing downstream re-checks it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from merch.domain.exceptions import ValidationError
from merch.domain.result import Err, Ok, Result


@dataclass(frozen=True)
class NonEmptyString:
    """A string with at least one non-whitespace character.

    The value is stored stripped of surrounding whitespace.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Expected a string, got {type(self.value).__name__}"
            )
        stripped = self.value.strip()
        if not stripped:
            raise ValidationError("String must not be empty")
        object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return self.value

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: str) -> Result[NonEmptyString, ValidationError]:
        """Validate *raw* without raising."""
        try:
            return Ok(NonEmptyString(raw))
        except ValidationError as exc:
            return Err(exc)


@dataclass(frozen=True)
class Identifier:
    """Opaque unique key of a product."""

    value: NonEmptyString

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def of(value: NonEmptyString) -> Identifier:
        return Identifier(value)


@dataclass(frozen=True, order=True)
class DisplayOrder:
    """Position of a product in the catalog listing, starting at 1."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Display order must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Display order must be positive")

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def first() -> DisplayOrder:
        return DisplayOrder(1)

    def next(self) -> DisplayOrder:
        return DisplayOrder(self.value + 1)


@dataclass(frozen=True)
class ProductNames:
    """Snapshot of every registered product name.

    Membership is an exact, case-sensitive comparison.
    """

    names: frozenset[str] = frozenset()

    def __contains__(self, name: object) -> bool:
        if isinstance(name, NonEmptyString):
            name = name.value
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)

    @staticmethod
    def of(names: Iterable[str | NonEmptyString]) -> ProductNames:
        return ProductNames(frozenset(str(n) for n in names))
