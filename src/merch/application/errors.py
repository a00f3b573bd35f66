"""Client-facing error taxonomy for use cases.

The single place where request-shape problems and business-rule problems
are told apart for the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from merch.domain.model.merchandise import MerchandiseError


@dataclass(frozen=True)
class InvalidRequest:
    """The request could not be turned into domain values."""

    message: str


@dataclass(frozen=True)
class DomainError:
    """The aggregate rejected the command."""

    error: MerchandiseError

    @property
    def message(self) -> str:
        return self.error.message


CommandError = Union[InvalidRequest, DomainError]
AddProductError = CommandError
