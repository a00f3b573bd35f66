"""Result values for expected failures.

A command or validation step returns either ``Ok(value)`` or
``Err(error)``. Steps are chained with ``and_then`` / ``map_err`` and the
first ``Err`` short-circuits the rest of the chain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(fn(self.value))

    def map_err(self, fn: Callable) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result]) -> Result:
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable) -> Err[E]:
        return self

    def map_err(self, fn: Callable[[E], F]) -> Err[F]:
        return Err(fn(self.error))

    def and_then(self, fn: Callable) -> Err[E]:
        return self

    def unwrap(self):
        """Raise instead of returning a value.

        Only for call sites that have already ruled out the error branch.
        """
        raise ValueError(f"Called unwrap() on Err: {self.error!r}")


Result = Union[Ok[T], Err[E]]
