"""Domain-level exceptions.

Expected business outcomes (duplicate names, suspended catalog) are
returned as values, see ``merch.domain.result``. Exceptions are kept for
invariants broken at construction time and for stale writes, so the CLI
layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object invariant was violated."""


class ConcurrentModificationError(DomainException):
    """The merchandise changed between restore and save."""
