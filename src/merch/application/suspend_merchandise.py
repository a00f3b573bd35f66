"""Application service: Suspend / Resume merchandise intake."""

from __future__ import annotations

import structlog

from merch.application.errors import CommandError, DomainError, InvalidRequest
from merch.domain.model.merchandise import Open, Suspended, try_resume, try_suspend
from merch.domain.model.value_objects import NonEmptyString
from merch.domain.repository.merchandise_repository import MerchandiseRepository
from merch.domain.result import Result

logger = structlog.get_logger(__name__)


class SuspendMerchandiseHandler:

    def __init__(self, merchandise_repo: MerchandiseRepository) -> None:
        self._merchandise_repo = merchandise_repo

    def handle(self, reason: str) -> Result[Suspended, CommandError]:
        """Stop accepting new products until resumed."""
        return (
            NonEmptyString.of(reason)
            .map_err(lambda _: InvalidRequest(f"Invalid suspension reason: {reason!r}"))
            .and_then(self._suspend)
        )

    def _suspend(self, reason: NonEmptyString) -> Result[Suspended, DomainError]:
        merchandise = self._merchandise_repo.restore()
        return try_suspend(merchandise, reason).map_err(DomainError).map(self._save)

    def _save(self, suspended: Suspended) -> Suspended:
        self._merchandise_repo.save_state(suspended)
        logger.info("merchandise_suspended", reason=str(suspended.reason))
        return suspended


class ResumeMerchandiseHandler:

    def __init__(self, merchandise_repo: MerchandiseRepository) -> None:
        self._merchandise_repo = merchandise_repo

    def handle(self) -> Result[Open, CommandError]:
        merchandise = self._merchandise_repo.restore()
        return try_resume(merchandise).map_err(DomainError).map(self._save)

    def _save(self, resumed: Open) -> Open:
        self._merchandise_repo.save_state(resumed)
        logger.info("merchandise_resumed")
        return resumed
