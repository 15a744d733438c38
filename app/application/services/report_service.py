"""Report application service: accept a public submission with a protocol number."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.application.dtos.report import ReportResult
from app.domain.enums import ReportStatus
from app.domain.exceptions import ValidationException
from app.shared.utils.generators import generate_protocol

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ICrudRepository


class ReportService:
    def __init__(
        self,
        report_repo: "ICrudRepository[ReportResult]",
        logger: logging.Logger | None = None,
    ) -> None:
        self._report_repo = report_repo
        self._logger = logger or logging.getLogger(__name__)

    async def submit(self, data: dict[str, Any]) -> ReportResult:
        """Store a new report as recebida with a fresh protocol.

        Raises:
            ValidationException: contato missing on a non-anonymous report.
        """
        if not data.get("anonimo", True) and not data.get("contato"):
            raise ValidationException(
                "Contato é obrigatório quando a denúncia não é anônima", field="contato"
            )
        if data.get("anonimo", True):
            data = {k: v for k, v in data.items() if k != "contato"}
        report = await self._report_repo.create(
            {**data, "protocol": generate_protocol(), "status": ReportStatus.RECEBIDA.value}
        )
        self._logger.info("Report received: id=%s protocol=%s", report.id, report.protocol)
        return report
