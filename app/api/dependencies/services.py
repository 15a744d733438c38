"""Application service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.api.dependencies.firebase import FirebaseDep
from app.api.dependencies.repositories import (
    get_banner_repo,
    get_raw_reader,
    get_report_repo,
)
from app.application.dtos.report import ReportResult
from app.application.interfaces.repositories import (
    IBannerRepository,
    ICrudRepository,
    IRawCollectionReader,
)
from app.application.services.banner_service import BannerService
from app.application.services.report_service import ReportService
from app.application.services.upload_service import UploadService
from app.application.services.user_admin_service import UserAdminService
from app.core.config import get_settings
from app.infrastructure.firebase.services import PublicContentService


def get_upload_service(clients: FirebaseDep) -> UploadService:
    settings = get_settings()
    return UploadService(
        clients.storage,
        max_upload_size=settings.max_upload_size,
        signed_url_expiration_seconds=settings.signed_url_expiration_seconds,
    )


def get_banner_service(
    clients: FirebaseDep,
    banner_repo: Annotated[IBannerRepository, Depends(get_banner_repo)],
) -> BannerService:
    return BannerService(banner_repo, clients.storage)


def get_report_service(
    report_repo: Annotated[ICrudRepository[ReportResult], Depends(get_report_repo)],
) -> ReportService:
    return ReportService(report_repo)


def get_user_admin_service(clients: FirebaseDep) -> UserAdminService:
    """User administration against Firebase Authentication."""
    return UserAdminService(clients.auth)


def get_public_content_service(
    reader: Annotated[IRawCollectionReader, Depends(get_raw_reader)],
) -> PublicContentService:
    return PublicContentService(reader)
