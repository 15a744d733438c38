"""Application services: uploads, banners, reports, user administration, order policy."""

from app.application.services.banner_service import BannerService
from app.application.services.order_assignment import coerce_order, next_order_from
from app.application.services.report_service import ReportService
from app.application.services.upload_service import UploadService, build_storage_path
from app.application.services.user_admin_service import UserAdminService

__all__ = [
    "BannerService",
    "ReportService",
    "UploadService",
    "UserAdminService",
    "build_storage_path",
    "coerce_order",
    "next_order_from",
]
