"""Application layer: DTOs, interfaces, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (Firestore repositories, Firebase
Auth, Cloud Storage).
"""

from app.application.interfaces import (
    IBannerRepository,
    ICrudRepository,
    IIdentityProvider,
    IOrderAssigner,
    IPostRepository,
    IRawCollectionReader,
    ISectionRepository,
)
from app.application.services import (
    BannerService,
    ReportService,
    UploadService,
    UserAdminService,
)

__all__ = [
    "BannerService",
    "IBannerRepository",
    "ICrudRepository",
    "IIdentityProvider",
    "IOrderAssigner",
    "IPostRepository",
    "IRawCollectionReader",
    "ISectionRepository",
    "ReportService",
    "UploadService",
    "UserAdminService",
]
