"""Application DTOs (no Firestore dependency)."""

from app.application.dtos.banner import BannerResult
from app.application.dtos.canal_denuncia import CanalDenunciaResult
from app.application.dtos.iniciativa import IniciativaResult
from app.application.dtos.nao_se_cale import NaoSeCaleResult
from app.application.dtos.porque_aderimos import PorqueAderimosResult
from app.application.dtos.post import PostResult
from app.application.dtos.report import ReportAttachment, ReportResult
from app.application.dtos.section import SectionResult
from app.application.dtos.testimonial import TestimonialResult
from app.application.dtos.upload import SignedUploadResult, UploadResult
from app.application.dtos.user import AuthenticatedUser, CreatedUserResult, UserResult

__all__ = [
    "AuthenticatedUser",
    "BannerResult",
    "CanalDenunciaResult",
    "CreatedUserResult",
    "IniciativaResult",
    "NaoSeCaleResult",
    "PorqueAderimosResult",
    "PostResult",
    "ReportAttachment",
    "ReportResult",
    "SectionResult",
    "SignedUploadResult",
    "TestimonialResult",
    "UploadResult",
    "UserResult",
]
