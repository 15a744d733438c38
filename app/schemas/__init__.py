"""Pydantic request/response schemas (camelCase on the wire)."""

from app.schemas.banner import BannerConfirm, BannerResponse, BannerUpdate
from app.schemas.canal_denuncia import (
    CanalDenunciaCreate,
    CanalDenunciaResponse,
    CanalDenunciaUpdate,
)
from app.schemas.iniciativa import IniciativaCreate, IniciativaResponse, IniciativaUpdate
from app.schemas.nao_se_cale import NaoSeCaleCreate, NaoSeCaleResponse, NaoSeCaleUpdate
from app.schemas.porque_aderimos import (
    PorqueAderimosCreate,
    PorqueAderimosResponse,
    PorqueAderimosUpdate,
)
from app.schemas.post import PostCreate, PostResponse, PostUpdate
from app.schemas.report import ReportCreate, ReportResponse, ReportUpdate
from app.schemas.section import SECTION_MODELS, SectionResponse
from app.schemas.testimonial import TestimonialCreate, TestimonialResponse, TestimonialUpdate
from app.schemas.validation import FieldError, ValidationResult, validate_payload

__all__ = [
    "SECTION_MODELS",
    "BannerConfirm",
    "BannerResponse",
    "BannerUpdate",
    "CanalDenunciaCreate",
    "CanalDenunciaResponse",
    "CanalDenunciaUpdate",
    "FieldError",
    "IniciativaCreate",
    "IniciativaResponse",
    "IniciativaUpdate",
    "NaoSeCaleCreate",
    "NaoSeCaleResponse",
    "NaoSeCaleUpdate",
    "PorqueAderimosCreate",
    "PorqueAderimosResponse",
    "PorqueAderimosUpdate",
    "PostCreate",
    "PostResponse",
    "PostUpdate",
    "ReportCreate",
    "ReportResponse",
    "ReportUpdate",
    "SectionResponse",
    "TestimonialCreate",
    "TestimonialResponse",
    "TestimonialUpdate",
    "ValidationResult",
    "validate_payload",
]
