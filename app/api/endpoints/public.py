"""Public content API: read-only views for the site plus report submission. No auth."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException

from app.api.dependencies import (
    get_banner_repo,
    get_canal_denuncia_repo,
    get_iniciativa_repo,
    get_nao_se_cale_repo,
    get_porque_aderimos_repo,
    get_post_repo,
    get_public_content_service,
    get_raw_reader,
    get_report_service,
    get_section_repo,
    get_testimonial_repo,
)
from app.application.dtos.canal_denuncia import CanalDenunciaResult
from app.application.dtos.iniciativa import IniciativaResult
from app.application.dtos.nao_se_cale import NaoSeCaleResult
from app.application.dtos.porque_aderimos import PorqueAderimosResult
from app.application.dtos.testimonial import TestimonialResult
from app.application.interfaces.repositories import (
    IBannerRepository,
    ICrudRepository,
    IPostRepository,
    IRawCollectionReader,
    ISectionRepository,
)
from app.application.services.report_service import ReportService
from app.infrastructure.firebase.collections import COLLECTION_DOCUMENTOS
from app.infrastructure.firebase.services import PublicContentService
from app.schemas.banner import BannerResponse
from app.schemas.canal_denuncia import CanalDenunciaResponse
from app.schemas.iniciativa import IniciativaResponse
from app.schemas.nao_se_cale import NaoSeCaleResponse
from app.schemas.porque_aderimos import PorqueAderimosResponse
from app.schemas.post import PostResponse
from app.schemas.report import ReportCreate, ReportSubmittedResponse
from app.schemas.section import SectionResponse
from app.schemas.testimonial import TestimonialResponse

router = APIRouter()

LAST_POSTS_LIMIT = 3


@router.get("")
async def get_public_content(
    content_svc: Annotated[PublicContentService, Depends(get_public_content_service)],
) -> dict[str, list[dict[str, Any]]]:
    """Every public section keyed section0Carrossel … section10SPporTodas, as stored."""
    return await content_svc.aggregate()


# ---- Testimonials ----


@router.get("/testimonials", response_model=list[TestimonialResponse])
async def list_testimonials(
    repo: Annotated[ICrudRepository[TestimonialResult], Depends(get_testimonial_repo)],
):
    return [TestimonialResponse.model_validate(t) for t in await repo.list()]


@router.get("/testimonials/{testimonial_id}", response_model=TestimonialResponse)
async def get_testimonial(
    testimonial_id: str,
    repo: Annotated[ICrudRepository[TestimonialResult], Depends(get_testimonial_repo)],
):
    testimonial = await repo.get_by_id(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=404, detail="Depoimento não encontrado")
    return TestimonialResponse.model_validate(testimonial)


# ---- Iniciativas ----


@router.get("/iniciativas", response_model=list[IniciativaResponse])
async def list_iniciativas(
    repo: Annotated[ICrudRepository[IniciativaResult], Depends(get_iniciativa_repo)],
):
    return [IniciativaResponse.model_validate(i) for i in await repo.list()]


@router.get("/iniciativas/{iniciativa_id}", response_model=IniciativaResponse)
async def get_iniciativa(
    iniciativa_id: str,
    repo: Annotated[ICrudRepository[IniciativaResult], Depends(get_iniciativa_repo)],
):
    iniciativa = await repo.get_by_id(iniciativa_id)
    if iniciativa is None:
        raise HTTPException(status_code=404, detail="Iniciativa não encontrada")
    return IniciativaResponse.model_validate(iniciativa)


# ---- Posts ----


@router.get("/posts", response_model=list[PostResponse])
async def list_posts(repo: Annotated[IPostRepository, Depends(get_post_repo)]):
    return [PostResponse.model_validate(p) for p in await repo.list()]


@router.get("/lastPosts", response_model=list[PostResponse])
async def last_posts(repo: Annotated[IPostRepository, Depends(get_post_repo)]):
    """The three most recent posts."""
    return [PostResponse.model_validate(p) for p in await repo.latest(LAST_POSTS_LIMIT)]


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, repo: Annotated[IPostRepository, Depends(get_post_repo)]):
    post = await repo.get_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post não encontrado")
    return PostResponse.model_validate(post)


# ---- Canais de denúncia ----


@router.get("/canaisDenuncia", response_model=list[CanalDenunciaResponse])
async def list_canais(
    repo: Annotated[ICrudRepository[CanalDenunciaResult], Depends(get_canal_denuncia_repo)],
):
    return [CanalDenunciaResponse.model_validate(c) for c in await repo.list()]


@router.get("/canaisDenuncia/{canal_id}", response_model=CanalDenunciaResponse)
async def get_canal(
    canal_id: str,
    repo: Annotated[ICrudRepository[CanalDenunciaResult], Depends(get_canal_denuncia_repo)],
):
    canal = await repo.get_by_id(canal_id)
    if canal is None:
        raise HTTPException(status_code=404, detail="Canal de denúncia não encontrado")
    return CanalDenunciaResponse.model_validate(canal)


# ---- Não se cale ----


@router.get("/naoSeCale", response_model=list[NaoSeCaleResponse])
async def list_nao_se_cale(
    repo: Annotated[ICrudRepository[NaoSeCaleResult], Depends(get_nao_se_cale_repo)],
):
    return [NaoSeCaleResponse.model_validate(item) for item in await repo.list()]


@router.get("/naoSeCale/{item_id}", response_model=NaoSeCaleResponse)
async def get_nao_se_cale(
    item_id: str,
    repo: Annotated[ICrudRepository[NaoSeCaleResult], Depends(get_nao_se_cale_repo)],
):
    item = await repo.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item não encontrado")
    return NaoSeCaleResponse.model_validate(item)


# ---- Porque aderimos ----


@router.get("/porqueAderimos", response_model=list[PorqueAderimosResponse])
async def list_porque_aderimos(
    repo: Annotated[
        ICrudRepository[PorqueAderimosResult], Depends(get_porque_aderimos_repo)
    ],
):
    return [PorqueAderimosResponse.model_validate(item) for item in await repo.list()]


@router.get("/porqueAderimos/{item_id}", response_model=PorqueAderimosResponse)
async def get_porque_aderimos(
    item_id: str,
    repo: Annotated[
        ICrudRepository[PorqueAderimosResult], Depends(get_porque_aderimos_repo)
    ],
):
    item = await repo.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item não encontrado")
    return PorqueAderimosResponse.model_validate(item)


# ---- Banners, sections, documents ----


@router.get("/banners", response_model=list[BannerResponse])
async def list_active_banners(repo: Annotated[IBannerRepository, Depends(get_banner_repo)]):
    return [BannerResponse.model_validate(b) for b in await repo.list_active()]


@router.get("/sections", response_model=list[SectionResponse])
async def list_active_sections(repo: Annotated[ISectionRepository, Depends(get_section_repo)]):
    return [SectionResponse.from_result(s) for s in await repo.list_active()]


@router.get("/sections/{section_id}", response_model=SectionResponse)
async def get_active_section(
    section_id: str, repo: Annotated[ISectionRepository, Depends(get_section_repo)]
):
    """Inactive sections are hidden from the public (404)."""
    section = await repo.get_by_id(section_id)
    if section is None or not section.is_active:
        raise HTTPException(status_code=404, detail="Seção não encontrada")
    return SectionResponse.from_result(section)


@router.get("/documents/{document_id}")
async def get_document(
    document_id: str,
    reader: Annotated[IRawCollectionReader, Depends(get_raw_reader)],
) -> dict[str, Any]:
    document = await reader.get(COLLECTION_DOCUMENTOS, document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Documento não encontrado")
    return document


# ---- Reports ----


@router.post("/reports", response_model=ReportSubmittedResponse, status_code=201)
async def submit_report(
    body: ReportCreate,
    report_svc: Annotated[ReportService, Depends(get_report_service)],
):
    """Submit a report (denúncia). The protocol in the response identifies it later."""
    report = await report_svc.submit(body.to_create_dict())
    return ReportSubmittedResponse.model_validate(report)
