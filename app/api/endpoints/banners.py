"""Admin banners API.

A banner is created from a blob already uploaded to banners/ (signed URL or
/uploads/file): confirm checks the blob exists, makes it public and records
it. Deleting a banner also deletes its blob.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_banner_repo, get_banner_service
from app.application.interfaces.repositories import IBannerRepository
from app.application.services.banner_service import BannerService
from app.schemas.banner import BannerConfirm, BannerResponse, BannerUpdate

router = APIRouter()

BannerRepo = Annotated[IBannerRepository, Depends(get_banner_repo)]
BannerSvc = Annotated[BannerService, Depends(get_banner_service)]


@router.get("", response_model=list[BannerResponse])
async def list_banners(repo: BannerRepo):
    return [BannerResponse.model_validate(b) for b in await repo.list()]


@router.get("/{banner_id}", response_model=BannerResponse)
async def get_banner(banner_id: str, repo: BannerRepo):
    banner = await repo.get_by_id(banner_id)
    if banner is None:
        raise HTTPException(status_code=404, detail="Banner not found")
    return BannerResponse.model_validate(banner)


@router.post("/confirm", response_model=BannerResponse, status_code=201)
async def confirm_banner(body: BannerConfirm, banner_svc: BannerSvc):
    """Record an uploaded blob as a banner. 400 if storagePath names no blob."""
    banner = await banner_svc.confirm(body.to_create_dict())
    return BannerResponse.model_validate(banner)


@router.post("", response_model=BannerResponse, status_code=201)
async def create_banner(body: BannerConfirm, banner_svc: BannerSvc):
    """Same as POST /confirm."""
    banner = await banner_svc.confirm(body.to_create_dict())
    return BannerResponse.model_validate(banner)


@router.put("/{banner_id}", response_model=BannerResponse)
async def update_banner(banner_id: str, body: BannerUpdate, repo: BannerRepo):
    """Change alt, link or isActive; the blob itself is immutable."""
    updated = await repo.update(banner_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail="Banner not found")
    return BannerResponse.model_validate(updated)


@router.delete("/{banner_id}", status_code=204)
async def delete_banner(banner_id: str, banner_svc: BannerSvc) -> Response:
    if not await banner_svc.delete(banner_id):
        raise HTTPException(status_code=404, detail="Banner not found")
    return Response(status_code=204)
