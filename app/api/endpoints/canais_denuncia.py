"""Admin report channels API (sectionCanaisDenuncia). ordem is assigned on create when omitted."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_canal_denuncia_repo
from app.application.dtos.canal_denuncia import CanalDenunciaResult
from app.application.interfaces.repositories import ICrudRepository
from app.schemas.canal_denuncia import (
    CanalDenunciaCreate,
    CanalDenunciaResponse,
    CanalDenunciaUpdate,
)

router = APIRouter()

CanalRepo = Annotated[ICrudRepository[CanalDenunciaResult], Depends(get_canal_denuncia_repo)]

_NOT_FOUND = "Canal de denúncia not found"


@router.get("", response_model=list[CanalDenunciaResponse])
async def list_canais(repo: CanalRepo):
    return [CanalDenunciaResponse.model_validate(c) for c in await repo.list()]


@router.get("/{canal_id}", response_model=CanalDenunciaResponse)
async def get_canal(canal_id: str, repo: CanalRepo):
    canal = await repo.get_by_id(canal_id)
    if canal is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return CanalDenunciaResponse.model_validate(canal)


@router.post("", response_model=CanalDenunciaResponse, status_code=201)
async def create_canal(body: CanalDenunciaCreate, repo: CanalRepo):
    created = await repo.create(body.to_create_dict())
    return CanalDenunciaResponse.model_validate(created)


@router.put("/{canal_id}", response_model=CanalDenunciaResponse)
async def update_canal(canal_id: str, body: CanalDenunciaUpdate, repo: CanalRepo):
    updated = await repo.update(canal_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return CanalDenunciaResponse.model_validate(updated)


@router.delete("/{canal_id}", status_code=204)
async def delete_canal(canal_id: str, repo: CanalRepo) -> Response:
    if not await repo.delete(canal_id):
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return Response(status_code=204)
