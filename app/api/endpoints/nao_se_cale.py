"""Admin "Não se cale" API (sectionNaoSeCale)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_nao_se_cale_repo
from app.application.dtos.nao_se_cale import NaoSeCaleResult
from app.application.interfaces.repositories import ICrudRepository
from app.schemas.nao_se_cale import NaoSeCaleCreate, NaoSeCaleResponse, NaoSeCaleUpdate

router = APIRouter()

NaoSeCaleRepo = Annotated[ICrudRepository[NaoSeCaleResult], Depends(get_nao_se_cale_repo)]

_NOT_FOUND = "NaoSeCale item not found"


@router.get("", response_model=list[NaoSeCaleResponse])
async def list_nao_se_cale(repo: NaoSeCaleRepo):
    return [NaoSeCaleResponse.model_validate(item) for item in await repo.list()]


@router.get("/{item_id}", response_model=NaoSeCaleResponse)
async def get_nao_se_cale(item_id: str, repo: NaoSeCaleRepo):
    item = await repo.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return NaoSeCaleResponse.model_validate(item)


@router.post("", response_model=NaoSeCaleResponse, status_code=201)
async def create_nao_se_cale(body: NaoSeCaleCreate, repo: NaoSeCaleRepo):
    created = await repo.create(body.to_create_dict())
    return NaoSeCaleResponse.model_validate(created)


@router.put("/{item_id}", response_model=NaoSeCaleResponse)
async def update_nao_se_cale(item_id: str, body: NaoSeCaleUpdate, repo: NaoSeCaleRepo):
    updated = await repo.update(item_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return NaoSeCaleResponse.model_validate(updated)


@router.delete("/{item_id}", status_code=204)
async def delete_nao_se_cale(item_id: str, repo: NaoSeCaleRepo) -> Response:
    if not await repo.delete(item_id):
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return Response(status_code=204)
