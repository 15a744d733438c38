"""Admin initiatives API (sectionIniciativas). ordem is assigned on create when omitted."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_iniciativa_repo
from app.application.dtos.iniciativa import IniciativaResult
from app.application.interfaces.repositories import ICrudRepository
from app.schemas.iniciativa import IniciativaCreate, IniciativaResponse, IniciativaUpdate

router = APIRouter()

IniciativaRepo = Annotated[ICrudRepository[IniciativaResult], Depends(get_iniciativa_repo)]


@router.get("", response_model=list[IniciativaResponse])
async def list_iniciativas(repo: IniciativaRepo):
    return [IniciativaResponse.model_validate(i) for i in await repo.list()]


@router.get("/{iniciativa_id}", response_model=IniciativaResponse)
async def get_iniciativa(iniciativa_id: str, repo: IniciativaRepo):
    iniciativa = await repo.get_by_id(iniciativa_id)
    if iniciativa is None:
        raise HTTPException(status_code=404, detail="Iniciativa not found")
    return IniciativaResponse.model_validate(iniciativa)


@router.post("", response_model=IniciativaResponse, status_code=201)
async def create_iniciativa(body: IniciativaCreate, repo: IniciativaRepo):
    created = await repo.create(body.to_create_dict())
    return IniciativaResponse.model_validate(created)


@router.put("/{iniciativa_id}", response_model=IniciativaResponse)
async def update_iniciativa(iniciativa_id: str, body: IniciativaUpdate, repo: IniciativaRepo):
    updated = await repo.update(iniciativa_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail="Iniciativa not found")
    return IniciativaResponse.model_validate(updated)


@router.delete("/{iniciativa_id}", status_code=204)
async def delete_iniciativa(iniciativa_id: str, repo: IniciativaRepo) -> Response:
    if not await repo.delete(iniciativa_id):
        raise HTTPException(status_code=404, detail="Iniciativa not found")
    return Response(status_code=204)
