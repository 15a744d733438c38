"""Admin "Porque aderimos" API (sectionPorqueAderimos)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_porque_aderimos_repo
from app.application.dtos.porque_aderimos import PorqueAderimosResult
from app.application.interfaces.repositories import ICrudRepository
from app.schemas.porque_aderimos import (
    PorqueAderimosCreate,
    PorqueAderimosResponse,
    PorqueAderimosUpdate,
)

router = APIRouter()

PorqueAderimosRepo = Annotated[
    ICrudRepository[PorqueAderimosResult], Depends(get_porque_aderimos_repo)
]

_NOT_FOUND = "Porque Aderimos not found"


@router.get("", response_model=list[PorqueAderimosResponse])
async def list_porque_aderimos(repo: PorqueAderimosRepo):
    return [PorqueAderimosResponse.model_validate(item) for item in await repo.list()]


@router.get("/{item_id}", response_model=PorqueAderimosResponse)
async def get_porque_aderimos(item_id: str, repo: PorqueAderimosRepo):
    item = await repo.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return PorqueAderimosResponse.model_validate(item)


@router.post("", response_model=PorqueAderimosResponse, status_code=201)
async def create_porque_aderimos(body: PorqueAderimosCreate, repo: PorqueAderimosRepo):
    created = await repo.create(body.to_create_dict())
    return PorqueAderimosResponse.model_validate(created)


@router.put("/{item_id}", response_model=PorqueAderimosResponse)
async def update_porque_aderimos(
    item_id: str, body: PorqueAderimosUpdate, repo: PorqueAderimosRepo
):
    updated = await repo.update(item_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return PorqueAderimosResponse.model_validate(updated)


@router.delete("/{item_id}", status_code=204)
async def delete_porque_aderimos(item_id: str, repo: PorqueAderimosRepo) -> Response:
    if not await repo.delete(item_id):
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return Response(status_code=204)
