"""Admin sections API (publicContent).

The body's "type" picks the model on create; on update the stored type
decides the valid fields and cannot be changed.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from app.api.dependencies import get_section_repo
from app.application.interfaces.repositories import ISectionRepository
from app.schemas.section import (
    SectionResponse,
    validate_section_create,
    validate_section_update,
)

router = APIRouter()

SectionRepo = Annotated[ISectionRepository, Depends(get_section_repo)]

RawBody = Annotated[dict[str, Any], Body()]


@router.get("", response_model=list[SectionResponse])
async def list_sections(repo: SectionRepo):
    """All sections, active or not, by order."""
    return [SectionResponse.from_result(s) for s in await repo.list()]


@router.get("/{section_id}", response_model=SectionResponse)
async def get_section(section_id: str, repo: SectionRepo):
    section = await repo.get_by_id(section_id)
    if section is None:
        raise HTTPException(status_code=404, detail="Section not found")
    return SectionResponse.from_result(section)


@router.post("", response_model=SectionResponse, status_code=201)
async def create_section(body: RawBody, repo: SectionRepo):
    section = validate_section_create(body).unwrap()
    created = await repo.create(section.to_create_dict())
    return SectionResponse.from_result(created)


@router.put("/{section_id}", response_model=SectionResponse)
async def update_section(section_id: str, body: RawBody, repo: SectionRepo):
    existing = await repo.get_by_id(section_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Section not found")
    changes = validate_section_update(existing.type, body).unwrap()
    updated = await repo.update(section_id, changes.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail="Section not found")
    return SectionResponse.from_result(updated)


@router.delete("/{section_id}", status_code=204)
async def delete_section(section_id: str, repo: SectionRepo) -> Response:
    if not await repo.delete(section_id):
        raise HTTPException(status_code=404, detail="Section not found")
    return Response(status_code=204)
