"""Admin testimonials API: thin routes over the testimonials repository."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_testimonial_repo
from app.application.dtos.testimonial import TestimonialResult
from app.application.interfaces.repositories import ICrudRepository
from app.schemas.testimonial import (
    TestimonialCreate,
    TestimonialResponse,
    TestimonialUpdate,
)

router = APIRouter()

TestimonialRepo = Annotated[ICrudRepository[TestimonialResult], Depends(get_testimonial_repo)]


@router.get("", response_model=list[TestimonialResponse])
async def list_testimonials(repo: TestimonialRepo):
    """All testimonials, newest first."""
    return [TestimonialResponse.model_validate(t) for t in await repo.list()]


@router.get("/{testimonial_id}", response_model=TestimonialResponse)
async def get_testimonial(testimonial_id: str, repo: TestimonialRepo):
    testimonial = await repo.get_by_id(testimonial_id)
    if testimonial is None:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return TestimonialResponse.model_validate(testimonial)


@router.post("", response_model=TestimonialResponse, status_code=201)
async def create_testimonial(body: TestimonialCreate, repo: TestimonialRepo):
    created = await repo.create(body.to_create_dict())
    return TestimonialResponse.model_validate(created)


@router.put("/{testimonial_id}", response_model=TestimonialResponse)
async def update_testimonial(
    testimonial_id: str, body: TestimonialUpdate, repo: TestimonialRepo
):
    """Partial update: only the supplied fields change."""
    updated = await repo.update(testimonial_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return TestimonialResponse.model_validate(updated)


@router.delete("/{testimonial_id}", status_code=204)
async def delete_testimonial(testimonial_id: str, repo: TestimonialRepo) -> Response:
    if not await repo.delete(testimonial_id):
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return Response(status_code=204)
