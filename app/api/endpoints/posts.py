"""Admin posts API (sectionPostsDestaque)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_post_repo
from app.application.interfaces.repositories import IPostRepository
from app.schemas.post import PostCreate, PostResponse, PostUpdate

router = APIRouter()

PostRepo = Annotated[IPostRepository, Depends(get_post_repo)]


@router.get("", response_model=list[PostResponse])
async def list_posts(repo: PostRepo):
    return [PostResponse.model_validate(p) for p in await repo.list()]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str, repo: PostRepo):
    post = await repo.get_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return PostResponse.model_validate(post)


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(body: PostCreate, repo: PostRepo):
    created = await repo.create(body.to_create_dict())
    return PostResponse.model_validate(created)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(post_id: str, body: PostUpdate, repo: PostRepo):
    updated = await repo.update(post_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return PostResponse.model_validate(updated)


@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: str, repo: PostRepo) -> Response:
    if not await repo.delete(post_id):
        raise HTTPException(status_code=404, detail="Post not found")
    return Response(status_code=204)
