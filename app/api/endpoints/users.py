"""Admin user management API (Firebase Authentication accounts)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.dependencies import get_user_admin_service
from app.application.services.user_admin_service import UserAdminService
from app.schemas.base import MessageResponse
from app.schemas.user import (
    UserCreatedResponse,
    UserCreateRequest,
    UserEmailRequest,
    UserResponse,
)

router = APIRouter()

UserAdmin = Annotated[UserAdminService, Depends(get_user_admin_service)]


@router.get("", response_model=list[UserResponse])
async def list_users(user_svc: UserAdmin):
    return [UserResponse.model_validate(u) for u in await user_svc.list_users()]


@router.post("", response_model=UserCreatedResponse, status_code=201)
async def create_user(body: UserCreateRequest, user_svc: UserAdmin):
    """Create an account with the admin claim. 409 if the email is taken."""
    created = await user_svc.create_admin(body.email, body.password)
    return UserCreatedResponse(message=created.message, uid=created.uid)


@router.put("/promote", response_model=MessageResponse)
async def promote_user(body: UserEmailRequest, user_svc: UserAdmin):
    return MessageResponse(message=await user_svc.promote(body.email))


@router.put("/demote", response_model=MessageResponse)
async def demote_user(body: UserEmailRequest, user_svc: UserAdmin):
    return MessageResponse(message=await user_svc.demote(body.email))


@router.get("/{uid}", response_model=UserResponse)
async def get_user(uid: str, user_svc: UserAdmin):
    return UserResponse.model_validate(await user_svc.get_user(uid))


@router.delete("/{uid}", status_code=204)
async def delete_user(uid: str, user_svc: UserAdmin) -> Response:
    await user_svc.delete_user(uid)
    return Response(status_code=204)
