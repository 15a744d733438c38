"""Tests for UserAdminService: claim handling and identity-provider error translation."""

import pytest

from app.application.services.user_admin_service import UserAdminService
from app.domain.exceptions import (
    ConflictException,
    ResourceNotFoundException,
    UpstreamException,
    ValidationException,
)
from app.infrastructure.exceptions import IdentityProviderError
from tests.fakes import FakeAuth


@pytest.fixture
def auth() -> FakeAuth:
    return FakeAuth()


@pytest.fixture
def service(auth) -> UserAdminService:
    return UserAdminService(auth)


async def test_create_admin_sets_claim(service, auth) -> None:
    created = await service.create_admin("new@example.com", "s3cret!")
    assert created.message == "Usuário administrador criado com sucesso: new@example.com"
    assert auth.users[created.uid].custom_claims == {"admin": True}


async def test_create_admin_duplicate_email_is_conflict(service, auth) -> None:
    auth.add_user("taken@example.com")
    with pytest.raises(ConflictException) as exc_info:
        await service.create_admin("taken@example.com", "s3cret!")
    assert exc_info.value.message == "O endereço de e-mail já está em uso."


async def test_create_admin_weak_password_is_validation_error(service) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.create_admin("new@example.com", "123")
    assert exc_info.value.errors[0]["field"] == "password"


async def test_unlisted_provider_error_propagates(service, auth) -> None:
    async def failing_create(email: str, password: str) -> str:
        raise IdentityProviderError("QUOTA_EXCEEDED", "QUOTA_EXCEEDED")

    auth.create_user = failing_create
    with pytest.raises(UpstreamException) as exc_info:
        await service.create_admin("new@example.com", "s3cret!")
    assert exc_info.value.details["provider_code"] == "QUOTA_EXCEEDED"


async def test_promote_keeps_other_claims(service, auth) -> None:
    user = auth.add_user("ed@example.com", claims={"editor": True})
    message = await service.promote("ed@example.com")
    assert message == "Sucesso! ed@example.com agora é um administrador."
    assert auth.users[user.uid].custom_claims == {"editor": True, "admin": True}


async def test_demote_removes_only_admin(service, auth) -> None:
    user = auth.add_user("ed@example.com", claims={"editor": True, "admin": True})
    await service.demote("ed@example.com")
    assert auth.users[user.uid].custom_claims == {"editor": True}


async def test_promote_unknown_email_is_not_found(service) -> None:
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.promote("ghost@example.com")
    assert exc_info.value.message == "Usuário com e-mail ghost@example.com não encontrado."


async def test_get_and_delete_unknown_user_are_not_found(service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await service.get_user("missing")
    with pytest.raises(ResourceNotFoundException):
        await service.delete_user("missing")


async def test_list_users_reports_admin_flag(service, auth) -> None:
    auth.add_user("a@example.com", claims={"admin": True})
    auth.add_user("b@example.com")
    users = await service.list_users()
    assert sorted((u.email, u.admin) for u in users) == [
        ("a@example.com", True),
        ("b@example.com", False),
    ]
