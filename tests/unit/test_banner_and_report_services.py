"""Tests for BannerService and ReportService with fake store and bucket."""

import re

import pytest

from app.application.services.banner_service import BannerService
from app.application.services.report_service import ReportService
from app.domain.enums import ReportStatus
from app.domain.exceptions import ValidationException
from app.infrastructure.firebase.collections import COLLECTION_REPORTS
from app.infrastructure.firebase.repositories import (
    FirestoreBannerRepository,
    FirestoreReportRepository,
)
from tests.fakes import FakeFirestoreClient, FakeStorage


@pytest.fixture
def db() -> FakeFirestoreClient:
    return FakeFirestoreClient()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def banner_service(db, storage) -> BannerService:
    return BannerService(FirestoreBannerRepository(db), storage)


async def test_confirm_makes_blob_public_and_records_banner(banner_service, storage) -> None:
    await storage.upload("banners/1_hero.png", b"png", "image/png")
    banner = await banner_service.confirm(
        {"storagePath": "banners/1_hero.png", "alt": "Hero", "link": "", "isActive": True}
    )
    assert storage.blobs["banners/1_hero.png"].public
    assert banner.url == storage.public_url("banners/1_hero.png")
    assert banner.content_type == "image/png"
    assert banner.is_active


async def test_confirm_missing_blob_is_rejected(banner_service, db) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await banner_service.confirm({"storagePath": "banners/ghost.png"})
    assert exc_info.value.message == "Arquivo não encontrado no Storage"
    assert db.data.get("banners", {}) == {}


async def test_delete_removes_blob_and_record(banner_service, storage) -> None:
    await storage.upload("banners/1_hero.png", b"png", "image/png")
    banner = await banner_service.confirm({"storagePath": "banners/1_hero.png"})
    assert await banner_service.delete(banner.id) is True
    assert storage.blobs == {}
    assert await banner_service.delete(banner.id) is False


async def test_delete_tolerates_missing_blob(banner_service, storage) -> None:
    await storage.upload("banners/1_hero.png", b"png", "image/png")
    banner = await banner_service.confirm({"storagePath": "banners/1_hero.png"})
    storage.blobs.clear()
    assert await banner_service.delete(banner.id) is True


async def test_submit_anonymous_report_drops_contact(db) -> None:
    service = ReportService(FirestoreReportRepository(db))
    report = await service.submit({"descricao": "Relato", "anonimo": True, "contato": "x@y.z"})
    assert report.status is ReportStatus.RECEBIDA
    assert report.contato is None
    assert re.fullmatch(r"\d{8}-[A-Z0-9]{6}", report.protocol)
    assert "contato" not in db.data[COLLECTION_REPORTS][report.id]


async def test_identified_report_requires_contact(db) -> None:
    service = ReportService(FirestoreReportRepository(db))
    with pytest.raises(ValidationException) as exc_info:
        await service.submit({"descricao": "Relato", "anonimo": False})
    assert exc_info.value.errors[0]["field"] == "contato"
    report = await service.submit({"descricao": "Relato", "anonimo": False, "contato": "x@y.z"})
    assert report.contato == "x@y.z"
