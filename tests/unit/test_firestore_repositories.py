"""Tests for the Firestore repositories against the in-memory client."""

import pytest

from app.domain.enums import ReportStatus, SectionType
from app.domain.exceptions import DataIntegrityException
from app.infrastructure.firebase.collections import (
    COLLECTION_BANNERS,
    COLLECTION_CANAIS_DENUNCIA,
    COLLECTION_INICIATIVAS,
    COLLECTION_NAO_SE_CALE,
    COLLECTION_POSTS,
    COLLECTION_REPORTS,
    COLLECTION_SECTIONS,
    COLLECTION_TESTIMONIALS,
)
from app.infrastructure.firebase.repositories import (
    FirestoreBannerRepository,
    FirestoreCanalDenunciaRepository,
    FirestoreIniciativaRepository,
    FirestoreNaoSeCaleRepository,
    FirestorePostRepository,
    FirestoreRawCollectionReader,
    FirestoreReportRepository,
    FirestoreSectionRepository,
    FirestoreTestimonialRepository,
)
from app.infrastructure.firebase.repositories._base import FirestoreCrudRepository
from app.infrastructure.firebase.services import ScanOrderAssigner
from tests.fakes import FakeFirestoreClient


@pytest.fixture
def db() -> FakeFirestoreClient:
    return FakeFirestoreClient()


async def test_create_assigns_id_and_timestamps(db) -> None:
    repo = FirestoreTestimonialRepository(db)
    created = await repo.create({"quote": "Uma frase longa", "author": "Ana"})
    assert created.id in db.data[COLLECTION_TESTIMONIALS]
    assert created.created_at == created.updated_at
    assert created.role is None


async def test_create_ignores_client_supplied_id_and_timestamps(db) -> None:
    repo = FirestoreTestimonialRepository(db)
    created = await repo.create(
        {"id": "mine", "createdAt": "1999-01-01T00:00:00Z", "quote": "Uma frase longa", "author": "Ana"}
    )
    assert created.id != "mine"
    assert created.created_at.year == 2024


async def test_ids_are_not_reused_after_delete(db) -> None:
    repo = FirestoreTestimonialRepository(db)
    first = await repo.create({"quote": "Uma frase longa", "author": "Ana"})
    await repo.delete(first.id)
    second = await repo.create({"quote": "Uma frase longa", "author": "Ana"})
    assert second.id != first.id


async def test_update_merges_and_refreshes_updated_at(db) -> None:
    repo = FirestoreTestimonialRepository(db)
    created = await repo.create({"quote": "Uma frase longa", "author": "Ana", "role": "Mãe"})
    updated = await repo.update(created.id, {"author": "Beatriz"})
    assert updated.author == "Beatriz"
    assert updated.role == "Mãe"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


async def test_update_and_delete_report_absence(db) -> None:
    repo = FirestoreTestimonialRepository(db)
    assert await repo.get_by_id("missing") is None
    assert await repo.update("missing", {"author": "X"}) is None
    assert await repo.delete("missing") is False
    assert "missing" not in db.data.get(COLLECTION_TESTIMONIALS, {})


async def test_list_newest_first(db) -> None:
    repo = FirestoreTestimonialRepository(db)
    older = await repo.create({"quote": "Primeira frase", "author": "Ana"})
    newer = await repo.create({"quote": "Segunda frase!", "author": "Bia"})
    assert [t.id for t in await repo.list()] == [newer.id, older.id]


async def test_legacy_documents_are_listed_with_defaults(db) -> None:
    db.seed(COLLECTION_TESTIMONIALS, "legacy", {"quote": "Sem datas nem autor"})
    [legacy] = await FirestoreTestimonialRepository(db).list()
    assert legacy.author == ""
    assert legacy.created_at is not None


async def test_ordered_repository_assigns_next_order(db) -> None:
    repo = FirestoreIniciativaRepository(db, ScanOrderAssigner(db))
    first = await repo.create({"titulo": "Uma", "conteudo": "0123456789"})
    second = await repo.create({"titulo": "Duas", "conteudo": "0123456789"})
    assert (first.ordem, second.ordem) == (1, 2)


async def test_ordered_repository_keeps_explicit_order(db) -> None:
    repo = FirestoreIniciativaRepository(db, ScanOrderAssigner(db))
    db.seed(COLLECTION_INICIATIVAS, "a", {"titulo": "A", "conteudo": "0123456789", "ordem": 9})
    created = await repo.create({"titulo": "Uma", "conteudo": "0123456789", "ordem": 3})
    assert created.ordem == 3


async def test_ordered_list_is_ascending_with_legacy_orders(db) -> None:
    db.seed(COLLECTION_CANAIS_DENUNCIA, "b", {"quantificador": "B", "valor": "2", "ordem": "3"})
    db.seed(COLLECTION_CANAIS_DENUNCIA, "a", {"quantificador": "A", "valor": "1", "ordem": 1})
    db.seed(COLLECTION_CANAIS_DENUNCIA, "z", {"quantificador": "Z", "valor": "0"})
    repo = FirestoreCanalDenunciaRepository(db, ScanOrderAssigner(db))
    assert [c.id for c in await repo.list()] == ["z", "a", "b"]
    created = await repo.create({"quantificador": "C", "valor": "3"})
    assert created.ordem == 4


async def test_missing_required_field_is_data_integrity_error(db) -> None:
    db.seed(COLLECTION_NAO_SE_CALE, "broken", {"url": "https://x.io"})
    repo = FirestoreNaoSeCaleRepository(db)
    with pytest.raises(DataIntegrityException) as exc_info:
        await repo.list()
    assert exc_info.value.details["field"] == "conteudo"


async def test_latest_posts_are_the_three_newest(db) -> None:
    repo = FirestorePostRepository(db)
    created = [
        await repo.create({"title": f"Post {i}", "content": "0123456789"}) for i in range(5)
    ]
    latest = await repo.latest(3)
    assert [p.id for p in latest] == [p.id for p in reversed(created[-3:])]


async def test_active_banners_only(db) -> None:
    db.seed(COLLECTION_BANNERS, "on", {"storagePath": "banners/a", "url": "u", "isActive": True})
    db.seed(COLLECTION_BANNERS, "off", {"storagePath": "banners/b", "url": "u", "isActive": False})
    assert [b.id for b in await FirestoreBannerRepository(db).list_active()] == ["on"]


async def test_report_defaults(db) -> None:
    db.seed(COLLECTION_REPORTS, "r1", {"protocol": "20240101-ABC123", "status": "bogus"})
    report = await FirestoreReportRepository(db).get_by_id("r1")
    assert report.status is ReportStatus.RECEBIDA
    assert report.anonimo is True
    assert report.channel == "site"
    assert report.attachments == ()


async def test_section_content_and_active_listing(db) -> None:
    repo = FirestoreSectionRepository(db)
    hidden = await repo.create({"type": "text", "title": "Oculta", "body": "0123456789", "order": 1})
    shown = await repo.create(
        {"type": "hero", "title": "Topo", "imageUrl": "https://x.io/h.png", "order": 0, "isActive": True}
    )
    assert [s.id for s in await repo.list()] == [shown.id, hidden.id]
    [active] = await repo.list_active()
    assert active.type is SectionType.HERO
    assert active.content == {"title": "Topo", "imageUrl": "https://x.io/h.png"}


async def test_section_with_unknown_type_is_data_integrity_error(db) -> None:
    db.seed(COLLECTION_SECTIONS, "s1", {"type": "carousel"})
    with pytest.raises(DataIntegrityException):
        await FirestoreSectionRepository(db).get_by_id("s1")


async def test_raw_reader_returns_documents_with_id(db) -> None:
    db.seed(COLLECTION_INICIATIVAS, "i1", {"titulo": "Raw"})
    reader = FirestoreRawCollectionReader(db)
    assert await reader.list(COLLECTION_INICIATIVAS) == [{"titulo": "Raw", "id": "i1"}]
    assert await reader.get(COLLECTION_INICIATIVAS, "nope") is None
    assert await reader.get(COLLECTION_POSTS, "nope") is None


def test_repository_without_mapper_cannot_be_built(db) -> None:
    class Unmapped(FirestoreCrudRepository[dict]):
        collection_name = "unmapped"

    with pytest.raises(TypeError):
        Unmapped(db)
