"""Public read routes and report submission (no auth)."""

import re

from app.infrastructure.firebase.collections import (
    COLLECTION_BANNERS,
    COLLECTION_CARROSSEL,
    COLLECTION_DOCUMENTOS,
    COLLECTION_POSTS,
    COLLECTION_REPORTS,
    COLLECTION_SECTIONS,
    COLLECTION_TESTIMONIALS,
)
from app.infrastructure.firebase.services.public_content import PUBLIC_SECTIONS


async def test_aggregate_has_every_section_key(client) -> None:
    response = await client.get("/api/public")
    assert response.status_code == 200
    body = response.json()
    assert list(body) == [key for key, _ in PUBLIC_SECTIONS]
    assert all(value == [] for value in body.values())


async def test_aggregate_returns_documents_as_stored(client, firestore) -> None:
    firestore.seed(COLLECTION_CARROSSEL, "c1", {"imagem": "https://example.com/1.png", "extra": 1})
    response = await client.get("/api/public")
    assert response.json()["section0Carrossel"] == [
        {"imagem": "https://example.com/1.png", "extra": 1, "id": "c1"}
    ]


async def test_testimonial_lookup(client, firestore) -> None:
    firestore.seed(COLLECTION_TESTIMONIALS, "t1", {"quote": "Um depoimento qualquer.", "author": "Ana"})
    listed = await client.get("/api/public/testimonials")
    assert [t["id"] for t in listed.json()] == ["t1"]
    found = await client.get("/api/public/testimonials/t1")
    assert found.json()["author"] == "Ana"
    missing = await client.get("/api/public/testimonials/nope")
    assert missing.status_code == 404
    assert missing.json() == {"error": "RESOURCE_NOT_FOUND", "message": "Depoimento não encontrado"}


async def test_last_posts_are_the_three_newest(client, admin_headers) -> None:
    ids = []
    for n in range(5):
        response = await client.post(
            "/api/admin/posts",
            json={"title": f"Post {n}", "content": "Conteúdo do post em destaque."},
            headers=admin_headers,
        )
        ids.append(response.json()["id"])
    response = await client.get("/api/public/lastPosts")
    assert [p["id"] for p in response.json()] == list(reversed(ids[-3:]))


async def test_last_posts_with_fewer_posts(client, firestore) -> None:
    firestore.seed(
        COLLECTION_POSTS,
        "p1",
        {"title": "Só", "content": "Conteúdo do post.", "createdAt": firestore.now()},
    )
    response = await client.get("/api/public/lastPosts")
    assert [p["id"] for p in response.json()] == ["p1"]


async def test_only_active_banners_are_public(client, firestore) -> None:
    firestore.seed(
        COLLECTION_BANNERS, "on", {"storagePath": "banners/a.png", "url": "https://x/a.png", "isActive": True}
    )
    firestore.seed(
        COLLECTION_BANNERS, "off", {"storagePath": "banners/b.png", "url": "https://x/b.png", "isActive": False}
    )
    response = await client.get("/api/public/banners")
    assert [b["id"] for b in response.json()] == ["on"]


async def test_only_active_sections_are_public(client, firestore) -> None:
    firestore.seed(
        COLLECTION_SECTIONS,
        "s1",
        {"type": "text", "title": "Sobre", "body": "Texto da seção.", "order": 1, "isActive": True},
    )
    firestore.seed(
        COLLECTION_SECTIONS,
        "s2",
        {"type": "text", "title": "Rascunho", "body": "Texto da seção.", "order": 0, "isActive": False},
    )
    listed = await client.get("/api/public/sections")
    assert [s["id"] for s in listed.json()] == ["s1"]
    assert listed.json()[0]["body"] == "Texto da seção."

    assert (await client.get("/api/public/sections/s1")).status_code == 200
    hidden = await client.get("/api/public/sections/s2")
    assert hidden.status_code == 404
    assert hidden.json()["message"] == "Seção não encontrada"


async def test_document_lookup(client, firestore) -> None:
    firestore.seed(COLLECTION_DOCUMENTOS, "d1", {"titulo": "Cartilha", "arquivo": "https://x/c.pdf"})
    found = await client.get("/api/public/documents/d1")
    assert found.json() == {"titulo": "Cartilha", "arquivo": "https://x/c.pdf", "id": "d1"}
    missing = await client.get("/api/public/documents/nope")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Documento não encontrado"


async def test_submit_anonymous_report(client, firestore) -> None:
    response = await client.post(
        "/api/public/reports", json={"descricao": "Aconteceu algo.", "contato": "a@b.c"}
    )
    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "protocol", "status", "createdAt"}
    assert body["status"] == "recebida"
    assert re.fullmatch(r"\d{8}-[A-Z0-9]{6}", body["protocol"])
    stored = firestore.data[COLLECTION_REPORTS][body["id"]]
    assert "contato" not in stored
    assert stored["channel"] == "site"


async def test_identified_report_needs_contact(client, firestore) -> None:
    response = await client.post(
        "/api/public/reports", json={"descricao": "Aconteceu algo.", "anonimo": False}
    )
    assert response.status_code == 400
    assert response.json()["details"]["errors"] == [
        {"field": "contato", "message": "Contato é obrigatório quando a denúncia não é anônima"}
    ]
    assert COLLECTION_REPORTS not in firestore.data


async def test_report_attachment_must_be_under_reports(client) -> None:
    response = await client.post(
        "/api/public/reports",
        json={"descricao": "Com anexo.", "attachments": [{"storagePath": "banners/x.png"}]},
    )
    assert response.status_code == 400
    assert response.json()["details"]["errors"][0]["field"] == "attachments.0.storagePath"


async def test_report_with_attachment_is_stored(client, firestore) -> None:
    response = await client.post(
        "/api/public/reports",
        json={
            "descricao": "Com anexo.",
            "attachments": [{"storagePath": "reports/1_foto.jpg", "contentType": "image/jpeg"}],
        },
    )
    assert response.status_code == 201
    stored = firestore.data[COLLECTION_REPORTS][response.json()["id"]]
    assert stored["attachments"] == [
        {"storagePath": "reports/1_foto.jpg", "contentType": "image/jpeg"}
    ]
