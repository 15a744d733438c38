"""Admin CRUD for the managed content collections."""

import pytest

from app.infrastructure.firebase.collections import (
    COLLECTION_CANAIS_DENUNCIA,
    COLLECTION_INICIATIVAS,
    COLLECTION_TESTIMONIALS,
)

RESOURCES = [
    (
        "testimonials",
        {"quote": "Um depoimento longo o bastante.", "author": "Maria", "role": "Voluntária"},
        {"author": "Maria Silva"},
    ),
    (
        "posts",
        {
            "title": "Campanha",
            "content": "Conteúdo do post em destaque.",
            "imageUrl": "https://example.com/p.png",
        },
        {"title": "Campanha 2024"},
    ),
    (
        "iniciativas",
        {"titulo": "Mutirão", "conteudo": "Descrição da iniciativa.", "url": "https://example.com"},
        {"titulo": "Mutirão de inverno"},
    ),
    (
        "canaisDenuncia",
        {"quantificador": "Ligue", "valor": "180"},
        {"valor": "190"},
    ),
    (
        "naoSeCale",
        {"url": "https://example.com/video", "conteudo": "Texto"},
        {"conteudo": "Outro texto"},
    ),
    (
        "porqueAderimos",
        {"titulo": "Por quê", "conteudo": "Motivo", "url": "/sobre"},
        {"url": "/adesao"},
    ),
]


@pytest.mark.parametrize("resource,payload,changes", RESOURCES)
async def test_crud_cycle(client, admin_headers, resource, payload, changes) -> None:
    base = f"/api/admin/{resource}"

    created = await client.post(base, json=payload, headers=admin_headers)
    assert created.status_code == 201
    body = created.json()
    item_id = body["id"]
    for key, value in payload.items():
        assert body[key] == value
    assert body["createdAt"] == body["updatedAt"]

    listed = await client.get(base, headers=admin_headers)
    assert [item["id"] for item in listed.json()] == [item_id]

    updated = await client.put(f"{base}/{item_id}", json=changes, headers=admin_headers)
    assert updated.status_code == 200
    updated_body = updated.json()
    for key, value in changes.items():
        assert updated_body[key] == value
    assert updated_body["createdAt"] == body["createdAt"]
    assert updated_body["updatedAt"] > body["updatedAt"]

    fetched = await client.get(f"{base}/{item_id}", headers=admin_headers)
    assert fetched.json() == updated_body

    deleted = await client.delete(f"{base}/{item_id}", headers=admin_headers)
    assert deleted.status_code == 204
    assert deleted.content == b""

    missing = await client.get(f"{base}/{item_id}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["error"] == "RESOURCE_NOT_FOUND"


@pytest.mark.parametrize("resource", [r[0] for r in RESOURCES])
async def test_update_and_delete_unknown_id_are_404(client, admin_headers, resource) -> None:
    base = f"/api/admin/{resource}"
    update = await client.put(f"{base}/nope", json={}, headers=admin_headers)
    assert update.status_code == 404
    delete = await client.delete(f"{base}/nope", headers=admin_headers)
    assert delete.status_code == 404


@pytest.mark.parametrize("resource,payload,changes", RESOURCES)
async def test_empty_update_only_touches_updated_at(
    client, admin_headers, resource, payload, changes
) -> None:
    base = f"/api/admin/{resource}"
    created = (await client.post(base, json=payload, headers=admin_headers)).json()

    updated = await client.put(f"{base}/{created['id']}", json={}, headers=admin_headers)
    assert updated.status_code == 200
    body = updated.json()
    assert body["updatedAt"] > created["updatedAt"]
    assert {k: v for k, v in body.items() if k != "updatedAt"} == {
        k: v for k, v in created.items() if k != "updatedAt"
    }


@pytest.mark.parametrize("resource,payload,changes", RESOURCES)
async def test_second_delete_is_404(client, admin_headers, resource, payload, changes) -> None:
    base = f"/api/admin/{resource}"
    item_id = (await client.post(base, json=payload, headers=admin_headers)).json()["id"]

    first = await client.delete(f"{base}/{item_id}", headers=admin_headers)
    assert first.status_code == 204
    second = await client.delete(f"{base}/{item_id}", headers=admin_headers)
    assert second.status_code == 404
    assert second.json()["error"] == "RESOURCE_NOT_FOUND"


@pytest.mark.parametrize(
    ("resource", "payload"),
    [
        ("iniciativas", {"titulo": "Mutirão", "conteudo": "Descrição da iniciativa."}),
        ("canaisDenuncia", {"quantificador": "Ligue", "valor": "180"}),
    ],
)
async def test_creates_without_order_are_numbered_from_one(
    client, admin_headers, resource, payload
) -> None:
    base = f"/api/admin/{resource}"
    for _ in range(4):
        response = await client.post(base, json=payload, headers=admin_headers)
        assert response.status_code == 201

    listed = await client.get(base, headers=admin_headers)
    assert [item["ordem"] for item in listed.json()] == [1, 2, 3, 4]


async def test_create_reports_every_invalid_field(client, admin_headers) -> None:
    response = await client.post(
        "/api/admin/testimonials",
        json={"quote": "curto", "imageUrl": "not a url"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    fields = {e["field"] for e in body["details"]["errors"]}
    assert fields == {"quote", "author", "imageUrl"}


async def test_update_rejects_invalid_field(client, admin_headers, firestore) -> None:
    firestore.seed(COLLECTION_TESTIMONIALS, "t1", {"quote": "Um depoimento antigo.", "author": "Ana"})
    response = await client.put(
        "/api/admin/testimonials/t1", json={"quote": "curto"}, headers=admin_headers
    )
    assert response.status_code == 400
    assert firestore.data[COLLECTION_TESTIMONIALS]["t1"]["quote"] == "Um depoimento antigo."


async def test_update_keeps_unsent_fields(client, admin_headers, firestore) -> None:
    firestore.seed(
        COLLECTION_TESTIMONIALS,
        "t1",
        {"quote": "Um depoimento antigo.", "author": "Ana", "role": "Mãe"},
    )
    response = await client.put(
        "/api/admin/testimonials/t1", json={"author": "Ana Paula"}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["role"] == "Mãe"
    assert response.json()["author"] == "Ana Paula"


async def test_update_null_clears_optional_field(client, admin_headers, firestore) -> None:
    firestore.seed(
        COLLECTION_TESTIMONIALS,
        "t1",
        {
            "quote": "Um depoimento antigo.",
            "author": "Ana",
            "role": "Mãe",
            "imageUrl": "https://example.com/ana.png",
        },
    )
    response = await client.put(
        "/api/admin/testimonials/t1",
        json={"role": None, "imageUrl": None, "author": None},
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert (body["role"], body["imageUrl"], body["author"]) == (None, None, "Ana")
    stored = firestore.data[COLLECTION_TESTIMONIALS]["t1"]
    assert stored["role"] is None
    assert stored["author"] == "Ana"


async def test_client_supplied_id_and_timestamps_are_ignored(client, admin_headers) -> None:
    response = await client.post(
        "/api/admin/posts",
        json={
            "id": "mine",
            "title": "Campanha",
            "content": "Conteúdo do post em destaque.",
            "createdAt": "1999-01-01T00:00:00Z",
        },
        headers=admin_headers,
    )
    body = response.json()
    assert body["id"] != "mine"
    assert not body["createdAt"].startswith("1999")


async def test_iniciativa_order_is_assigned_after_the_highest(client, admin_headers, firestore) -> None:
    firestore.seed(COLLECTION_INICIATIVAS, "a", {"titulo": "A", "conteudo": "Conteúdo A", "ordem": 4})
    response = await client.post(
        "/api/admin/iniciativas",
        json={"titulo": "Nova", "conteudo": "Conteúdo novo"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["ordem"] == 5

    explicit = await client.post(
        "/api/admin/iniciativas",
        json={"titulo": "Fixa", "conteudo": "Conteúdo fixo", "ordem": 2},
        headers=admin_headers,
    )
    assert explicit.json()["ordem"] == 2


async def test_iniciativas_listed_by_ordem(client, admin_headers, firestore) -> None:
    firestore.seed(COLLECTION_INICIATIVAS, "b", {"titulo": "B", "conteudo": "Conteúdo B", "ordem": 2})
    firestore.seed(COLLECTION_INICIATIVAS, "a", {"titulo": "A", "conteudo": "Conteúdo A", "ordem": 1})
    response = await client.get("/api/admin/iniciativas", headers=admin_headers)
    assert [i["id"] for i in response.json()] == ["a", "b"]


@pytest.mark.parametrize(
    ("path", "body"),
    [
        ("/api/admin/iniciativas", {"titulo": "Nova", "conteudo": "Conteúdo novo", "ordem": -1}),
        ("/api/admin/iniciativas", {"titulo": "Nova", "conteudo": "Conteúdo novo", "ordem": 0}),
        ("/api/admin/canaisDenuncia", {"quantificador": "Ligue", "valor": "180", "ordem": -5}),
        ("/api/admin/canaisDenuncia", {"quantificador": "Ligue", "valor": "180", "ordem": 0}),
    ],
)
async def test_order_below_one_is_rejected(client, admin_headers, firestore, path, body) -> None:
    response = await client.post(path, json=body, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["details"]["errors"][0]["field"] == "ordem"
    assert firestore.data == {}


async def test_first_canal_gets_order_one(client, admin_headers, firestore) -> None:
    response = await client.post(
        "/api/admin/canaisDenuncia",
        json={"quantificador": "Ligue", "valor": "180"},
        headers=admin_headers,
    )
    assert response.json()["ordem"] == 1
    assert firestore.data[COLLECTION_CANAIS_DENUNCIA][response.json()["id"]]["ordem"] == 1
