"""Firestore and Identity Toolkit REST clients against httpx.MockTransport."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from app.infrastructure.exceptions import IdentityProviderError
from app.infrastructure.firebase import _rest_client, auth_client
from app.infrastructure.firebase._rest_client import DocumentExistsError, FirestoreRESTClient
from app.infrastructure.firebase._rest_encoding import (
    SERVER_TIMESTAMP,
    decode_document,
    encode_write,
    field_path,
)
from app.infrastructure.firebase.auth_client import FirebaseAuthRESTClient

PROJECT = "demo"
DOCS = f"projects/{PROJECT}/databases/(default)/documents"


@pytest.fixture(autouse=True)
def _static_access_token(monkeypatch):
    async def fake_token(credentials):
        return "access-token"

    monkeypatch.setattr(_rest_client, "get_access_token", fake_token)
    monkeypatch.setattr(auth_client, "get_access_token", fake_token)


class Recorder:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


def _firestore(recorder: Recorder) -> FirestoreRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return FirestoreRESTClient(PROJECT, credentials=None, http_client=http)


def test_encode_write_turns_server_timestamp_into_transform() -> None:
    fields, transforms = encode_write(
        {"title": "x", "ordem": 2, "active": True, "tags": ["a"], "createdAt": SERVER_TIMESTAMP}
    )
    assert fields == {
        "title": {"stringValue": "x"},
        "ordem": {"integerValue": "2"},
        "active": {"booleanValue": True},
        "tags": {"arrayValue": {"values": [{"stringValue": "a"}]}},
    }
    assert transforms == [{"fieldPath": "createdAt", "setToServerValue": "REQUEST_TIME"}]


def test_field_path_quotes_non_identifiers() -> None:
    assert field_path("isActive") == "isActive"
    assert field_path("my-field") == "`my-field`"


def test_decode_document() -> None:
    data = decode_document(
        {
            "name": f"{DOCS}/posts/p1",
            "fields": {
                "n": {"integerValue": "3"},
                "at": {"timestampValue": "2024-05-01T12:00:00Z"},
                "meta": {"mapValue": {"fields": {"k": {"nullValue": None}}}},
            },
        }
    )
    assert data == {
        "n": 3,
        "at": datetime(2024, 5, 1, 12, tzinfo=timezone.utc),
        "meta": {"k": None},
    }


async def test_create_requires_missing_document() -> None:
    recorder = Recorder(httpx.Response(200, json={"writeResults": [{}]}))
    await _firestore(recorder).collection("posts").document("p1").create({"title": "x"})
    write = recorder.body()["writes"][0]
    assert write["currentDocument"] == {"exists": False}
    assert write["update"]["name"] == f"{DOCS}/posts/p1"
    assert recorder.requests[0].headers["Authorization"] == "Bearer access-token"


async def test_create_conflict_raises() -> None:
    recorder = Recorder(httpx.Response(409, json={"error": {"status": "ALREADY_EXISTS"}}))
    with pytest.raises(DocumentExistsError):
        await _firestore(recorder).collection("posts").document("p1").create({"title": "x"})


async def test_update_of_missing_document_returns_false() -> None:
    recorder = Recorder(httpx.Response(404, json={"error": {"status": "NOT_FOUND"}}))
    updated = await _firestore(recorder).collection("posts").document("p1").update(
        {"title": "y", "updatedAt": SERVER_TIMESTAMP}
    )
    assert updated is False
    write = recorder.body()["writes"][0]
    assert write["updateMask"] == {"fieldPaths": ["title"]}
    assert write["currentDocument"] == {"exists": True}


async def test_query_is_sent_as_structured_query() -> None:
    recorder = Recorder(
        httpx.Response(
            200,
            json=[
                {"document": {"name": f"{DOCS}/banners/b1", "fields": {"isActive": {"booleanValue": True}}}},
                {"readTime": "2024-05-01T12:00:00Z"},
            ],
        )
    )
    query = _firestore(recorder).collection("banners").where("isActive", "==", True).limit(3)
    snapshots = [s async for s in query.stream()]
    assert [(s.id, s.to_dict()) for s in snapshots] == [("b1", {"isActive": True})]
    assert recorder.body()["structuredQuery"] == {
        "from": [{"collectionId": "banners"}],
        "where": {
            "fieldFilter": {
                "field": {"fieldPath": "isActive"},
                "op": "EQUAL",
                "value": {"booleanValue": True},
            }
        },
        "limit": 3,
    }


async def test_collection_stream_follows_page_tokens() -> None:
    recorder = Recorder(
        httpx.Response(200, json={"documents": [{"name": f"{DOCS}/posts/a"}], "nextPageToken": "t"}),
        httpx.Response(200, json={"documents": [{"name": f"{DOCS}/posts/b"}]}),
    )
    ids = [s.id async for s in _firestore(recorder).collection("posts").stream()]
    assert ids == ["a", "b"]
    assert recorder.requests[1].url.params["pageToken"] == "t"


async def test_increment_returns_new_value() -> None:
    recorder = Recorder(
        httpx.Response(
            200, json={"writeResults": [{"transformResults": [{"integerValue": "7"}]}]}
        )
    )
    value = await _firestore(recorder).increment("_counters", "sectionIniciativas", "value")
    assert value == 7
    transform = recorder.body()["writes"][0]["updateTransforms"][0]
    assert transform == {"fieldPath": "value", "increment": {"integerValue": "1"}}


def _auth(recorder: Recorder) -> FirebaseAuthRESTClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    return FirebaseAuthRESTClient(PROJECT, credentials=None, http_client=http)


async def test_lookup_maps_account_record() -> None:
    recorder = Recorder(
        httpx.Response(
            200,
            json={
                "users": [
                    {
                        "localId": "u1",
                        "email": "a@example.com",
                        "customAttributes": '{"admin": true}',
                        "createdAt": "1714564800000",
                    }
                ]
            },
        )
    )
    user = await _auth(recorder).get_user("u1")
    assert user.uid == "u1"
    assert user.admin is True
    assert user.creation_time == datetime(2024, 5, 1, 12, tzinfo=timezone.utc)
    assert recorder.body() == {"localId": ["u1"]}


async def test_lookup_of_unknown_uid_is_none() -> None:
    recorder = Recorder(httpx.Response(200, json={"kind": "identitytoolkit#GetAccountInfoResponse"}))
    assert await _auth(recorder).get_user("ghost") is None


async def test_provider_error_code_is_extracted() -> None:
    recorder = Recorder(
        httpx.Response(
            400,
            json={"error": {"code": 400, "message": "WEAK_PASSWORD : Password should be at least 6 characters"}},
        )
    )
    with pytest.raises(IdentityProviderError) as exc_info:
        await _auth(recorder).create_user("a@example.com", "123")
    assert exc_info.value.provider_code == "WEAK_PASSWORD"
    assert exc_info.value.status_code == 400


async def test_set_custom_claims_sends_json_attributes() -> None:
    recorder = Recorder(httpx.Response(200, json={"localId": "u1"}))
    await _auth(recorder).set_custom_claims("u1", {"admin": True})
    assert recorder.body() == {"localId": "u1", "customAttributes": '{"admin": true}'}
