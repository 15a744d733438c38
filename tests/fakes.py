"""In-memory stand-ins for the Firestore, Cloud Storage and Firebase Auth clients.

They implement the same surface the repositories and services call, so the
app can be exercised end to end without Google APIs.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Any, AsyncIterator

from app.application.dtos.user import UserResult
from app.infrastructure.exceptions import IdentityProviderError, InvalidIdTokenError
from app.infrastructure.firebase._rest_client import DocumentExistsError
from app.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeSnapshot:
    def __init__(self, id_: str, data: dict[str, Any]) -> None:
        self.id = id_
        self._data = data

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


class FakeDocumentReference:
    def __init__(self, db: "FakeFirestoreClient", collection: str, doc_id: str) -> None:
        self._db = db
        self._collection = collection
        self.id = doc_id

    @property
    def _docs(self) -> dict[str, dict[str, Any]]:
        return self._db.data.setdefault(self._collection, {})

    async def get(self) -> FakeSnapshot | None:
        data = self._docs.get(self.id)
        return None if data is None else FakeSnapshot(self.id, data)

    async def create(self, data: dict[str, Any]) -> None:
        if self.id in self._docs:
            raise DocumentExistsError(self.id)
        self._docs[self.id] = self._db.resolve(data)

    async def update(self, data: dict[str, Any]) -> bool:
        if self.id not in self._docs:
            return False
        self._docs[self.id] = {**self._docs[self.id], **self._db.resolve(data)}
        return True

    async def delete(self) -> None:
        self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(self, db: "FakeFirestoreClient", collection: str) -> None:
        self._db = db
        self._collection = collection
        self._filters: list[tuple[str, Any]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> "FakeQuery":
        if op != "==":
            raise NotImplementedError(op)
        self._filters.append((field, value))
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        self._order = (field, direction == "DESCENDING")
        return self

    def limit(self, n: int) -> "FakeQuery":
        self._limit = n
        return self

    async def stream(self) -> AsyncIterator[FakeSnapshot]:
        docs = [
            (doc_id, data)
            for doc_id, data in self._db.data.get(self._collection, {}).items()
            if all(data.get(f) == v for f, v in self._filters)
        ]
        if self._order is not None:
            field, descending = self._order
            # Firestore omits documents without the ordered field
            docs = [d for d in docs if field in d[1]]
            docs.sort(key=lambda d: d[1][field], reverse=descending)
        if self._limit:
            docs = docs[: self._limit]
        for doc_id, data in docs:
            yield FakeSnapshot(doc_id, data)


class FakeCollectionReference:
    def __init__(self, db: "FakeFirestoreClient", name: str) -> None:
        self._db = db
        self.id = name

    def document(self, doc_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self._db, self.id, doc_id)

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        return FakeQuery(self._db, self.id).where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        return FakeQuery(self._db, self.id).order_by(field, direction)

    async def stream(self) -> AsyncIterator[FakeSnapshot]:
        for doc_id, data in list(self._db.data.get(self.id, {}).items()):
            yield FakeSnapshot(doc_id, data)


class FakeFirestoreClient:
    """Collections as nested dicts. SERVER_TIMESTAMP resolves to a strictly increasing clock."""

    def __init__(self) -> None:
        self.data: dict[str, dict[str, dict[str, Any]]] = {}
        self._ticks = itertools.count(1)

    def now(self) -> datetime:
        return _EPOCH + timedelta(seconds=next(self._ticks))

    def resolve(self, data: dict[str, Any]) -> dict[str, Any]:
        stamp = None
        out = {}
        for key, value in data.items():
            if value is SERVER_TIMESTAMP:
                stamp = stamp or self.now()
                value = stamp
            out[key] = value
        return out

    def collection(self, name: str) -> FakeCollectionReference:
        return FakeCollectionReference(self, name)

    def seed(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self.data.setdefault(collection, {})[doc_id] = dict(data)

    async def increment(
        self, collection_id: str, document_id: str, field: str, amount: int = 1
    ) -> int:
        doc = self.data.setdefault(collection_id, {}).setdefault(document_id, {})
        doc[field] = int(doc.get(field, 0)) + amount
        return doc[field]


@dataclass
class StoredBlob:
    data: bytes
    content_type: str
    public: bool = False


class FakeStorage:
    """Bucket as a dict of storage_path -> StoredBlob."""

    def __init__(self, bucket: str = "test-bucket") -> None:
        self.bucket = bucket
        self.blobs: dict[str, StoredBlob] = {}
        self.signed: list[tuple[str, str, int]] = []

    async def upload(self, storage_path: str, data: bytes, content_type: str) -> dict[str, Any]:
        self.blobs[storage_path] = StoredBlob(data, content_type)
        return {"name": storage_path, "size": str(len(data))}

    async def make_public(self, storage_path: str) -> None:
        self.blobs[storage_path].public = True

    async def get_metadata(self, storage_path: str) -> dict[str, Any] | None:
        blob = self.blobs.get(storage_path)
        if blob is None:
            return None
        return {"name": storage_path, "contentType": blob.content_type, "size": str(len(blob.data))}

    async def delete(self, storage_path: str, ignore_not_found: bool = True) -> bool:
        return self.blobs.pop(storage_path, None) is not None

    def public_url(self, storage_path: str) -> str:
        return f"https://storage.googleapis.com/{self.bucket}/{storage_path}"

    async def generate_upload_url(
        self, storage_path: str, content_type: str, expiration_seconds: int
    ) -> str:
        self.signed.append((storage_path, content_type, expiration_seconds))
        return f"https://storage.googleapis.com/{self.bucket}/{storage_path}?X-Goog-Signature=fake"


class FakeAuth:
    """Accounts keyed by uid; ID tokens are registered with issue_token()."""

    def __init__(self) -> None:
        self.users: dict[str, UserResult] = {}
        self.tokens: dict[str, dict[str, Any]] = {}
        self._uids = itertools.count(1)

    def add_user(
        self, email: str, uid: str | None = None, claims: dict[str, Any] | None = None
    ) -> UserResult:
        uid = uid or f"uid-{next(self._uids)}"
        user = UserResult(
            uid=uid,
            email=email,
            display_name=None,
            disabled=False,
            custom_claims=dict(claims or {}),
            creation_time=_EPOCH,
        )
        self.users[uid] = user
        return user

    def issue_token(self, uid: str, **claims: Any) -> str:
        token = f"token-{uid}"
        self.tokens[token] = {"sub": uid, **claims}
        return token

    async def verify_id_token(self, token: str, check_revoked: bool = True) -> dict[str, Any]:
        claims = self.tokens.get(token)
        if claims is None:
            raise InvalidIdTokenError()
        return {**claims, "uid": claims["sub"]}

    async def create_user(self, email: str, password: str) -> str:
        if len(password) < 6:
            raise IdentityProviderError("WEAK_PASSWORD", "Password should be at least 6 characters")
        if any(u.email == email for u in self.users.values()):
            raise IdentityProviderError("EMAIL_EXISTS", "EMAIL_EXISTS")
        return self.add_user(email).uid

    async def get_user(self, uid: str) -> UserResult | None:
        return self.users.get(uid)

    async def get_user_by_email(self, email: str) -> UserResult | None:
        return next((u for u in self.users.values() if u.email == email), None)

    async def list_users(self) -> list[UserResult]:
        return list(self.users.values())

    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        if uid not in self.users:
            raise IdentityProviderError("USER_NOT_FOUND", "USER_NOT_FOUND")
        self.users[uid] = replace(self.users[uid], custom_claims=dict(claims))

    async def delete_user(self, uid: str) -> None:
        if self.users.pop(uid, None) is None:
            raise IdentityProviderError("USER_NOT_FOUND", "USER_NOT_FOUND")


@dataclass
class FakeClients:
    """Same shape as FirebaseClients."""

    firestore: FakeFirestoreClient
    auth: FakeAuth
    storage: FakeStorage

    async def aclose(self) -> None:
        return None
