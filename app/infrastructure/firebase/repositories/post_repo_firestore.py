"""Firestore-backed highlighted post repository."""

from __future__ import annotations

from typing import Any

from app.application.dtos.post import PostResult
from app.infrastructure.firebase.collections import COLLECTION_POSTS
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
    optional_str,
)
from app.shared.telemetry.tracing import traced

LATEST_POSTS_LIMIT = 3


class FirestorePostRepository(FirestoreCrudRepository[PostResult]):
    """Posts, newest first."""

    collection_name = COLLECTION_POSTS

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> PostResult:
        return PostResult(
            id=doc_id,
            title=data.get("title") or "",
            content=data.get("content") or "",
            author=optional_str(data.get("author")),
            image_url=optional_str(data.get("imageUrl")),
            post_url=optional_str(data.get("postUrl")),
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )

    @traced("firestore.posts.latest")
    async def latest(self, limit: int = LATEST_POSTS_LIMIT) -> list[PostResult]:
        """Newest posts by createdAt (server-side order and limit)."""
        query = self._coll.order_by("createdAt", "DESCENDING").limit(limit)
        return [self._to_result(s.id, s.to_dict()) async for s in query.stream()]
