"""Firestore-backed testimonial repository."""

from __future__ import annotations

from typing import Any

from app.application.dtos.testimonial import TestimonialResult
from app.infrastructure.firebase.collections import COLLECTION_TESTIMONIALS
from app.infrastructure.firebase.repositories._base import (
    FirestoreCrudRepository,
    as_datetime,
    optional_str,
)


class FirestoreTestimonialRepository(FirestoreCrudRepository[TestimonialResult]):
    """Testimonials, newest first."""

    collection_name = COLLECTION_TESTIMONIALS

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> TestimonialResult:
        return TestimonialResult(
            id=doc_id,
            quote=data.get("quote") or "",
            author=data.get("author") or "",
            role=optional_str(data.get("role")),
            image_url=optional_str(data.get("imageUrl")),
            created_at=as_datetime(data.get("createdAt")),
            updated_at=as_datetime(data.get("updatedAt")),
        )
