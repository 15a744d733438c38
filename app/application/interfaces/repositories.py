"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Absence is reported with None / False, never with an exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from app.application.dtos.banner import BannerResult
    from app.application.dtos.post import PostResult
    from app.application.dtos.section import SectionResult

T = TypeVar("T")


# Generic CRUD over one Firestore collection
class ICrudRepository(Protocol[T]):
    """Protocol shared by every content repository."""

    async def list(self) -> list[T]:
        """Return every document, sorted by the resource's declared key."""

    async def get_by_id(self, doc_id: str) -> T | None:
        """Return the document or None if it does not exist."""

    async def create(self, data: dict[str, Any]) -> T:
        """Create with a fresh id and server timestamps; return the stored document."""

    async def update(self, doc_id: str, data: dict[str, Any]) -> T | None:
        """Merge supplied fields, refresh updatedAt; None if the document does not exist."""

    async def delete(self, doc_id: str) -> bool:
        """Delete; False if the document did not exist."""


class IPostRepository(ICrudRepository["PostResult"], Protocol):
    async def latest(self, limit: int = 3) -> list[PostResult]:
        """Return the newest posts (createdAt desc)."""


class IBannerRepository(ICrudRepository["BannerResult"], Protocol):
    async def list_active(self) -> list[BannerResult]:
        """Return banners with isActive == true."""


class ISectionRepository(ICrudRepository["SectionResult"], Protocol):
    async def list_active(self) -> list[SectionResult]:
        """Return active sections ordered by order."""


class IRawCollectionReader(Protocol):
    """Pass-through reads of collections this API does not manage."""

    async def list(self, collection: str) -> list[dict[str, Any]]:
        """Return every document as {"id": ..., **fields}."""

    async def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return one document as {"id": ..., **fields} or None."""
