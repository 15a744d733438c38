"""Firestore-backed services: order assignment and the public content aggregate."""

from app.infrastructure.firebase.services.order_assignment import (
    CounterOrderAssigner,
    ScanOrderAssigner,
    create_order_assigner,
)
from app.infrastructure.firebase.services.public_content import (
    PUBLIC_SECTIONS,
    PublicContentService,
)

__all__ = [
    "PUBLIC_SECTIONS",
    "CounterOrderAssigner",
    "PublicContentService",
    "ScanOrderAssigner",
    "create_order_assigner",
]
