"""DTOs for testimonials (no dependency on Firestore)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TestimonialResult:
    """Testimonial read-model."""

    id: str
    quote: str
    author: str
    role: str | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime
