"""Generic page section (publicContent) API schemas.

A section's type is fixed at creation and selects its field set. Every
kind carries order (default 0) and isActive (default false). SECTION_MODELS
maps each SectionType to its create and update models; a kind missing from
the registry cannot be created or updated.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import ConfigDict, EmailStr, Field

from app.domain.enums import SectionType
from app.schemas.base import CamelModel, CamelResponse, UrlStr
from app.schemas.validation import FieldError, ValidationResult, validate_payload


# Nested items


class GalleryImage(CamelModel):
    url: UrlStr
    alt: str = Field(..., min_length=1)
    caption: str | None = None


class NavLink(CamelModel):
    text: str = Field(..., min_length=1)
    url: UrlStr
    target: Literal["_self", "_blank"] = "_self"


class SocialLink(CamelModel):
    platform: str = Field(..., min_length=1)
    url: UrlStr
    icon_url: UrlStr | None = None


class ReportingChannel(CamelModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    phone: str | None = None
    website: UrlStr | None = None


class PoliceStation(CamelModel):
    name: str = Field(..., min_length=1)
    address: str | None = None
    phone: str = Field(..., min_length=8)


class Partner(CamelModel):
    name: str = Field(..., min_length=1)
    logo_url: UrlStr
    website_url: UrlStr | None = None
    description: str | None = None


class TestimonialItem(CamelModel):
    type: Literal["testimonial"]
    quote: str = Field(..., min_length=10)
    author: str = Field(..., min_length=3)
    role: str | None = None
    image_url: UrlStr | None = None


class VideoItem(CamelModel):
    type: Literal["video"]
    title: str = Field(..., min_length=3)
    video_url: UrlStr
    thumbnail_url: UrlStr | None = None
    description: str | None = None


class PostItem(CamelModel):
    type: Literal["post"]
    title: str = Field(..., min_length=3)
    content: str = Field(..., min_length=10)
    image_url: UrlStr | None = None
    author: str | None = None
    post_url: UrlStr | None = None


MediaItem = Annotated[Union[TestimonialItem, VideoItem, PostItem], Field(discriminator="type")]


class IniciativaItem(CamelModel):
    type: Literal["iniciativa"]
    titulo: str = Field(..., min_length=3)
    url: UrlStr
    ordem: int = Field(..., ge=0)
    conteudo: str = Field(..., min_length=10)


# Create models (one per kind)


class SectionBase(CamelModel):
    order: int = 0
    is_active: bool = False


class HeroSection(SectionBase):
    type: Literal["hero"]
    title: str = Field(..., min_length=3)
    subtitle: str | None = None
    image_url: UrlStr
    cta_text: str | None = None
    cta_link: str | None = None


class TextSection(SectionBase):
    type: Literal["text"]
    title: str = Field(..., min_length=3)
    body: str = Field(..., min_length=10)


class ImageGallerySection(SectionBase):
    type: Literal["imageGallery"]
    title: str = Field(..., min_length=3)
    description: str | None = None
    images: list[GalleryImage] = Field(..., min_length=1)


class GlobalContentSection(SectionBase):
    type: Literal["globalContent"]
    name: str = Field(..., min_length=1)
    logo_url: UrlStr | None = None
    logo_alt: str | None = None
    nav_links: list[NavLink] | None = None
    social_links: list[SocialLink] | None = None
    main_text: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    contact_address: str | None = None


class ReportingChannelsSection(SectionBase):
    type: Literal["reportingChannels"]
    title: str = Field(..., min_length=3)
    description: str | None = None
    channels: list[ReportingChannel] | None = None
    police_stations: list[PoliceStation] | None = None


class PartnerInstitutionsSection(SectionBase):
    type: Literal["partnerInstitutions"]
    title: str = Field(..., min_length=3)
    description: str | None = None
    partners: list[Partner] = Field(..., min_length=1)


class TestimonialsAndVideosSection(SectionBase):
    type: Literal["testimonialsAndVideos"]
    title: str = Field(..., min_length=3)
    description: str | None = None
    items: list[MediaItem] = Field(..., min_length=1)


class IniciativasSection(SectionBase):
    type: Literal["sectionIniciativas"]
    title: str = Field(..., min_length=3)
    description: str | None = None
    items: list[IniciativaItem] = Field(..., min_length=1)


AnySection = Annotated[
    Union[
        HeroSection,
        TextSection,
        ImageGallerySection,
        GlobalContentSection,
        ReportingChannelsSection,
        PartnerInstitutionsSection,
        TestimonialsAndVideosSection,
        IniciativasSection,
    ],
    Field(discriminator="type"),
]


# Update models (every field optional, constraints kept; type is not updatable)


class SectionUpdateBase(CamelModel):
    order: int | None = None
    is_active: bool | None = None


class HeroSectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"subtitle", "cta_text", "cta_link"})

    title: str | None = Field(default=None, min_length=3)
    subtitle: str | None = None
    image_url: UrlStr | None = None
    cta_text: str | None = None
    cta_link: str | None = None


class TextSectionUpdate(SectionUpdateBase):
    title: str | None = Field(default=None, min_length=3)
    body: str | None = Field(default=None, min_length=10)


class ImageGallerySectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    images: list[GalleryImage] | None = Field(default=None, min_length=1)


class GlobalContentSectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset(
        {
            "logo_url",
            "logo_alt",
            "nav_links",
            "social_links",
            "main_text",
            "contact_email",
            "contact_phone",
            "contact_address",
        }
    )

    name: str | None = Field(default=None, min_length=1)
    logo_url: UrlStr | None = None
    logo_alt: str | None = None
    nav_links: list[NavLink] | None = None
    social_links: list[SocialLink] | None = None
    main_text: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    contact_address: str | None = None


class ReportingChannelsSectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset(
        {"description", "channels", "police_stations"}
    )

    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    channels: list[ReportingChannel] | None = None
    police_stations: list[PoliceStation] | None = None


class PartnerInstitutionsSectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    partners: list[Partner] | None = Field(default=None, min_length=1)


class TestimonialsAndVideosSectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    items: list[MediaItem] | None = Field(default=None, min_length=1)


class IniciativasSectionUpdate(SectionUpdateBase):
    clearable_fields: ClassVar[frozenset[str]] = frozenset({"description"})

    title: str | None = Field(default=None, min_length=3)
    description: str | None = None
    items: list[IniciativaItem] | None = Field(default=None, min_length=1)


SECTION_MODELS: dict[SectionType, tuple[type[SectionBase], type[SectionUpdateBase]]] = {
    SectionType.HERO: (HeroSection, HeroSectionUpdate),
    SectionType.TEXT: (TextSection, TextSectionUpdate),
    SectionType.IMAGE_GALLERY: (ImageGallerySection, ImageGallerySectionUpdate),
    SectionType.GLOBAL_CONTENT: (GlobalContentSection, GlobalContentSectionUpdate),
    SectionType.REPORTING_CHANNELS: (ReportingChannelsSection, ReportingChannelsSectionUpdate),
    SectionType.PARTNER_INSTITUTIONS: (
        PartnerInstitutionsSection,
        PartnerInstitutionsSectionUpdate,
    ),
    SectionType.TESTIMONIALS_AND_VIDEOS: (
        TestimonialsAndVideosSection,
        TestimonialsAndVideosSectionUpdate,
    ),
    SectionType.SECTION_INICIATIVAS: (IniciativasSection, IniciativasSectionUpdate),
}


def _section_type(data: Any) -> SectionType | None:
    if not isinstance(data, Mapping):
        return None
    try:
        return SectionType(data.get("type"))
    except ValueError:
        return None


def _unknown_type() -> ValidationResult[Any]:
    return ValidationResult.failure(
        [FieldError("type", f"must be one of: {', '.join(SectionType.values())}")]
    )


def validate_section_create(data: Any) -> ValidationResult[SectionBase]:
    """Pick the create model from data["type"] and validate against it."""
    kind = _section_type(data)
    if kind is None:
        return _unknown_type()
    create_model, _ = SECTION_MODELS[kind]
    return validate_payload(create_model, data)


def validate_section_update(kind: SectionType, data: Any) -> ValidationResult[SectionUpdateBase]:
    """Validate a partial update for a stored section of the given kind.

    A "type" key is allowed only when it repeats the stored kind.
    """
    if isinstance(data, Mapping) and "type" in data and data["type"] != kind.value:
        return ValidationResult.failure(
            [FieldError("type", "Section type cannot be changed")]
        )
    _, update_model = SECTION_MODELS[kind]
    return validate_payload(update_model, data)


class SectionResponse(CamelResponse):
    """A section as stored: shared fields plus its kind-specific keys."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: SectionType
    order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_result(cls, result: Any) -> "SectionResponse":
        return cls.model_validate(
            {
                **result.content,
                "id": result.id,
                "type": result.type,
                "order": result.order,
                "isActive": result.is_active,
                "createdAt": result.created_at,
                "updatedAt": result.updated_at,
            }
        )
