"""Domain enumerations for the content API.

Enums represent fixed sets of domain values (section kinds, report status,
signed upload types).
"""

from enum import Enum


class SectionType(str, Enum):
    """Kinds of configurable page sections stored in publicContent.

    The kind is fixed at creation and determines the section's field set.
    """

    HERO = "hero"
    TEXT = "text"
    IMAGE_GALLERY = "imageGallery"
    GLOBAL_CONTENT = "globalContent"
    REPORTING_CHANNELS = "reportingChannels"
    PARTNER_INSTITUTIONS = "partnerInstitutions"
    TESTIMONIALS_AND_VIDEOS = "testimonialsAndVideos"
    SECTION_INICIATIVAS = "sectionIniciativas"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid section kinds as strings."""
        return [kind.value for kind in cls]


class ReportStatus(str, Enum):
    """Lifecycle of a submitted report (denúncia)."""

    RECEBIDA = "recebida"
    EM_ANALISE = "em_analise"
    ENCERRADA = "encerrada"


class UploadType(str, Enum):
    """Signed upload targets and the folder each one writes to."""

    BANNER = "banner"
    REPORT = "report"

    @property
    def folder(self) -> str:
        return f"{self.value}s"
