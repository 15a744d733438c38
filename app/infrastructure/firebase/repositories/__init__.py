"""Firestore-backed repository implementations, one module per resource."""

from app.infrastructure.firebase.repositories.banner_repo_firestore import (
    FirestoreBannerRepository,
)
from app.infrastructure.firebase.repositories.canal_denuncia_repo_firestore import (
    FirestoreCanalDenunciaRepository,
)
from app.infrastructure.firebase.repositories.iniciativa_repo_firestore import (
    FirestoreIniciativaRepository,
)
from app.infrastructure.firebase.repositories.nao_se_cale_repo_firestore import (
    FirestoreNaoSeCaleRepository,
)
from app.infrastructure.firebase.repositories.porque_aderimos_repo_firestore import (
    FirestorePorqueAderimosRepository,
)
from app.infrastructure.firebase.repositories.post_repo_firestore import (
    FirestorePostRepository,
)
from app.infrastructure.firebase.repositories.raw_collection_reader import (
    FirestoreRawCollectionReader,
)
from app.infrastructure.firebase.repositories.report_repo_firestore import (
    FirestoreReportRepository,
)
from app.infrastructure.firebase.repositories.section_repo_firestore import (
    FirestoreSectionRepository,
)
from app.infrastructure.firebase.repositories.testimonial_repo_firestore import (
    FirestoreTestimonialRepository,
)

__all__ = [
    "FirestoreBannerRepository",
    "FirestoreCanalDenunciaRepository",
    "FirestoreIniciativaRepository",
    "FirestoreNaoSeCaleRepository",
    "FirestorePorqueAderimosRepository",
    "FirestorePostRepository",
    "FirestoreRawCollectionReader",
    "FirestoreReportRepository",
    "FirestoreSectionRepository",
    "FirestoreTestimonialRepository",
]
