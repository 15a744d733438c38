"""Repository dependencies (composition root for the data access layer)."""

from __future__ import annotations

import logging

from app.api.dependencies.firebase import FirebaseDep
from app.application.interfaces.services import IOrderAssigner
from app.core.config import get_settings
from app.infrastructure.firebase.repositories import (
    FirestoreBannerRepository,
    FirestoreCanalDenunciaRepository,
    FirestoreIniciativaRepository,
    FirestoreNaoSeCaleRepository,
    FirestorePorqueAderimosRepository,
    FirestorePostRepository,
    FirestoreRawCollectionReader,
    FirestoreReportRepository,
    FirestoreSectionRepository,
    FirestoreTestimonialRepository,
)
from app.infrastructure.firebase.services import create_order_assigner

_repo_logger = logging.getLogger("app.infrastructure.firebase.repositories")


def get_order_assigner(clients: FirebaseDep) -> IOrderAssigner:
    """Order assigner selected by ORDER_ASSIGNMENT_STRATEGY."""
    return create_order_assigner(get_settings().order_assignment_strategy, clients.firestore)


def get_testimonial_repo(clients: FirebaseDep) -> FirestoreTestimonialRepository:
    return FirestoreTestimonialRepository(clients.firestore, _repo_logger)


def get_iniciativa_repo(clients: FirebaseDep) -> FirestoreIniciativaRepository:
    return FirestoreIniciativaRepository(
        clients.firestore, get_order_assigner(clients), _repo_logger
    )


def get_post_repo(clients: FirebaseDep) -> FirestorePostRepository:
    return FirestorePostRepository(clients.firestore, _repo_logger)


def get_canal_denuncia_repo(clients: FirebaseDep) -> FirestoreCanalDenunciaRepository:
    return FirestoreCanalDenunciaRepository(
        clients.firestore, get_order_assigner(clients), _repo_logger
    )


def get_nao_se_cale_repo(clients: FirebaseDep) -> FirestoreNaoSeCaleRepository:
    return FirestoreNaoSeCaleRepository(clients.firestore, _repo_logger)


def get_porque_aderimos_repo(clients: FirebaseDep) -> FirestorePorqueAderimosRepository:
    return FirestorePorqueAderimosRepository(clients.firestore, _repo_logger)


def get_banner_repo(clients: FirebaseDep) -> FirestoreBannerRepository:
    return FirestoreBannerRepository(clients.firestore, _repo_logger)


def get_report_repo(clients: FirebaseDep) -> FirestoreReportRepository:
    return FirestoreReportRepository(clients.firestore, _repo_logger)


def get_section_repo(clients: FirebaseDep) -> FirestoreSectionRepository:
    return FirestoreSectionRepository(clients.firestore, _repo_logger)


def get_raw_reader(clients: FirebaseDep) -> FirestoreRawCollectionReader:
    """Pass-through reads for public collections this API does not manage."""
    return FirestoreRawCollectionReader(clients.firestore)
