"""FastAPI dependencies: Firebase clients, repositories, services and the auth guard.

Routes depend only on these; repositories and services are built per
request from the clients held on app.state.
"""

from app.api.dependencies.auth import (
    AdminUser,
    CurrentUser,
    OptionalBearer,
    get_current_user,
    require_admin,
    require_admin_token,
)
from app.api.dependencies.firebase import FirebaseDep, get_firebase
from app.api.dependencies.repositories import (
    get_banner_repo,
    get_canal_denuncia_repo,
    get_iniciativa_repo,
    get_nao_se_cale_repo,
    get_order_assigner,
    get_porque_aderimos_repo,
    get_post_repo,
    get_raw_reader,
    get_report_repo,
    get_section_repo,
    get_testimonial_repo,
)
from app.api.dependencies.services import (
    get_banner_service,
    get_public_content_service,
    get_report_service,
    get_upload_service,
    get_user_admin_service,
)

__all__ = [
    "AdminUser",
    "CurrentUser",
    "FirebaseDep",
    "OptionalBearer",
    "get_banner_repo",
    "get_banner_service",
    "get_canal_denuncia_repo",
    "get_current_user",
    "get_firebase",
    "get_iniciativa_repo",
    "get_nao_se_cale_repo",
    "get_order_assigner",
    "get_porque_aderimos_repo",
    "get_post_repo",
    "get_public_content_service",
    "get_raw_reader",
    "get_report_repo",
    "get_report_service",
    "get_section_repo",
    "get_testimonial_repo",
    "get_upload_service",
    "get_user_admin_service",
    "require_admin",
    "require_admin_token",
]
