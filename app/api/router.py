"""API router aggregation.

Mounted under /api by main. Everything below /admin requires a verified
token carrying the admin claim; /public is open; /uploads checks per route.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import require_admin
from app.api.endpoints import (
    banners,
    canais_denuncia,
    health,
    iniciativas,
    nao_se_cale,
    porque_aderimos,
    posts,
    public,
    reports,
    sections,
    testimonials,
    uploads,
    users,
)

admin_router = APIRouter(dependencies=[Depends(require_admin)])

admin_router.include_router(users.router, prefix="/users", tags=["users"])
admin_router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
admin_router.include_router(iniciativas.router, prefix="/iniciativas", tags=["iniciativas"])
admin_router.include_router(posts.router, prefix="/posts", tags=["posts"])
admin_router.include_router(
    canais_denuncia.router, prefix="/canaisDenuncia", tags=["canais-denuncia"]
)
admin_router.include_router(nao_se_cale.router, prefix="/naoSeCale", tags=["nao-se-cale"])
admin_router.include_router(
    porque_aderimos.router, prefix="/porqueAderimos", tags=["porque-aderimos"]
)
admin_router.include_router(banners.router, prefix="/banners", tags=["banners"])
admin_router.include_router(reports.router, prefix="/reports", tags=["reports"])
admin_router.include_router(sections.router, prefix="/sections", tags=["sections"])

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(public.router, prefix="/public", tags=["public"])
api_router.include_router(admin_router, prefix="/admin")
api_router.include_router(uploads.router, prefix="/uploads", tags=["uploads"])
