"""Uploads API: direct multipart upload and signed upload URLs.

Files sent to /file pass through the API (bounded by MAX_UPLOAD_SIZE) and
are made public. /signed-url lets the browser PUT straight to the bucket:
reports/ is open to the public, banners/ needs an admin token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from app.api.dependencies import (
    CurrentUser,
    FirebaseDep,
    OptionalBearer,
    get_upload_service,
    require_admin_token,
)
from app.application.services.upload_service import (
    DEFAULT_DESTINATION,
    UploadService,
    is_banner_destination,
    validate_destination,
)
from app.core.limiter import limit_upload
from app.domain.enums import UploadType
from app.domain.exceptions import AuthorizationException
from app.schemas.upload import SignedUploadResponse, SignedUrlRequest, UploadResponse

router = APIRouter()

Uploads = Annotated[UploadService, Depends(get_upload_service)]


@router.post("/file", response_model=UploadResponse, status_code=201)
@limit_upload
async def upload_file(
    request: Request,
    current_user: CurrentUser,
    upload_svc: Uploads,
    file: Annotated[UploadFile, File()],
    destination: Annotated[str, Form()] = DEFAULT_DESTINATION,
):
    """Store the multipart field "file" under destination/ (default general/)."""
    destination = validate_destination(destination or DEFAULT_DESTINATION)
    if is_banner_destination(destination) and not current_user.is_admin:
        raise AuthorizationException(message="Forbidden: Only admins can upload banners.")
    data = await file.read()
    result = await upload_svc.store(
        data,
        file.content_type,
        file.filename or "",
        destination=destination,
    )
    return UploadResponse.model_validate(result)


@router.post("/signed-url", response_model=SignedUploadResponse)
@limit_upload
async def create_signed_url(
    request: Request,
    body: SignedUrlRequest,
    credentials: OptionalBearer,
    clients: FirebaseDep,
    upload_svc: Uploads,
):
    """V4 signed PUT URL for banners/ (admin) or reports/ (public), valid ten minutes."""
    if body.type == UploadType.BANNER.value:
        await require_admin_token(credentials, clients)
    result = await upload_svc.create_signed_upload(body.type, body.filename, body.content_type)
    return SignedUploadResponse.model_validate(result)
