"""Admin reports (denúncias) API: triage submitted reports."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.dependencies import get_report_repo, get_report_service
from app.application.dtos.report import ReportResult
from app.application.interfaces.repositories import ICrudRepository
from app.application.services.report_service import ReportService
from app.schemas.report import ReportCreate, ReportResponse, ReportUpdate

router = APIRouter()

ReportRepo = Annotated[ICrudRepository[ReportResult], Depends(get_report_repo)]


@router.get("", response_model=list[ReportResponse])
async def list_reports(repo: ReportRepo):
    return [ReportResponse.model_validate(r) for r in await repo.list()]


@router.get("/{report_id}", response_model=ReportResponse)
async def get_report(report_id: str, repo: ReportRepo):
    report = await repo.get_by_id(report_id)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return ReportResponse.model_validate(report)


@router.post("", response_model=ReportResponse, status_code=201)
async def create_report(
    body: ReportCreate,
    report_svc: Annotated[ReportService, Depends(get_report_service)],
):
    """Record a report received through another channel (phone, in person)."""
    report = await report_svc.submit(body.to_create_dict())
    return ReportResponse.model_validate(report)


@router.put("/{report_id}", response_model=ReportResponse)
async def update_report(report_id: str, body: ReportUpdate, repo: ReportRepo):
    updated = await repo.update(report_id, body.to_update_dict())
    if updated is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return ReportResponse.model_validate(updated)


@router.delete("/{report_id}", status_code=204)
async def delete_report(report_id: str, repo: ReportRepo) -> Response:
    if not await repo.delete(report_id):
        raise HTTPException(status_code=404, detail="Report not found")
    return Response(status_code=204)
