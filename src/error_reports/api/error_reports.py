"""Error report endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Depends,
    Query,
    Request,
    Response,
    status,
)
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field

from error_reports.api.auth import require_actor
from error_reports.domain.errors import ForbiddenError, NotFoundError
from error_reports.domain.models import Actor, NewErrorReportNotice

if TYPE_CHECKING:
    from error_reports.containers import AppContainer

router = APIRouter(prefix="/error-reports", tags=["error-reports"])


class CreateErrorReportRequest(BaseModel):
    """Body of a new error report."""

    model_config = ConfigDict(populate_by_name=True)

    location_id: UUID = Field(alias="locationId")
    services: list[str] = Field(min_length=1)
    content: str = Field(min_length=1)
    posted_by: str = Field(alias="postedBy", min_length=1)
    contact_info: str | None = Field(default=None, alias="contactInfo")


class SetHiddenRequest(BaseModel):
    """Body of a hide or unhide request."""

    hidden: bool


@router.get("")
async def list_error_reports(
    request: Request, location_id: UUID = Query(alias="locationId")
) -> list[dict[str, object]]:
    """Return the visible reports for a location, newest first."""
    container: AppContainer = request.app.state.container
    return await run_in_threadpool(
        container.error_report_service.list_public_reports, location_id
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_error_report(
    body: CreateErrorReportRequest,
    request: Request,
    background_tasks: BackgroundTasks,
    actor: Actor = Depends(require_actor),
) -> dict[str, object]:
    """Post a new error report and announce it in the chat channel."""
    container: AppContainer = request.app.state.container
    location = await run_in_threadpool(
        container.error_report_service.get_location, body.location_id
    )
    if location is None:
        raise NotFoundError(
            "Location not found when attempting to create new error report!"
        )

    report = await container.data_change_service.create_instance(
        actor,
        container.error_report_creator,
        location,
        {
            "content": body.content,
            "services": body.services,
            "posted_by": body.posted_by,
            "contact_info": body.contact_info,
        },
    )

    background_tasks.add_task(
        container.notification_service.notify_new_error_report,
        NewErrorReportNotice(
            location=location,
            services=body.services,
            content=body.content,
            posted_by=body.posted_by,
            contact_info=body.contact_info,
        ),
    )
    return report.audit_snapshot()


@router.delete("/{error_report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_error_report(
    error_report_id: UUID,
    request: Request,
    actor: Actor = Depends(require_actor),
) -> Response:
    """Delete a report on behalf of a member of its organization."""
    container: AppContainer = request.app.state.container
    report = await run_in_threadpool(
        container.error_report_service.get_report, error_report_id
    )
    if report is None:
        raise NotFoundError("Error report not found when attempting to delete it!")

    if report.location is None or not actor.belongs_to(
        report.location.organization_id
    ):
        raise ForbiddenError(
            "Not authorized to delete error reports for this organization"
        )

    await container.data_change_service.destroy_instance(actor, report)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{error_report_id}/hidden", status_code=status.HTTP_204_NO_CONTENT)
async def set_error_report_hidden(
    error_report_id: UUID,
    body: SetHiddenRequest,
    request: Request,
    actor: Actor = Depends(require_actor),
) -> Response:
    """Hide or unhide a report; admins only."""
    container: AppContainer = request.app.state.container
    report = await run_in_threadpool(
        container.error_report_service.get_report, error_report_id
    )
    if report is None:
        raise NotFoundError(
            "Error report not found when attempting to make it hidden!"
        )

    if not actor.is_admin:
        raise ForbiddenError("Not authorized to hide error report.")

    await container.data_change_service.update_instance(
        actor, report, {"hidden": body.hidden}
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
