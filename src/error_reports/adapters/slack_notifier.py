"""Slack incoming-webhook notifier adapter."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from error_reports.domain.models import NewErrorReportNotice

logger = logging.getLogger(__name__)


class ErrorReportNotifier(Protocol):
    """Interface for announcing new error reports."""

    async def notify_new_error_report(self, notice: NewErrorReportNotice) -> None:
        """Announce a newly posted error report."""


@dataclass
class SlackWebhookNotifier:
    """Notifier that posts to a Slack incoming webhook with httpx."""

    webhook_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10
    app_url: str | None = None

    @classmethod
    def create(
        cls, webhook_url: str, timeout: float = 10, app_url: str | None = None
    ) -> "SlackWebhookNotifier":
        """Create a notifier with a managed httpx session."""
        return cls(
            webhook_url=webhook_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
            app_url=app_url,
        )

    async def notify_new_error_report(self, notice: NewErrorReportNotice) -> None:
        """Post a formatted message for the new report."""
        payload = {"text": format_error_report_message(notice, self.app_url)}
        response = await self.http_client.post(
            self.webhook_url, json=payload, timeout=self.timeout
        )
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


@dataclass
class NullNotifier:
    """Notifier used when no Slack webhook is configured."""

    async def notify_new_error_report(self, notice: NewErrorReportNotice) -> None:
        logger.debug(
            "Slack webhook not configured; skipping error report notice",
            extra={"location_id": str(notice.location.id)},
        )

    async def close(self) -> None:
        return None


def format_error_report_message(
    notice: NewErrorReportNotice, app_url: str | None = None
) -> str:
    """Format a new error report as Slack message text."""
    location = notice.location
    where = location.name
    if location.organization_name:
        where = f"{location.organization_name} / {location.name}"
    lines = [
        f"New error report for {where}",
        f"Services: {', '.join(notice.services) or 'none'}",
        f"Posted by: {notice.posted_by}",
    ]
    if notice.contact_info:
        lines.append(f"Contact: {notice.contact_info}")
    lines.append(f"> {notice.content}")
    if app_url:
        lines.append(f"{app_url.rstrip('/')}/locations/{location.id}")
    return "\n".join(lines)
