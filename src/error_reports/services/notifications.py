"""Best-effort notifications about new error reports."""

import logging
from dataclasses import dataclass

from error_reports.adapters.slack_notifier import ErrorReportNotifier
from error_reports.domain.models import NewErrorReportNotice

logger = logging.getLogger(__name__)


@dataclass
class NotificationService:
    """Sends notices without letting delivery failures reach the caller."""

    notifier: ErrorReportNotifier

    async def notify_new_error_report(self, notice: NewErrorReportNotice) -> None:
        """Send a new-report notice, logging any delivery failure."""
        try:
            await self.notifier.notify_new_error_report(notice)
        except Exception:
            logger.exception(
                "Error notifying Slack of new error report",
                extra={"location_id": str(notice.location.id)},
            )
