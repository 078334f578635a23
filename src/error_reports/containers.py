"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from error_reports.adapters.slack_notifier import (
    ErrorReportNotifier,
    NullNotifier,
    SlackWebhookNotifier,
)
from error_reports.adapters.supabase_audit_repository import SupabaseAuditRepository
from error_reports.adapters.supabase_error_report_repository import (
    SupabaseErrorReportRepository,
)
from error_reports.adapters.supabase_location_repository import (
    SupabaseLocationRepository,
)
from error_reports.adapters.supabase_user_repository import SupabaseUserRepository
from error_reports.config import Settings
from error_reports.domain.models import ErrorReport
from error_reports.services.audit import AuditService
from error_reports.services.data_changes import DataChangeService
from error_reports.services.error_reports import (
    ErrorReportCreator,
    ErrorReportService,
    ErrorReportStore,
)
from error_reports.services.notifications import NotificationService
from error_reports.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notifier: ErrorReportNotifier
    user_service: UserService
    error_report_service: ErrorReportService
    error_report_creator: ErrorReportCreator
    data_change_service: DataChangeService
    notification_service: NotificationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    report_repository = SupabaseErrorReportRepository(supabase_client)
    location_repository = SupabaseLocationRepository(supabase_client)
    user_service = UserService(SupabaseUserRepository(supabase_client))
    data_change_service = DataChangeService(
        AuditService(SupabaseAuditRepository(supabase_client))
    )
    data_change_service.register_store(
        ErrorReport.entity_type, ErrorReportStore(report_repository)
    )
    notifier: SlackWebhookNotifier | NullNotifier
    if resolved_settings.slack_webhook_url:
        notifier = SlackWebhookNotifier.create(
            resolved_settings.slack_webhook_url,
            timeout=resolved_settings.slack_timeout_seconds,
            app_url=resolved_settings.public_app_url,
        )
    else:
        notifier = NullNotifier()

    async def close_resources() -> None:
        await notifier.close()

    return AppContainer(
        settings=resolved_settings,
        notifier=notifier,
        user_service=user_service,
        error_report_service=ErrorReportService(
            repository=report_repository,
            location_repository=location_repository,
        ),
        error_report_creator=ErrorReportCreator(report_repository),
        data_change_service=data_change_service,
        notification_service=NotificationService(notifier),
        close_resources=close_resources,
    )
