"""Error report queries and persistence capabilities."""

from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from error_reports.domain.models import ErrorReport, Location


class LocationRepository(Protocol):
    """Persistence interface for locations."""

    def get_location(self, location_id: UUID) -> Location | None:
        """Return a location with its organization name, if present."""


class ErrorReportRepository(Protocol):
    """Persistence interface for error reports."""

    def list_for_location(self, location_id: UUID) -> list[ErrorReport]:
        """Return visible reports for a location, newest first."""

    def get_report(self, report_id: UUID) -> ErrorReport | None:
        """Return a report with its location attached, if present."""

    def create_report(
        self, location_id: UUID, payload: dict[str, object]
    ) -> ErrorReport:
        """Insert a report under a location and return the stored row."""

    def update_report(
        self, report_id: UUID, changes: dict[str, object]
    ) -> ErrorReport:
        """Update the given columns of a report and return the stored row."""

    def delete_report(self, report_id: UUID) -> None:
        """Delete a report."""


@dataclass
class ErrorReportCreator:
    """Creates error reports under a location."""

    repository: ErrorReportRepository

    def create(self, parent: Location, payload: dict[str, object]) -> ErrorReport:
        """Insert a report owned by ``parent``."""
        report = self.repository.create_report(parent.id, payload)
        return replace(report, location=parent)


@dataclass
class ErrorReportStore:
    """Updates and deletes error reports by id."""

    repository: ErrorReportRepository

    def update_fields(
        self, entity: ErrorReport, changes: dict[str, object]
    ) -> ErrorReport:
        updated = self.repository.update_report(entity.id, changes)
        return replace(updated, location=entity.location)

    def delete(self, entity: ErrorReport) -> None:
        self.repository.delete_report(entity.id)


@dataclass
class ErrorReportService:
    """Read access to error reports and their locations."""

    repository: ErrorReportRepository
    location_repository: LocationRepository

    def list_public_reports(self, location_id: UUID) -> list[dict[str, object]]:
        """Return the public view of visible reports for a location."""
        reports = self.repository.list_for_location(location_id)
        return [report.public_view() for report in reports]

    def get_report(self, report_id: UUID) -> ErrorReport | None:
        """Return a report including its location."""
        return self.repository.get_report(report_id)

    def get_location(self, location_id: UUID) -> Location | None:
        """Return a location including its organization name."""
        return self.location_repository.get_location(location_id)
