"""ASGI entrypoint for the error reports API."""

from error_reports.api.app import create_app
from error_reports.containers import build_container

app = create_app(build_container())
