from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI
from pythonjsonlogger.json import JsonFormatter

from .config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _route_exists(app: FastAPI, path: str) -> bool:
    return any(getattr(route, "path", None) == path for route in app.routes)


def configure_structured_logging(level: int = logging.INFO) -> bool:
    root = logging.getLogger()
    if getattr(root, "_json_logging_configured", False):
        return False

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter(_LOG_FORMAT))
    root.handlers = [handler]
    root.setLevel(level)
    setattr(root, "_json_logging_configured", True)
    return True


def configure_metrics(app: FastAPI) -> bool:
    if not (settings.enable_optional_observability and settings.metrics_enabled):
        return False
    if _route_exists(app, "/metrics"):
        return False

    try:
        from prometheus_fastapi_instrumentator import Instrumentator
    except ImportError:
        return False

    Instrumentator(excluded_handlers=["/health", "/ready", "/metrics"]).instrument(
        app
    ).expose(app, endpoint="/metrics", include_in_schema=False)
    return True


def configure_sentry() -> bool:
    if not (settings.enable_optional_observability and settings.sentry_dsn):
        return False

    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
    except ImportError:
        return False

    if sentry_sdk.get_client().is_active():
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.sentry_environment,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        integrations=[FastApiIntegration()],
        send_default_pii=False,
    )
    return True


def configure_observability(app: FastAPI) -> dict[str, Any]:
    return {
        "logging": configure_structured_logging(),
        "metrics": configure_metrics(app),
        "sentry": configure_sentry(),
    }
