from __future__ import annotations

from .config import settings
from .registry import ModuleProvider


def template_modules_ready(provider: ModuleProvider) -> dict[str, bool]:
    checks: dict[str, bool] = {}
    for module_name in sorted(set(settings.page_templates.values())):
        checks[module_name] = provider.lookup(module_name) is not None
    return checks


def readiness_state(provider: ModuleProvider) -> tuple[bool, dict[str, bool]]:
    checks = template_modules_ready(provider)
    return all(checks.values()), checks
