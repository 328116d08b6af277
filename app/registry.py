from __future__ import annotations

import logging
from importlib import import_module
from pkgutil import iter_modules
from typing import Optional, Protocol, runtime_checkable

from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class ExecutableModule(Protocol):
    """An installed extension that renders page content."""

    def execute(self) -> str: ...


@runtime_checkable
class ModuleProvider(Protocol):
    def lookup(self, name: str) -> Optional[ExecutableModule]: ...


def module_name_for(module: ExecutableModule) -> str:
    name = getattr(module, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(module).__name__


class ModuleRegistry:
    """Name -> module table populated once at startup and read per request.

    Lookups take no lock; writes are expected before the app serves traffic.
    """

    def __init__(self, modules: dict[str, ExecutableModule] | None = None):
        self._modules: dict[str, ExecutableModule] = {}
        for name, module in (modules or {}).items():
            self.register(name, module)

    def register(self, name: str, module: ExecutableModule) -> None:
        if not isinstance(module, ExecutableModule):
            raise TypeError(f"Module '{name}' does not provide execute()")
        if name in self._modules:
            raise ValueError(f"Module '{name}' is already registered")
        self._modules[name] = module
        logger.info("module registered", extra={"module_name": name})

    def unregister(self, name: str) -> None:
        self._modules.pop(name, None)

    def lookup(self, name: str) -> Optional[ExecutableModule]:
        return self._modules.get(name)

    get = lookup

    def names(self) -> list[str]:
        return sorted(self._modules)

    def __contains__(self, name: object) -> bool:
        return name in self._modules

    def __len__(self) -> int:
        return len(self._modules)


def discover_modules(package_name: str) -> list[ExecutableModule]:
    try:
        package = import_module(package_name)
    except ModuleNotFoundError as exc:
        if exc.name == package_name:
            logger.warning(
                "extension package not found", extra={"package": package_name}
            )
            return []
        raise

    package_paths = getattr(package, "__path__", None)
    if not package_paths:
        return []

    modules: list[ExecutableModule] = []
    for module_info in sorted(iter_modules(package_paths), key=lambda item: item.name):
        if not module_info.ispkg:
            continue
        module = _load_extension_module(f"{package_name}.{module_info.name}.module")
        if module is not None:
            modules.append(module)
    return modules


def _load_extension_module(module_path: str) -> Optional[ExecutableModule]:
    try:
        source = import_module(module_path)
    except ModuleNotFoundError as exc:
        if exc.name == module_path:
            return None
        raise
    module = getattr(source, "module", None)
    if isinstance(module, ExecutableModule):
        return module
    logger.warning(
        "extension does not export an executable module",
        extra={"module_path": module_path},
    )
    return None


def build_registry(settings: Settings) -> ModuleRegistry:
    registry = ModuleRegistry()
    disabled = set(settings.disabled_modules)
    for package_name in settings.extension_packages:
        for module in discover_modules(package_name):
            name = module_name_for(module)
            if name in disabled:
                logger.info("module disabled", extra={"module_name": name})
                continue
            registry.register(name, module)
    return registry


def get_module_registry(request: Request) -> ModuleRegistry:
    return request.app.state.module_registry
