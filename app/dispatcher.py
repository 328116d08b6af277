"""Template dispatch: resolve one named module and render its output.

A template is bound to a single module name. ``dispatch()`` reports the
outcome as a value, ``render()`` returns the content or raises
:class:`ModuleNotFound` so the HTTP layer can answer with a 404.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .registry import ModuleProvider

logger = logging.getLogger(__name__)


class ModuleNotFound(LookupError):
    def __init__(self, module_name: str, message: str | None = None):
        self.module_name = module_name
        self.message = message or not_installed_message(module_name)
        super().__init__(self.message)


def not_installed_message(module_name: str) -> str:
    return f"{module_name} module is not installed"


@dataclass(frozen=True)
class Rendered:
    content: str

    def unwrap(self) -> str:
        return self.content


@dataclass(frozen=True)
class ModuleMissing:
    module_name: str
    message: str

    def unwrap(self) -> str:
        raise ModuleNotFound(self.module_name, self.message)


DispatchResult = Union[Rendered, ModuleMissing]


class TemplateDispatcher:
    def __init__(self, provider: ModuleProvider, module_name: str):
        self._provider = provider
        self.module_name = module_name

    def dispatch(self) -> DispatchResult:
        module = self._provider.lookup(self.module_name)
        if module is None:
            message = not_installed_message(self.module_name)
            logger.warning(message, extra={"module_name": self.module_name})
            return ModuleMissing(self.module_name, message)
        # Errors raised by the module propagate to the caller untouched.
        return Rendered(module.execute())

    def render(self) -> str:
        return self.dispatch().unwrap()


def twitter_login_template(provider: ModuleProvider) -> TemplateDispatcher:
    return TemplateDispatcher(provider, "TwitterLogin")
