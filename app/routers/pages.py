from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse

from ..config import settings
from ..dispatcher import TemplateDispatcher
from ..errors import http_error
from ..registry import ModuleRegistry, get_module_registry

router = APIRouter(prefix="/pages", tags=["Pages"])


def get_template_dispatcher(
    template_name: str, registry: ModuleRegistry = Depends(get_module_registry)
) -> TemplateDispatcher:
    module_name = settings.page_templates.get(template_name)
    if module_name is None:
        raise http_error(
            f"Page template '{template_name}' does not exist",
            error_code="template_not_found",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return TemplateDispatcher(registry, module_name)


@router.get("/{template_name}", response_class=HTMLResponse)
def render_page(dispatcher: TemplateDispatcher = Depends(get_template_dispatcher)):
    # ModuleNotFound is turned into a 404 problem response by the error handlers.
    return HTMLResponse(dispatcher.render())
