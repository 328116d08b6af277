from fastapi import APIRouter, Depends

from .. import schemas
from ..config import settings
from ..registry import ModuleRegistry, get_module_registry

router = APIRouter(tags=["Modules"])


@router.get("/modules", response_model=schemas.ModuleListResponse)
def list_modules(registry: ModuleRegistry = Depends(get_module_registry)):
    modules = []
    for name in registry.names():
        module = registry.lookup(name)
        modules.append(
            schemas.ModuleInfo(name=name, class_name=type(module).__name__)
        )
    return schemas.ModuleListResponse(modules=modules)


@router.get("/templates", response_model=schemas.PageTemplateListResponse)
def list_templates(registry: ModuleRegistry = Depends(get_module_registry)):
    templates = [
        schemas.PageTemplateInfo(
            name=template_name,
            module=module_name,
            installed=module_name in registry,
            path=f"/pages/{template_name}",
        )
        for template_name, module_name in sorted(settings.page_templates.items())
    ]
    return schemas.PageTemplateListResponse(templates=templates)
