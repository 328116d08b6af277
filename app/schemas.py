from pydantic import BaseModel


class ModuleInfo(BaseModel):
    name: str
    class_name: str


class ModuleListResponse(BaseModel):
    modules: list[ModuleInfo]


class PageTemplateInfo(BaseModel):
    name: str
    module: str
    installed: bool
    path: str


class PageTemplateListResponse(BaseModel):
    templates: list[PageTemplateInfo]
