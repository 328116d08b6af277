import re
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_TEMPLATE_NAME_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class Settings(BaseSettings):
    # Runtime environment
    environment: str = "development"

    # Extension modules
    extension_packages: list[str] = ["app.extensions"]
    disabled_modules: list[str] = []

    # Page templates: template name -> module it renders
    page_templates: dict[str, str] = {"twitter-login": "TwitterLogin"}

    # JSON API
    api_prefix: str = "/api/v1"

    # Optional feature packs (enabled by default)
    enable_optional_observability: bool = True

    # Observability
    metrics_enabled: bool = True
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "development"
    sentry_traces_sample_rate: float = 0.0

    # Request security controls
    trusted_hosts: list[str] = ["localhost", "127.0.0.1", "testserver"]
    security_headers_enabled: bool = True
    security_csp_enabled: bool = True
    security_https_redirect: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("page_templates")
    @classmethod
    def validate_page_templates(cls, value: dict[str, str]) -> dict[str, str]:
        for template_name, module_name in value.items():
            if not _TEMPLATE_NAME_RE.match(template_name):
                raise ValueError(
                    f"PAGE_TEMPLATES name '{template_name}' must be a lowercase "
                    "path segment (letters, digits and '-')"
                )
            if not module_name.strip():
                raise ValueError(
                    f"PAGE_TEMPLATES entry '{template_name}' must name a module"
                )
        return {name: module.strip() for name, module in value.items()}

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        if not value.startswith("/") or value.endswith("/"):
            raise ValueError("API_PREFIX must start with '/' and not end with '/'")
        return value


settings = Settings()
