import pytest
from app.config import Settings

pytestmark = pytest.mark.unit


def test_settings_defaults_bind_twitter_login_template():
    cfg = Settings()
    assert cfg.page_templates == {"twitter-login": "TwitterLogin"}
    assert cfg.extension_packages == ["app.extensions"]
    assert cfg.disabled_modules == []


def test_settings_reads_page_templates_from_environment(monkeypatch):
    monkeypatch.setenv("PAGE_TEMPLATES", '{"login": "TwitterLogin", "search": "Search"}')
    monkeypatch.setenv("DISABLED_MODULES", '["Search"]')
    cfg = Settings()
    assert cfg.page_templates == {"login": "TwitterLogin", "search": "Search"}
    assert cfg.disabled_modules == ["Search"]


@pytest.mark.parametrize("template_name", ["Twitter", "twitter login", "a/b", "-x", ""])
def test_settings_rejects_invalid_template_names(template_name):
    with pytest.raises(ValueError):
        Settings(page_templates={template_name: "TwitterLogin"})


def test_settings_rejects_blank_module_name():
    with pytest.raises(ValueError):
        Settings(page_templates={"login": "  "})


def test_settings_strips_module_names():
    cfg = Settings(page_templates={"login": " TwitterLogin "})
    assert cfg.page_templates == {"login": "TwitterLogin"}


@pytest.mark.parametrize("prefix", ["api/v1", "/api/v1/"])
def test_settings_rejects_malformed_api_prefix(prefix):
    with pytest.raises(ValueError):
        Settings(api_prefix=prefix)
