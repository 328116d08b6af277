import pytest
from app.main import app
from app.registry import ModuleRegistry, get_module_registry
from fastapi.testclient import TestClient

from tests.fakes import LOGIN_LINK, StaticModule


@pytest.fixture
def module_registry():
    return ModuleRegistry()


@pytest.fixture
def twitter_login_registry():
    return ModuleRegistry({"TwitterLogin": StaticModule(LOGIN_LINK)})


@pytest.fixture
def client(module_registry):
    app.dependency_overrides[get_module_registry] = lambda: module_registry
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.pop(get_module_registry, None)
