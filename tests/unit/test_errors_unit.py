import pytest
from app import errors
from app.dispatcher import ModuleNotFound
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from starlette.requests import Request

pytestmark = pytest.mark.unit


def _request(path: str = "/problem") -> Request:
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": [],
        "client": ("127.0.0.1", 12345),
        "server": ("testserver", 80),
        "scheme": "http",
        "root_path": "",
    }
    return Request(scope)


def test_status_title_and_normalize_detail():
    assert errors._status_title(404) == "Not Found"
    assert errors._status_title(999) == "Error"
    assert errors._normalize_detail({"detail": "x", "error_code": "custom"}, 409) == (
        "x",
        "custom",
    )
    assert errors._normalize_detail({"detail": "x"}, 409) == ("x", "http_409")
    assert errors._normalize_detail(None, 404) == ("Not Found", "http_404")
    assert errors._normalize_detail("plain", 400) == ("plain", "http_400")


def test_http_error_builds_structured_detail():
    exc = errors.http_error("gone", error_code="template_not_found", status_code=404)
    assert exc.status_code == 404
    assert exc.detail == {"detail": "gone", "error_code": "template_not_found"}


def test_problem_response_includes_expected_fields():
    response = errors.problem_response(
        request=_request("/pages/x"),
        status_code=404,
        detail="missing",
        error_code="module_not_installed",
        headers={"X-Test": "1"},
        extra={"module": "X"},
    )
    assert response.status_code == 404
    assert response.media_type == "application/problem+json"
    assert response.headers["X-Test"] == "1"
    assert b'"instance":"/pages/x"' in response.body
    assert b'"module":"X"' in response.body


def test_registered_handlers_return_problem_details():
    app = FastAPI()
    errors.register_exception_handlers(app)

    @app.get("/http")
    def _http_error():
        raise HTTPException(
            status_code=409, detail={"detail": "conflict", "error_code": "conflict"}
        )

    @app.get("/missing")
    def _missing():
        raise ModuleNotFound("TwitterLogin")

    @app.get("/validation")
    def _validation_error(limit: int):
        return {"limit": limit}

    @app.get("/boom")
    def _boom():
        raise RuntimeError("unexpected")

    client = TestClient(app, raise_server_exceptions=False)

    http_response = client.get("/http")
    assert http_response.status_code == 409
    assert http_response.headers["content-type"].startswith("application/problem+json")
    assert http_response.json()["error_code"] == "conflict"

    missing_response = client.get("/missing")
    assert missing_response.status_code == 404
    payload = missing_response.json()
    assert payload["detail"] == "TwitterLogin module is not installed"
    assert payload["error_code"] == "module_not_installed"
    assert payload["module"] == "TwitterLogin"
    assert payload["instance"] == "/missing"

    validation_response = client.get("/validation?limit=oops")
    assert validation_response.status_code == 422
    assert validation_response.json()["error_code"] == "validation_error"

    boom_response = client.get("/boom")
    assert boom_response.status_code == 500
    assert boom_response.json()["error_code"] == "http_500"
    assert "unexpected" not in boom_response.text
