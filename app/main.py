from __future__ import annotations

from fastapi import Depends, FastAPI, Request
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from .config import settings
from .errors import problem_response, register_exception_handlers
from .health import readiness_state
from .observability import configure_observability
from .registry import ModuleRegistry, build_registry, get_module_registry
from .routers import modules, pages

app = FastAPI(title="Page template dispatch")
configure_observability(app)
register_exception_handlers(app)

app.state.module_registry = build_registry(settings)

if settings.trusted_hosts:
    app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

if settings.security_https_redirect:
    app.add_middleware(HTTPSRedirectMiddleware)

_DOCS_PATHS = {"/docs", "/redoc", "/openapi.json", "/docs/oauth2-redirect"}
_CSP_POLICY = (
    "default-src 'self'; "
    "base-uri 'self'; "
    "frame-ancestors 'none'; "
    "object-src 'none'; "
    "form-action 'self'"
)


@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    if not settings.security_headers_enabled:
        return response

    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    if settings.security_csp_enabled and request.url.path not in _DOCS_PATHS:
        response.headers.setdefault("Content-Security-Policy", _CSP_POLICY)
    if request.url.path.startswith("/pages/"):
        # Rendered pages may carry login state.
        response.headers["Cache-Control"] = "no-store"
    return response


app.include_router(pages.router)
app.include_router(modules.router, prefix=settings.api_prefix)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/ready")
def ready(request: Request, registry: ModuleRegistry = Depends(get_module_registry)):
    is_ready, checks = readiness_state(registry)
    if not is_ready:
        return problem_response(
            request=request,
            status_code=503,
            detail="Page template modules are not installed",
            error_code="service_not_ready",
            extra={"checks": checks},
        )
    return {"status": "ok", "checks": checks}
