"""FastAPI application factory and entrypoint.

The application exposes CRUD operations over an in-memory collection of
student records plus generated API documentation.

Endpoints implemented:
- POST /students
- GET /students
- GET /students/{id}
- PUT /students/{id}
- DELETE /students/{id}
- GET /health
- GET {DOCS_PATH} (Swagger UI, `/api-docs` by default)
"""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import json
import logging
import time
import uuid
from .config import Settings, settings
from .errors import register_error_handlers
from .routes import router as students_router
from .store import StudentStore

logger = logging.getLogger("student_api.api")
if not logging.getLogger().handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)


def create_app(store: Optional[StudentStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Build a configured application around `store`.

    A fresh, empty `StudentStore` is created when none is given, so each
    application instance owns its own records.
    """
    cfg = app_settings or settings
    app = FastAPI(
        title="Student CRUD API",
        version="1.0.0",
        description="A simple CRUD API for managing student records.",
        servers=[{"url": cfg.PUBLIC_URL, "description": "Local development server"}],
        docs_url=cfg.DOCS_PATH,
        redoc_url="/redoc",
    )
    app.state.store = store if store is not None else StudentStore()
    app.state.settings = cfg

    # Wide-open CORS keeps browser-based testers working in dev.
    if cfg.ALLOW_DEV_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)
    app.middleware("http")(request_context_middleware)
    app.include_router(students_router)
    app.add_api_route("/health", health, methods=["GET"], include_in_schema=False)
    app.add_api_route("/", home, methods=["GET"], response_class=HTMLResponse, include_in_schema=False)
    return app


async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    response: Response
    try:
        response = await call_next(request)
    except Exception:
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.exception(
            "request_failed %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": elapsed_ms,
                    "client": request.client.host if request.client else "unknown",
                },
                ensure_ascii=True,
            ),
        )
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "request_done %s",
        json.dumps(
            {
                "request_id": req_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": elapsed_ms,
                "client": request.client.host if request.client else "unknown",
            },
            ensure_ascii=True,
        ),
    )
    return response


def health():
    """Lightweight health check for uptime monitoring."""
    return {"status": "ok"}


def home(request: Request):
    """Minimal homepage for quick manual testing."""
    docs_path = request.app.state.settings.DOCS_PATH
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
      <meta charset="UTF-8" />
      <title>Student CRUD API</title>
      <style>
        body {{ font-family: Arial, sans-serif; margin: 32px; }}
        a {{ color: #0a6; }}
        .card {{ max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }}
      </style>
    </head>
    <body>
      <div class="card">
        <h1>Student CRUD API</h1>
        <ul>
          <li><a href="{docs_path}">Swagger UI</a></li>
          <li><a href="/redoc">ReDoc</a></li>
          <li><a href="/openapi.json">OpenAPI document</a></li>
          <li><a href="/students">All students</a></li>
        </ul>
      </div>
    </body>
    </html>
    """


app = create_app()
