"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run python -m src.app.main  (default.yaml의 host/port 사용)

종료: uvicorn이 SIGINT/SIGTERM을 받아 진행 중인 요청을 마친 뒤 종료한다.
"""

import html
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from http import HTTPStatus
from pathlib import Path
from typing import Any

import jinja2
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.routes import contact, pages
from src.core.logging import configure_logging
from src.core.settings import Settings, load_settings
from src.domain.constants import APP_TITLE, ERROR_TEMPLATE, STATIC_URL_PATH
from src.domain.errors import (
    AppError,
    BadRequestError,
    ErrorCodes,
    InternalError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

# error.html까지 실패했을 때 쓰는 최소 페이지
FALLBACK_ERROR_HTML = """<!DOCTYPE html>
<html lang="en">
<head><title>Error {status}</title></head>
<body>
    <h1>Error {status}</h1>
    <p>{message}</p>
    <a href="/">Return to Home</a>
</body>
</html>
"""


# =============================================================================
# Error Pages
# =============================================================================


def render_error_page(
    request: Request, status_code: int, title: str, message: str
) -> HTMLResponse:
    """
    에러 페이지 응답.

    error.html 렌더링 실패 시 FALLBACK_ERROR_HTML 사용.
    message는 사용자 노출용 문자열만 전달할 것 (내부 상세 금지).
    """
    templates: Jinja2Templates = request.app.state.templates
    try:
        body = templates.get_template(ERROR_TEMPLATE).render(
            lang="en",
            status=status_code,
            title=title,
            message=message,
        )
    except jinja2.TemplateError as e:
        logger.error(f"Error page render failed: {e}")
        body = FALLBACK_ERROR_HTML.format(
            status=status_code,
            message=html.escape(message),
        )
    return HTMLResponse(content=body, status_code=status_code)


async def app_error_handler(request: Request, exc: AppError) -> HTMLResponse:
    """AppError → 에러 페이지."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return render_error_page(request, exc.status_code, exc.title, exc.public_message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> HTMLResponse:
    """
    Starlette HTTPException (라우트 없음, 메서드 불일치, form 파싱 실패) → 에러 페이지.
    """
    error: AppError
    if exc.status_code == 404:
        error = NotFoundError(request.url.path)
    elif exc.status_code == 400:
        error = BadRequestError(str(exc.detail))
    else:
        title = HTTPStatus(exc.status_code).phrase
        return render_error_page(request, exc.status_code, title, str(exc.detail))
    return await app_error_handler(request, error)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> HTMLResponse:
    """
    form body 검증 실패 → 400 에러 페이지.

    FastAPI 기본 422 JSON 대신 BadRequestError로 통일.
    """
    missing: list[str] = []
    invalid: list[str] = []
    for item in exc.errors():
        field = str(item["loc"][-1]) if item.get("loc") else "body"
        (missing if item.get("type") == "missing" else invalid).append(field)

    if missing:
        detail = f"Missing form field: {', '.join(missing)}"
    else:
        detail = f"Invalid form field: {', '.join(invalid)}"

    error = BadRequestError(detail, code=ErrorCodes.INVALID_FORM, fields=missing + invalid)
    return await app_error_handler(request, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    """처리되지 않은 예외 → 500 에러 페이지 (내부 상세 미노출)."""
    logger.error(
        f"{request.method} {request.url.path} raised {type(exc).__name__}",
        exc_info=exc,
    )
    error = InternalError(str(exc))
    return render_error_page(request, error.status_code, error.title, error.public_message)


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        settings: 설정 (None이면 default.yaml + 환경변수에서 로드)

    Returns:
        라우트 / 정적 파일 / 에러 핸들러가 등록된 앱
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        애플리케이션 생명주기 관리.

        시작 시: 시작 로그 (로깅 구성은 run() 또는 호스트 프로세스 몫)
        종료 시: 종료 로그 (uvicorn이 요청 정리 후 호출)
        """
        logger.info(
            f"Starting {settings.metadata.name} v{settings.metadata.version} "
            f"on {settings.bind_address}"
        )

        yield

        logger.info("Server has shut down gracefully")

    app = FastAPI(
        title=APP_TITLE,
        version=settings.metadata.version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    # Static files (CSS)
    if STATIC_DIR.exists():
        app.mount(STATIC_URL_PATH, StaticFiles(directory=STATIC_DIR), name="static")

    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        StarletteHTTPException, http_exception_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        RequestValidationError, request_validation_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(pages.router, tags=["Pages"])
    app.include_router(contact.router, tags=["Contact"])

    @app.get("/health")
    async def health() -> dict[str, Any]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """설정된 host/port로 서버 실행."""
    import uvicorn

    settings = app.state.settings
    configure_logging(settings.log)

    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
