"""
Page Routes: 랜딩 페이지 (HTML).

문의 폼은 여기서 렌더링하지 않는다.
index.html이 로드되면 클라이언트가 @get('/contact/form')으로 fragment를 받아 붙인다.
"""

import logging

import jinja2
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from src.domain.constants import CONTACT_FORM_PATH, INDEX_TEMPLATE
from src.domain.errors import ErrorCodes, RenderError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """홈 페이지."""
    settings = request.app.state.settings
    try:
        return request.app.state.templates.TemplateResponse(
            request,
            INDEX_TEMPLATE,
            {
                "site_name": settings.metadata.name,
                "version": settings.metadata.version,
                "contact_form_path": CONTACT_FORM_PATH,
            },
        )
    except jinja2.TemplateError as e:
        logger.error(f"Index page render failed: {e}", exc_info=True)
        raise RenderError(str(e), code=ErrorCodes.RENDER_FAILED, template=INDEX_TEMPLATE) from e
