"""
Patch Service: Datastar SSE 이벤트 생성.

두 종류의 push만 사용:
- datastar-patch-elements: HTML fragment 교체 (GET /contact/form)
- datastar-patch-signals: UI 상태(JSON) 갱신 (POST /contact/form)

응답은 이벤트 하나를 yield하고 끝나는 StreamingResponse.
long-lived 스트림 아님 (heartbeat / 재연결 없음).

Wire format (빈 줄로 이벤트 종료):
    event: datastar-patch-signals
    data: signals {"showSuccess":true,...}

    event: datastar-patch-elements
    data: elements <div id="contact-form">
    data: elements ...
"""

import json
import logging
from collections.abc import AsyncGenerator

import jinja2
from fastapi.responses import StreamingResponse
from fastapi.templating import Jinja2Templates

from src.core.sanitize import sanitize_input, sanitize_optional
from src.domain.constants import (
    CONTACT_FORM_TEMPLATE,
    DATA_ELEMENTS,
    DATA_SIGNALS,
    EVENT_PATCH_ELEMENTS,
    EVENT_PATCH_SIGNALS,
    SSE_HEADERS,
    SSE_MEDIA_TYPE,
)
from src.domain.errors import ErrorCodes, RenderError
from src.domain.schemas import ContactSubmission, UiSignalState

logger = logging.getLogger(__name__)


# =============================================================================
# Signal State (Response Builder)
# =============================================================================


def build_success_state() -> UiSignalState:
    """성공 상태: 성공 패널 표시 + 모든 필드 초기화."""
    return UiSignalState(show_success=True, show_error=False)


def build_error_state(submission: ContactSubmission, message: str) -> UiSignalState:
    """
    실패 상태: 에러 메시지 + 사용자가 입력한 값 되돌려주기.

    되돌려주는 값은 sanitize된 값 (유효하지 않아도 그대로).
    선택 필드가 없으면 빈 문자열.
    """
    return UiSignalState(
        show_success=False,
        show_error=True,
        error_message=message,
        name=sanitize_input(submission.name),
        email=sanitize_input(submission.email),
        phone=sanitize_optional(submission.phone),
        service=sanitize_optional(submission.service),
        message=sanitize_optional(submission.message),
    )


# =============================================================================
# SSE Framing
# =============================================================================


def format_sse_event(event: str, data_lines: list[str]) -> str:
    """SSE 이벤트 문자열 (마지막 빈 줄 포함)."""
    lines = [f"event: {event}"]
    lines.extend(f"data: {line}" for line in data_lines)
    return "\n".join(lines) + "\n\n"


def format_patch_signals(state: UiSignalState) -> str:
    """
    signal patch 이벤트.

    json.dumps가 '"'와 '\\'를 이스케이프하므로 errorMessage에
    따옴표가 있어도 payload는 항상 유효한 JSON.
    """
    payload = json.dumps(state.to_dict(), separators=(",", ":"))
    return format_sse_event(EVENT_PATCH_SIGNALS, [f"{DATA_SIGNALS} {payload}"])


def format_patch_elements(html: str) -> str:
    """
    element patch 이벤트.

    HTML의 각 줄을 별도 data 라인으로 보낸다 (SSE data에 개행 불가).
    selector / mode 생략 → 클라이언트 기본값 (id 매칭, outer morph).
    """
    lines = [f"{DATA_ELEMENTS} {line}" for line in html.splitlines() if line.strip()]
    return format_sse_event(EVENT_PATCH_ELEMENTS, lines)


def single_event_response(event: str) -> StreamingResponse:
    """이벤트 하나만 보내고 끝나는 SSE 응답."""

    async def event_generator() -> AsyncGenerator[str, None]:
        yield event

    return StreamingResponse(
        event_generator(),
        media_type=SSE_MEDIA_TYPE,
        headers=SSE_HEADERS,
    )


def signal_patch_response(state: UiSignalState) -> StreamingResponse:
    return single_event_response(format_patch_signals(state))


def element_patch_response(html: str) -> StreamingResponse:
    return single_event_response(format_patch_elements(html))


# =============================================================================
# Fragment Renderer
# =============================================================================


def render_contact_form(templates: Jinja2Templates) -> str:
    """
    문의 폼 fragment 렌더링.

    템플릿 파라미터 없음 (상태는 클라이언트 data-signals가 관리).

    Raises:
        RenderError: 템플릿 없음 / 문법 오류 / 렌더링 중 예외
    """
    try:
        template = templates.get_template(CONTACT_FORM_TEMPLATE)
        return template.render()
    except jinja2.TemplateError as e:
        logger.error(f"Contact form render failed: {e}", exc_info=True)
        raise RenderError(
            str(e), code=ErrorCodes.RENDER_FAILED, template=CONTACT_FORM_TEMPLATE
        ) from e
