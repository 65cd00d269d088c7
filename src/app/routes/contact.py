"""
Contact Routes: 문의 폼 (Datastar fragment 방식).

- GET  /contact/form → 폼 fragment (datastar-patch-elements)
- POST /contact/form → 검증 결과 UI 상태 (datastar-patch-signals)

검증 실패는 HTTP 200 + showError 시그널로 응답한다 (전송 에러 아님).
form body 자체가 잘못된 경우만 400.

저장 / 메일 발송 없음: 검증 후 로그만 남긴다.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from src.app.services.patches import (
    build_error_state,
    build_success_state,
    element_patch_response,
    render_contact_form,
    signal_patch_response,
)
from src.app.services.validate import validate_contact_form
from src.core.sanitize import sanitize_input
from src.domain.constants import CONTACT_FORM_PATH
from src.domain.schemas import ContactSubmission

logger = logging.getLogger(__name__)

router = APIRouter()

OPTIONAL_FIELDS = ("phone", "service", "message")


# =============================================================================
# Form Body
# =============================================================================


class ContactFormBody(BaseModel):
    """
    POST body (application/x-www-form-urlencoded).

    모델 form은 빈 문자열을 그대로 통과시킨다 (검증 단계에서 메시지로 처리).
    name/email 필드 자체가 없거나 텍스트가 아니면 RequestValidationError → 400.
    """

    name: str
    email: str
    phone: str | None = None
    service: str | None = None
    message: str | None = None

    def to_submission(self) -> ContactSubmission:
        return ContactSubmission(
            name=self.name,
            email=self.email,
            phone=self.phone,
            service=self.service,
            message=self.message,
        )


# =============================================================================
# Logging Helpers
# =============================================================================


def log_contact_submission(submission: ContactSubmission) -> None:
    """수신 로그 (sanitize된 값만)."""
    optional_parts: list[str] = []
    for field in OPTIONAL_FIELDS:
        value = getattr(submission, field)
        shown = sanitize_input(value) if value is not None else None
        optional_parts.append(f"{field.capitalize()}: {shown!r}")
    optional_str = ", ".join(optional_parts)

    logger.info(
        "Received contact form submission: "
        f"Name: {sanitize_input(submission.name)}, "
        f"Email: {sanitize_input(submission.email)}, "
        f"{optional_str}"
    )


def log_successful_submission(submission: ContactSubmission) -> None:
    logger.info(
        "Successfully validated contact form from: "
        f"{sanitize_input(submission.name)} ({sanitize_input(submission.email)})"
    )


# =============================================================================
# Routes
# =============================================================================


@router.get(CONTACT_FORM_PATH)
async def contact_form(request: Request) -> StreamingResponse:
    """
    문의 폼 fragment.

    index.html의 @get('/contact/form')이 호출.
    """
    html = render_contact_form(request.app.state.templates)
    return element_patch_response(html)


@router.post(CONTACT_FORM_PATH)
async def contact_submit(
    form: Annotated[ContactFormBody, Form()],
) -> StreamingResponse:
    """
    문의 폼 제출.

    Returns:
        성공: showSuccess=true, 모든 필드 초기화
        실패: showError=true, errorMessage, sanitize된 입력값
    """
    submission = form.to_submission()

    log_contact_submission(submission)

    outcome = validate_contact_form(submission)
    if not outcome.valid:
        message = outcome.message or ""
        logger.info(f"Contact form validation failed: {message}")
        return signal_patch_response(build_error_state(submission, message))

    log_successful_submission(submission)
    return signal_patch_response(build_success_state())
