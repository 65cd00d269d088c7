"""
Error definitions for the site.

규칙:
- 사용자 입력 검증 실패는 예외가 아님 → ValidationOutcome으로 반환
- 전송 계층(HTTP)까지 올라가는 실패만 AppError로 표현
- 내부 상세(스택, 템플릿 경로 등)는 로그에만, 응답에는 public_message만
"""

from typing import Any


class AppError(Exception):
    """
    HTTP 경계에서 에러 페이지로 변환되는 애플리케이션 에러.

    서브클래스가 status_code / title / 기본 public_message를 결정한다.

    Usage:
        raise BadRequestError("Missing field: name", code=ErrorCodes.INVALID_FORM)
    """

    status_code: int = 500
    title: str = "Internal Server Error"
    default_message: str = "An unexpected error occurred. Please try again later."
    default_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        detail: str | None = None,
        *,
        code: str | None = None,
        **context: Any,
    ) -> None:
        self.code = code or self.default_code
        self.detail = detail
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        parts = [f"[{self.code}]"]
        if self.detail:
            parts.append(self.detail)
        if ctx_str:
            parts.append(f"({ctx_str})")
        return " ".join(parts)

    @property
    def public_message(self) -> str:
        """사용자에게 보여줄 메시지. 기본은 내부 상세를 숨긴다."""
        return self.default_message

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "status": self.status_code,
            "detail": self.detail,
            **self.context,
        }


class NotFoundError(AppError):
    status_code = 404
    title = "Page Not Found"
    default_message = "The page you're looking for doesn't exist or has been moved."
    default_code = "NOT_FOUND"


class BadRequestError(AppError):
    """클라이언트가 고칠 수 있는 요청 오류. detail을 그대로 노출한다."""

    status_code = 400
    title = "Bad Request"
    default_message = "The request could not be understood."
    default_code = "BAD_REQUEST"

    @property
    def public_message(self) -> str:
        return self.detail or self.default_message


class InternalError(AppError):
    """처리되지 않은 예외. catch-all 핸들러가 생성, 메시지는 일반 문구만."""


class RenderError(AppError):
    """템플릿 렌더링 실패. 부분 출력 없이 500으로 처리."""

    status_code = 500
    title = "Rendering Error"
    default_message = "Failed to render the page. Please try again."
    default_code = "RENDER_FAILED"


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Transport ===
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    INVALID_FORM = "INVALID_FORM"  # form body 파싱 실패 / 필수 필드 누락

    # === Server ===
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RENDER_FAILED = "RENDER_FAILED"

    # === Startup ===
    SETTINGS_INVALID = "SETTINGS_INVALID"
