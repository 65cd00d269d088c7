"""
Data schemas for the contact form.

규칙:
- 모든 스키마는 요청 단위로 생성되고 응답 후 버려짐 (저장 없음)
- UiSignalState 키는 클라이언트 data-signals 이름(camelCase)과 동일해야 함
"""

from dataclasses import dataclass
from typing import Any

# =============================================================================
# Submission
# =============================================================================

@dataclass(frozen=True)
class ContactSubmission:
    """
    문의 폼 제출 데이터 (원본 그대로, sanitize 전).

    name/email 필수, 나머지는 선택.
    """
    name: str
    email: str
    phone: str | None = None
    service: str | None = None
    message: str | None = None


# =============================================================================
# Validation Outcome
# =============================================================================

@dataclass(frozen=True)
class ValidationOutcome:
    """
    검증 결과.

    첫 번째로 위반된 규칙의 메시지만 담는다 (누적 없음).
    """
    valid: bool
    message: str | None = None

    @classmethod
    def ok(cls) -> "ValidationOutcome":
        return cls(valid=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationOutcome":
        return cls(valid=False, message=message)


# =============================================================================
# UI Signal State
# =============================================================================

@dataclass(frozen=True)
class UiSignalState:
    """
    클라이언트에 push되는 UI 상태 전체.

    서버는 요청 간에 이 상태를 보관하지 않는다.
    """
    show_success: bool
    show_error: bool
    error_message: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    service: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 (signal 이름 그대로)."""
        return {
            "showSuccess": self.show_success,
            "showError": self.show_error,
            "errorMessage": self.error_message,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "service": self.service,
            "message": self.message,
        }
