"""
Validation Service: 문의 폼 검증.

규칙:
- 고정 순서로 검사, 첫 실패에서 중단 (에러 누적 없음)
  1. name 비어 있음
  2. name 2바이트 미만 (UTF-8 기준, "é"는 2바이트)
  3. email 비어 있음
  4. email 형식 불일치
- phone / service / message는 검증하지 않음
- 어떤 입력에도 예외 없이 ValidationOutcome 반환

이메일 검사는 UX용 최소 검사 (RFC 5322 아님, 보안 경계 아님).
"""

from src.domain.constants import (
    MIN_NAME_LENGTH,
    MSG_EMAIL_INVALID,
    MSG_EMAIL_REQUIRED,
    MSG_NAME_REQUIRED,
    MSG_NAME_TOO_SHORT,
)
from src.domain.schemas import ContactSubmission, ValidationOutcome


def is_valid_email(email: str) -> bool:
    """
    이메일 구조 검사.

    - '@' 포함
    - '@' 기준 split 결과가 정확히 2개 ('@' 여러 개 → 거절)
    - local / domain 모두 비어 있지 않음
    - domain에 '.' 포함
    """
    email = email.strip()

    if "@" not in email:
        return False

    parts = email.split("@")
    if len(parts) != 2:
        return False

    local, domain = parts
    if not local or not domain:
        return False

    return "." in domain


def validate_contact_form(submission: ContactSubmission) -> ValidationOutcome:
    """
    문의 폼 검증.

    Args:
        submission: 원본 제출 데이터

    Returns:
        ValidationOutcome (invalid면 첫 번째 위반 규칙의 메시지)
    """
    name = submission.name.strip()
    if not name:
        return ValidationOutcome.invalid(MSG_NAME_REQUIRED)

    if len(name.encode("utf-8")) < MIN_NAME_LENGTH:
        return ValidationOutcome.invalid(MSG_NAME_TOO_SHORT)

    email = submission.email.strip()
    if not email:
        return ValidationOutcome.invalid(MSG_EMAIL_REQUIRED)

    if not is_valid_email(email):
        return ValidationOutcome.invalid(MSG_EMAIL_INVALID)

    return ValidationOutcome.ok()
