"""
test_validate.py - 문의 폼 검증 테스트

규칙:
- 고정 순서, 첫 실패에서 중단
- phone / service / message는 검증 대상 아님
- 어떤 입력에도 예외 없음
"""

import pytest

from src.app.services.validate import is_valid_email, validate_contact_form
from src.domain.constants import (
    MSG_EMAIL_INVALID,
    MSG_EMAIL_REQUIRED,
    MSG_NAME_REQUIRED,
    MSG_NAME_TOO_SHORT,
)
from src.domain.schemas import ContactSubmission, ValidationOutcome

# =============================================================================
# is_valid_email
# =============================================================================

class TestIsValidEmail:
    """이메일 구조 검사 테스트."""

    @pytest.mark.parametrize(
        "email",
        [
            "a@b.com",
            "alice@example.co.uk",
            "first.last+tag@sub.domain.org",
            "  padded@example.com  ",
            "a@.",  # 최소 검사: domain에 '.'만 있으면 통과
        ],
    )
    def test_valid(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email, reason",
        [
            ("a@b", "domain에 '.' 없음"),
            ("@b.com", "local 비어 있음"),
            ("ab.com", "'@' 없음"),
            ("a@@b.com", "segment 3개"),
            ("a@b@c.com", "'@' 2개"),
            ("a@", "domain 비어 있음"),
            ("", "빈 문자열"),
            ("   ", "공백만"),
            ("@", "'@'만"),
        ],
    )
    def test_invalid(self, email, reason):
        assert is_valid_email(email) is False, reason


# =============================================================================
# validate_contact_form
# =============================================================================

def _submission(name: str = "Alice", email: str = "a@b.com", **kwargs) -> ContactSubmission:
    return ContactSubmission(name=name, email=email, **kwargs)


class TestValidateContactForm:
    """validate_contact_form 함수 테스트."""

    def test_valid_submission(self):
        assert validate_contact_form(_submission()) == ValidationOutcome.ok()

    def test_name_required(self):
        outcome = validate_contact_form(_submission(name="", email="x@y.com"))

        assert outcome == ValidationOutcome.invalid(MSG_NAME_REQUIRED)

    def test_whitespace_name_is_empty(self):
        """공백만 있는 이름은 비어 있는 것으로 처리."""
        outcome = validate_contact_form(_submission(name="   \t"))

        assert outcome.message == MSG_NAME_REQUIRED

    def test_name_too_short(self):
        outcome = validate_contact_form(_submission(name="A", email="x@y.com"))

        assert outcome == ValidationOutcome.invalid(MSG_NAME_TOO_SHORT)

    def test_name_length_after_trim(self):
        """길이는 trim 후 기준."""
        outcome = validate_contact_form(_submission(name="  A  "))

        assert outcome.message == MSG_NAME_TOO_SHORT

    def test_two_character_name_ok(self):
        assert validate_contact_form(_submission(name="Al")).valid is True

    @pytest.mark.parametrize("name", ["é", "李", "🌱"])
    def test_name_length_counts_utf8_bytes(self, name):
        """길이는 UTF-8 바이트 기준: 멀티바이트 한 글자도 통과."""
        assert validate_contact_form(_submission(name=name)).valid is True

    def test_single_ascii_byte_too_short(self):
        outcome = validate_contact_form(_submission(name=" z "))

        assert outcome.message == MSG_NAME_TOO_SHORT

    def test_email_required(self):
        outcome = validate_contact_form(_submission(name="Al", email=""))

        assert outcome == ValidationOutcome.invalid(MSG_EMAIL_REQUIRED)

    def test_email_invalid(self):
        outcome = validate_contact_form(_submission(name="Al", email="bad"))

        assert outcome == ValidationOutcome.invalid(MSG_EMAIL_INVALID)

    def test_first_failure_wins(self):
        """여러 규칙 위반 시 첫 번째만 보고."""
        outcome = validate_contact_form(_submission(name="", email=""))

        assert outcome.message == MSG_NAME_REQUIRED

    def test_name_checked_before_email(self):
        outcome = validate_contact_form(_submission(name="A", email="bad"))

        assert outcome.message == MSG_NAME_TOO_SHORT

    def test_optional_fields_not_validated(self):
        """phone / service / message는 어떤 값이든 통과."""
        submission = _submission(
            phone="not a phone \x00",
            service="",
            message="日本語 " * 1000,
        )

        assert validate_contact_form(submission).valid is True

    def test_optional_fields_absent(self):
        submission = _submission(phone=None, service=None, message=None)

        assert validate_contact_form(submission).valid is True

    @pytest.mark.parametrize(
        "name, email",
        [
            ("\x00\x01", "\x7f@\x7f"),
            ("🌱🌱", "🌱@🌱.🌱"),
            ("a" * 10_000, "b" * 10_000),
            ("\n", "\n"),
        ],
    )
    def test_never_raises(self, name, email):
        """비정상 입력도 정의된 결과."""
        outcome = validate_contact_form(_submission(name=name, email=email))

        assert isinstance(outcome, ValidationOutcome)
        assert outcome.valid or outcome.message
