"""
Input sanitization.

사용자 입력 문자열을 로그/응답에 싣기 전에 반드시 통과시킨다:
- ASCII 이외 문자 제거
- 제어 문자 제거 (U+0000-U+001F, U+007F)
- 앞뒤 공백 제거
"""


def _is_allowed(char: str) -> bool:
    # ASCII 범위에서 isprintable()은 제어 문자만 거른다 (공백은 통과)
    return char.isascii() and char.isprintable()


def sanitize_input(value: str) -> str:
    """
    문자열 sanitize.

    모든 입력에 대해 정의된 결과를 반환하며 예외를 던지지 않는다.
    두 번 적용해도 결과가 같다 (idempotent).

    Args:
        value: 원본 문자열

    Returns:
        허용 문자만 남기고 strip한 문자열
    """
    return "".join(c for c in value if _is_allowed(c)).strip()


def sanitize_optional(value: str | None) -> str:
    """선택 필드용: None이면 빈 문자열."""
    if value is None:
        return ""
    return sanitize_input(value)
