"""
Application Services.

역할:
- validate: 문의 폼 검증 (이메일 구조 검사 포함)
- patches: UI 상태 / HTML fragment → Datastar SSE 이벤트
"""

from .patches import (
    build_error_state,
    build_success_state,
    element_patch_response,
    render_contact_form,
    signal_patch_response,
)
from .validate import is_valid_email, validate_contact_form

__all__ = [
    "is_valid_email",
    "validate_contact_form",
    "build_success_state",
    "build_error_state",
    "render_contact_form",
    "element_patch_response",
    "signal_patch_response",
]
