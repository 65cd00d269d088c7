"""
Core layer: 요청과 무관한 기반 모듈.

역할:
- sanitize: 사용자 입력 정리 (로그/응답 전 필수)
- settings: 시작 시 한 번 로드되는 읽기 전용 설정
- logging: root logger 구성
"""

from .logging import configure_logging
from .sanitize import sanitize_input, sanitize_optional
from .settings import Settings, SettingsError, load_settings

__all__ = [
    # sanitize
    "sanitize_input",
    "sanitize_optional",
    # settings
    "Settings",
    "SettingsError",
    "load_settings",
    # logging
    "configure_logging",
]
