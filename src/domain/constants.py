"""
Domain Constants: 사이트 전역 상수.

검증 메시지, 경로, SSE 이벤트 이름 등.
"""

from importlib.metadata import PackageNotFoundError, version

# =============================================================================
# Application Metadata
# =============================================================================

APP_NAME = "greenfields-of-cambridge"
APP_TITLE = "Greenfields of Cambridge"

try:
    APP_VERSION = version(APP_NAME)
except PackageNotFoundError:  # 설치 없이 소스 트리에서 실행
    APP_VERSION = "0.0.0+unknown"

# =============================================================================
# Validation Messages (우선순위 순서)
# =============================================================================

MSG_NAME_REQUIRED = "Name is required"
MSG_NAME_TOO_SHORT = "Name must be at least 2 characters"
MSG_EMAIL_REQUIRED = "Email is required"
MSG_EMAIL_INVALID = "Please enter a valid email address"

MIN_NAME_LENGTH = 2

# =============================================================================
# Routes
# =============================================================================

CONTACT_FORM_PATH = "/contact/form"
STATIC_URL_PATH = "/static"

# =============================================================================
# Templates
# =============================================================================

INDEX_TEMPLATE = "index.html"
CONTACT_FORM_TEMPLATE = "contact_form.html"
ERROR_TEMPLATE = "error.html"

# =============================================================================
# Datastar SSE
# =============================================================================
# 클라이언트(Datastar)가 인식하는 이벤트 이름과 data 라인 prefix.

EVENT_PATCH_ELEMENTS = "datastar-patch-elements"
EVENT_PATCH_SIGNALS = "datastar-patch-signals"
DATA_ELEMENTS = "elements"
DATA_SIGNALS = "signals"

SSE_MEDIA_TYPE = "text/event-stream"
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}
