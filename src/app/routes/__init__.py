"""
FastAPI Routes.

페이지 라우트 (HTML) + 문의 폼 라우트 (Datastar SSE)
"""

from . import contact, pages

__all__ = ["contact", "pages"]
