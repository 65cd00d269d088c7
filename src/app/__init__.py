"""
App layer: 웹 서버 (FastAPI + Datastar).

역할:
- 랜딩 페이지, 정적 파일
- 문의 폼 fragment / 제출 처리 (SSE push)
- 에러 페이지 매핑

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (페이지 + fragment)
- src/app/static/ → CSS
- default.yaml (루트) → 서버 설정
"""
