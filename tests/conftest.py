"""
Pytest fixtures for the site tests.

구성:
- 경로 / 설정 fixture
- 테스트용 앱 (create_app + 고정 Settings)
- live_server: uvicorn을 백그라운드 스레드에서 실행
"""

import logging
import threading
import time
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest
import uvicorn
import yaml
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.core.settings import LogSettings, Metadata, ServerSettings, Settings

# =============================================================================
# Logging
# =============================================================================

@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """
    configure_logging이 설치한 핸들러를 테스트 후 제거.

    pytest 자체 캡처 핸들러(StreamHandler 서브클래스)는 건드리지 않는다.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def templates_dir(project_root: Path) -> Path:
    """Jinja2 템플릿 디렉터리."""
    return project_root / "src" / "app" / "templates"


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """테스트용 설정 (파일/환경변수 무관)."""
    return Settings(
        server=ServerSettings(host="127.0.0.1", port=7100),
        log=LogSettings(level="INFO", format="text"),
        metadata=Metadata(name="greenfields-test", version="0.0.0"),
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """테스트용 FastAPI 앱."""
    from src.app.main import create_app

    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """
    테스트 클라이언트.

    lifespan 미실행 (시작/종료 로그 없이 라우트만 검사).
    """
    return TestClient(app)


# =============================================================================
# Live Server
# =============================================================================

@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    FastAPI 앱을 백그라운드에서 실행하는 fixture.

    Returns:
        서버 URL (예: "http://127.0.0.1:8765")
    """
    from src.app.main import app

    # 테스트용 포트
    port = 8765
    host = "127.0.0.1"

    # 별도 스레드에서 서버 실행
    config = uvicorn.Config(app, host=host, port=port, log_level="error")
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # 서버가 준비될 때까지 대기
    base_url = f"http://{host}:{port}"
    max_attempts = 50
    for _ in range(max_attempts):
        try:
            response = httpx.get(f"{base_url}/health", timeout=1.0)
            if response.status_code == 200:
                break
        except httpx.HTTPError:
            pass
        time.sleep(0.1)
    else:
        raise RuntimeError("Failed to start test server")

    yield base_url

    # 서버 종료
    server.should_exit = True
    thread.join(timeout=5)
