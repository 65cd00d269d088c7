"""
Settings: 서버 설정 로드 (pydantic-settings).

우선순위 (뒤가 앞을 덮어씀):
1. 내장 기본값 (metadata.name / metadata.version)
2. default.yaml (프로젝트 루트, 필수)
3. <run_environment>.yaml (같은 디렉터리, 선택)
   - run_environment: RUN_ENVIRONMENT 환경변수, 기본 "local"
4. APP__ prefix 환경변수 ("__" 구분자, 예: APP__SERVER__PORT=9000)

로드는 시작 시 한 번. 결과 Settings는 frozen → 이후 읽기 전용.
검증 코어(sanitize/validate)는 설정을 받지 않는다.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from src.domain.constants import APP_NAME, APP_VERSION
from src.domain.errors import AppError, ErrorCodes

logger = logging.getLogger(__name__)

ENV_PREFIX = "APP__"
ENV_NESTED_DELIMITER = "__"
RUN_ENVIRONMENT_VAR = "RUN_ENVIRONMENT"
DEFAULT_RUN_ENVIRONMENT = "local"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
LogFormat = Literal["text", "json"]

# 프로젝트 루트 (src/core/settings.py 기준)
DEFAULT_CONFIG_DIR = Path(__file__).parent.parent.parent


class SettingsError(AppError):
    """설정 파일/환경변수 오류. 시작 단계에서만 발생."""

    default_code = ErrorCodes.SETTINGS_INVALID
    default_message = "Server configuration is invalid."


# =============================================================================
# Settings Schemas
# =============================================================================

class ServerSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str
    port: int = Field(ge=1, le=65535)


class LogSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: LogLevel = "INFO"
    format: LogFormat = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class Metadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = APP_NAME
    version: str = APP_VERSION


class Settings(BaseSettings):
    """
    전체 설정.

    YAML 값은 init kwargs로 전달되고, APP__ 환경변수가 그 위를 덮는다.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter=ENV_NESTED_DELIMITER,
        extra="ignore",
        frozen=True,
    )

    server: ServerSettings
    log: LogSettings
    metadata: Metadata = Field(default_factory=Metadata)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # 환경변수 > YAML (init kwargs). .env는 load_dotenv로 os.environ에 올라온다.
        return env_settings, init_settings

    @property
    def bind_address(self) -> str:
        return f"{self.server.host}:{self.server.port}"


# =============================================================================
# Loading
# =============================================================================

def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """중첩 dict 병합 (override 우선)."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: Path) -> dict[str, Any]:
    """YAML 파일 로드. 빈 파일은 빈 dict."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SettingsError(f"Failed to parse {path.name}: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"{path.name} must contain a mapping", path=str(path))
    return data


def _describe(error: ValidationError) -> str:
    """ValidationError → "server.port: Input should be ..." 형태 요약."""
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def build_settings(data: Mapping[str, Any]) -> Settings:
    """
    병합된 YAML dict → Settings 변환 + 검증.

    APP__ 환경변수는 여기서도 data보다 우선한다.

    Raises:
        SettingsError: 필수 키 누락, port 범위 밖, 알 수 없는 log level/format
    """
    try:
        return Settings(**data)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings: {_describe(e)}") from e


def load_settings(
    config_dir: Path | None = None,
    run_environment: str | None = None,
) -> Settings:
    """
    설정 로드.

    Args:
        config_dir: default.yaml이 있는 디렉터리 (기본: 프로젝트 루트)
        run_environment: 환경 이름 (기본: RUN_ENVIRONMENT 또는 "local")

    Returns:
        검증된 Settings

    Raises:
        SettingsError: default.yaml 없음/파싱 실패/검증 실패
    """
    load_dotenv()

    if config_dir is None:
        config_dir = DEFAULT_CONFIG_DIR

    if run_environment is None:
        run_environment = os.environ.get(RUN_ENVIRONMENT_VAR, DEFAULT_RUN_ENVIRONMENT)

    default_path = config_dir / "default.yaml"
    if not default_path.exists():
        raise SettingsError("default.yaml not found", path=str(default_path))

    data = _read_yaml(default_path)

    env_path = config_dir / f"{run_environment}.yaml"
    if env_path.exists():
        logger.debug(f"Loading environment config: {env_path}")
        data = _deep_merge(data, _read_yaml(env_path))

    return build_settings(data)
