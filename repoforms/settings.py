"""内容表单 - 统一配置读取与校验.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- `create_app(settings=...)` 只消费 Settings,不再直接读取环境变量.
- 生产环境默认更严格: 缺失 SECRET_KEY 会直接抛出 ValueError.
"""

from __future__ import annotations

import json
import logging
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repoforms.constants.view_routes import DEFAULT_TRANSLATION_DOMAIN

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
APP_VERSION = "0.3.0"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CONTENT_CREATE_TEMPLATE = "content/create.html"
DEFAULT_CONTENT_EDIT_TEMPLATE = "content/edit.html"
DEFAULT_CONTENT_VIEW_URL = "/view/content/{content_id}"
DEFAULT_LOCATION_VIEW_URL = "/view/location/{location_id}"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

ViewTemplates = dict[str, dict[str, str]]


class Settings(BaseSettings):
    """应用运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        # VIEW_TEMPLATES 由 field_validator 自行解析
        enable_decoding=False,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")

    app_name: str = Field(default="repoforms", validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    secret_key: str = Field(default="", validation_alias="SECRET_KEY")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    content_create_template: str = Field(
        default=DEFAULT_CONTENT_CREATE_TEMPLATE,
        validation_alias="CONTENT_CREATE_TEMPLATE",
    )
    content_edit_template: str = Field(
        default=DEFAULT_CONTENT_EDIT_TEMPLATE,
        validation_alias="CONTENT_EDIT_TEMPLATE",
    )
    # {view_type: {content_type_identifier: template}}
    view_templates: ViewTemplates = Field(default_factory=dict, validation_alias="VIEW_TEMPLATES")
    translation_domain: str = Field(default=DEFAULT_TRANSLATION_DOMAIN, validation_alias="TRANSLATION_DOMAIN")

    content_view_url: str = Field(default=DEFAULT_CONTENT_VIEW_URL, validation_alias="CONTENT_VIEW_URL")
    location_view_url: str = Field(default=DEFAULT_LOCATION_VIEW_URL, validation_alias="LOCATION_VIEW_URL")

    csrf_enabled: bool = Field(default=True, validation_alias="WTF_CSRF_ENABLED")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("view_templates", mode="before")
    @classmethod
    def _parse_view_templates(cls, value: object) -> object:
        if value is None:
            return {}
        if isinstance(value, str):
            raw = value.strip()
            if not raw:
                return {}
            parsed = json.loads(raw)
            if not isinstance(parsed, dict):
                raise ValueError("VIEW_TEMPLATES must be a JSON object")
            return parsed
        return value

    @property
    def is_production(self) -> bool:
        """当前是否为生产环境."""
        return self.environment.strip().lower() == "production"

    @property
    def is_testing(self) -> bool:
        return self.environment.strip().lower() in {"testing", "test"}

    def to_flask_config(self) -> dict[str, object]:
        """转换为 Flask app.config 可写入的配置字典."""
        return {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "TESTING": self.is_testing,
            "APP_NAME": self.app_name,
            "APP_VERSION": self.app_version,
            "SECRET_KEY": self.secret_key,
            "LOG_LEVEL": self.log_level,
            "ENABLE_DEBUG_LOG": self.enable_debug_log,
            "CONTENT_CREATE_TEMPLATE": self.content_create_template,
            "CONTENT_EDIT_TEMPLATE": self.content_edit_template,
            "VIEW_TEMPLATES": {key: dict(value) for key, value in self.view_templates.items()},
            "TRANSLATION_DOMAIN": self.translation_domain,
            "CONTENT_VIEW_URL": self.content_view_url,
            "LOCATION_VIEW_URL": self.location_view_url,
            "WTF_CSRF_ENABLED": self.csrf_enabled,
        }

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _apply_defaults_and_validate(self) -> Settings:
        environment_normalized = self.environment.strip().lower()

        debug = self._resolve_debug(environment_normalized)
        self._ensure_secret_key(debug)

        self._validate()
        return self

    def _resolve_debug(self, environment_normalized: str) -> bool:
        if "debug" in self.model_fields_set:
            return bool(self.debug)
        debug = environment_normalized != "production"
        object.__setattr__(self, "debug", debug)
        return debug

    def _ensure_secret_key(self, debug: bool) -> None:
        if self.secret_key:
            return
        if not debug:
            raise ValueError("SECRET_KEY environment variable must be set in production")
        object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
        logger.warning("⚠️  开发环境使用随机生成的SECRET_KEY,生产环境请设置环境变量")

    def _validate(self) -> None:
        """执行跨字段校验,统一抛出可读的 ValueError."""
        errors: list[str] = []
        checks: list[tuple[str, bool]] = [
            ("LOG_LEVEL 仅支持 DEBUG/INFO/WARNING/ERROR/CRITICAL", self.log_level not in _LOG_LEVELS),
            ("CONTENT_CREATE_TEMPLATE 不能为空", not self.content_create_template),
            ("CONTENT_EDIT_TEMPLATE 不能为空", not self.content_edit_template),
            ("CONTENT_VIEW_URL 必须包含 {content_id}", "{content_id}" not in self.content_view_url),
            ("LOCATION_VIEW_URL 必须包含 {location_id}", "{location_id}" not in self.location_view_url),
        ]
        for message, condition in checks:
            if condition:
                errors.append(message)

        if errors:
            joined = "; ".join(errors)
            raise ValueError(f"配置校验失败: {joined}")
