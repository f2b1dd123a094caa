"""内容表单 - Flask 应用初始化.

内容新建/编辑视图构建: 参数解析、表单挂载、字段值表单映射与表单动作分派.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flask import Flask, jsonify
from flask_wtf.csrf import CSRFProtect

from repoforms.actions import RouteUrlBuilder
from repoforms.errors import AppError
from repoforms.extensions import EXTENSION_KEY, RepoFormsServices
from repoforms.routes import content_edit_bp
from repoforms.settings import Settings
from repoforms.utils.response_utils import unified_error_response
from repoforms.utils.structlog_config import configure_structlog, log_info

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from repoforms.actions import ContentUrlBuilder
    from repoforms.core.types import Repository

csrf = CSRFProtect()


def create_app(
    *,
    repository: Repository,
    settings: Settings | None = None,
    url_builder: ContentUrlBuilder | None = None,
) -> Flask:
    """创建 Flask 应用实例.

    Args:
        repository: 宿主提供的仓储门面.
        settings: 可选的配置对象,用于测试或多环境启动.
        url_builder: 动作完成后的跳转地址生成器,缺省按配置的路径模板生成.

    Returns:
        Flask: Flask 应用实例.

    """
    resolved_settings = settings or Settings.load()
    app = Flask(__name__)

    # 配置应用
    app.config.from_mapping(resolved_settings.to_flask_config())

    # 配置统一日志系统
    configure_structlog(app)
    logging.getLogger().setLevel(getattr(logging, resolved_settings.log_level, logging.INFO))

    csrf.init_app(app)

    resolved_url_builder = url_builder or RouteUrlBuilder(
        resolved_settings.content_view_url,
        resolved_settings.location_view_url,
    )
    app.extensions[EXTENSION_KEY] = RepoFormsServices.build(
        resolved_settings,
        repository,
        resolved_url_builder,
    )

    app.register_blueprint(content_edit_bp)

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError) -> ResponseReturnValue:
        """统一业务异常响应."""
        payload, status_code = unified_error_response(error)
        return jsonify(payload), status_code

    log_info(
        "应用已创建",
        module="system",
        environment=resolved_settings.environment,
        csrf_enabled=resolved_settings.csrf_enabled,
    )
    return app


__all__ = ["create_app"]
