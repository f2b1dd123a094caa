"""结构化日志配置与辅助函数.

请求内的日志事件带上视图路由与路由参数(内容 ID、版本号、语言).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, cast

import structlog
from flask import Flask, current_app, has_request_context, request

from repoforms.constants.view_routes import ViewRoute
from repoforms.settings import APP_VERSION

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, EventDict, Processor

    from repoforms.core.types import ContextDict, JsonValue

    LogField = JsonValue | ContextDict

# 写入日志的路由参数
ROUTE_ARG_KEYS = (
    "content_type_identifier",
    "language_code",
    "parent_location_id",
    "content_id",
    "version_no",
    "language",
)


class StructlogConfig:
    """structlog 配置.

    Attributes:
        debug_enabled: 应用上下文之外是否输出 debug 日志.
        configured: 处理器链是否已安装.

    Example:
        >>> structlog_config.configure(app)
        >>> log_info('草稿已保存', module='actions', content_id=42, version_no=3)

    """

    def __init__(self) -> None:
        self.debug_enabled = False
        self.configured = False

    def configure(self, app: Flask | None = None) -> None:
        """安装处理器链(只执行一次),并读取应用的调试日志开关."""
        if not self.configured:
            structlog.configure(
                processors=self.build_processors(),
                context_class=dict,
                logger_factory=structlog.stdlib.LoggerFactory(),
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            )
            self.configured = True

        if app is not None:
            self.debug_enabled = bool(app.config.get("ENABLE_DEBUG_LOG", False))

    def build_processors(self) -> list[Processor]:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        return cast(
            "list[Processor]",
            [
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                add_route_context,
                add_app_context,
                renderer,
            ],
        )


def add_route_context(_logger: BindableLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    """写入请求方法、路径以及内容编辑路由信息.

    Returns:
        补充了 method/path/view_route 与路由参数的事件字典.

    """
    if not has_request_context():
        return event_dict

    event_dict.setdefault("method", request.method)
    event_dict.setdefault("path", request.path)
    endpoint = request.endpoint
    if endpoint:
        # Flask 端点为 "蓝图.函数",路由枚举使用 "蓝图:函数"
        route = ViewRoute.from_identifier(endpoint.replace(".", ":", 1))
        event_dict.setdefault("view_route", route.value if route is not None else endpoint)
    for key in ROUTE_ARG_KEYS:
        if request.view_args and key in request.view_args:
            event_dict.setdefault(key, request.view_args[key])
    return event_dict


def add_app_context(_logger: BindableLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    try:
        event_dict["app_name"] = current_app.config["APP_NAME"]
        event_dict["app_version"] = current_app.config["APP_VERSION"]
    except (RuntimeError, KeyError):
        event_dict["app_name"] = "repoforms"
        event_dict["app_version"] = APP_VERSION
    event_dict["logger_name"] = getattr(_logger, "name", "unknown")
    return event_dict


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    structlog_config.configure()
    return structlog.get_logger(name)


def configure_structlog(app: Flask) -> None:
    """配置 structlog,并在请求结束时记录未处理的异常.

    Args:
        app: Flask 应用实例.

    """
    structlog_config.configure(app)

    @app.teardown_request
    def log_request_failure(exception: BaseException | None) -> None:
        if exception is not None:
            get_logger("repoforms").error("请求处理异常", module="system", exception=str(exception))


def should_log_debug() -> bool:
    """应用上下文内以 ``ENABLE_DEBUG_LOG`` 为准,否则使用最近一次配置的开关."""
    try:
        return bool(current_app.config.get("ENABLE_DEBUG_LOG", False))
    except RuntimeError:
        return structlog_config.debug_enabled


def log_info(message: str, module: str = "app", **kwargs: LogField) -> None:
    get_logger("repoforms").info(message, module=module, **kwargs)


def log_warning(
    message: str,
    module: str = "app",
    exception: Exception | None = None,
    **kwargs: LogField,
) -> None:
    if exception is not None:
        kwargs["exception"] = str(exception)
    get_logger("repoforms").warning(message, module=module, **kwargs)


def log_error(
    message: str,
    module: str = "app",
    exception: Exception | None = None,
    **kwargs: LogField,
) -> None:
    """记录错误级别日志.

    Args:
        message: 日志消息.
        module: 模块名称.
        exception: 可选的异常对象,提供时附带堆栈.
        **kwargs: 额外的上下文信息.

    """
    logger = get_logger("repoforms")
    if exception is not None:
        logger.error(message, module=module, error=str(exception), exc_info=exception, **kwargs)
    else:
        logger.error(message, module=module, **kwargs)


def log_debug(message: str, module: str = "app", **kwargs: LogField) -> None:
    """记录调试日志,仅在启用调试日志时输出."""
    if should_log_debug():
        get_logger("repoforms").debug(message, module=module, **kwargs)


__all__ = [
    "add_app_context",
    "add_route_context",
    "configure_structlog",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "should_log_debug",
]
