"""常量模块.

集中管理系统常量,包括错误消息、HTTP 状态码以及视图路由标识等.

主要常量:
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
- ViewRoute: 视图路由标识
"""

from http import HTTPStatus as HttpStatus

from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    LogLevel,
    SuccessMessages,
)
from .view_routes import DEFAULT_TRANSLATION_DOMAIN, FieldTypeIdentifier, ViewRoute

__all__ = [
    "DEFAULT_TRANSLATION_DOMAIN",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FieldTypeIdentifier",
    "HttpStatus",
    "LogLevel",
    "SuccessMessages",
    "ViewRoute",
]
