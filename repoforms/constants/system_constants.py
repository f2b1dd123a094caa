"""内容表单 - 常量定义模块

统一管理错误分类、严重度以及错误消息等常量.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    AUTHORIZATION = "authorization"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    PERMISSION_DENIED = "权限不足"
    RESOURCE_NOT_FOUND = "资源不存在"

    # 视图构建
    MISSING_PARAMETER = "缺少必需的视图参数"
    INVALID_OPTIONS = "表单选项无效"
    VIEW_BUILDER_NOT_FOUND = "未找到匹配的视图构建器"


class SuccessMessages:
    """成功消息常量."""

    CONTENT_PUBLISHED = "内容已发布"
    DRAFT_SAVED = "草稿已保存"
