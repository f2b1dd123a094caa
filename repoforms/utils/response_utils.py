"""统一错误响应工具.

将异常转换为结构化的 JSON 载荷,并按严重度输出日志.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from repoforms.constants import ErrorCategory, ErrorSeverity, HttpStatus
from repoforms.errors import AppError, map_exception_to_status
from repoforms.utils.structlog_config import log_error, log_warning

if TYPE_CHECKING:
    from repoforms.core.types import JsonDict


def unified_error_response(
    error: BaseException,
    *,
    status_code: int | None = None,
) -> tuple[JsonDict, int]:
    """生成统一的错误响应载荷.

    Args:
        error: 异常对象.
        status_code: HTTP 状态码,可选,默认根据异常类型自动映射.

    Returns:
        包含两个元素的元组:
        - 错误响应载荷字典
        - HTTP 状态码

    """
    safe_error = error if isinstance(error, Exception) else Exception(str(error))
    if isinstance(safe_error, AppError):
        category = safe_error.category
        severity = safe_error.severity
        message_key = safe_error.message_key
        message = safe_error.message
        extra = {key: str(value) for key, value in safe_error.extra.items()}
    else:
        category = ErrorCategory.UNKNOWN
        severity = ErrorSeverity.HIGH
        message_key = "INTERNAL_ERROR"
        message = "服务器内部错误"
        extra = {}

    payload: JsonDict = {
        "error": True,
        "success": False,
        "category": category.value,
        "severity": severity.value,
        "message_code": message_key,
        "message": message,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if extra:
        payload["extra"] = dict(extra)

    if severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL):
        log_error(message, module="error_handler", exception=safe_error, message_code=message_key)
    else:
        log_warning(message, module="error_handler", exception=safe_error, message_code=message_key)

    final_status = status_code or map_exception_to_status(safe_error, default=HttpStatus.INTERNAL_SERVER_ERROR)
    return payload, final_status
