from __future__ import annotations

import pytest
from werkzeug.exceptions import NotFound

from repoforms.constants import ErrorCategory, ErrorSeverity
from repoforms.errors import (
    AppError,
    InvalidOptionsError,
    MissingParameterError,
    NotFoundError,
    SystemError,
    UnauthorizedError,
    ValidationError,
    ViewBuilderNotFoundError,
    map_exception_to_status,
)
from repoforms.utils.response_utils import unified_error_response


@pytest.mark.unit
def test_missing_parameter_message_names_the_argument() -> None:
    error = MissingParameterError("ParentLocation", "无法从参数中加载父位置")

    assert isinstance(error, ValidationError)
    assert error.message == "参数 'ParentLocation' 无效: 无法从参数中加载父位置"
    assert error.extra == {"argument_name": "ParentLocation"}
    assert error.recoverable is True


@pytest.mark.unit
def test_missing_parameter_without_message_uses_default_text() -> None:
    error = MissingParameterError("Form")

    assert error.message_key == "MISSING_PARAMETER"
    assert error.message
    assert "参数 'Form'" not in error.message


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "status"),
    [
        (MissingParameterError("Language"), 400),
        (InvalidOptionsError("bad"), 400),
        (UnauthorizedError(), 403),
        (NotFoundError(), 404),
        (ViewBuilderNotFoundError(), 500),
        (NotFound(), 404),
        (RuntimeError("boom"), 500),
    ],
)
def test_map_exception_to_status(error, status) -> None:
    assert map_exception_to_status(error) == status


@pytest.mark.unit
def test_unauthorized_error_metadata() -> None:
    error = UnauthorizedError("无权读取父位置")

    assert error.category is ErrorCategory.AUTHORIZATION
    assert error.severity is ErrorSeverity.MEDIUM


@pytest.mark.unit
def test_unified_error_response_for_app_error() -> None:
    error = NotFoundError("位置 404 不存在", extra={"location_id": 404})

    payload, status = unified_error_response(error)

    assert status == 404
    assert payload["error"] is True
    assert payload["success"] is False
    assert payload["message"] == "位置 404 不存在"
    assert payload["message_code"] == "RESOURCE_NOT_FOUND"
    assert payload["category"] == "business"
    assert payload["severity"] == "low"
    assert payload["extra"] == {"location_id": "404"}
    assert "timestamp" in payload


@pytest.mark.unit
def test_unified_error_response_hides_unexpected_errors() -> None:
    try:
        raise KeyError("secret")
    except KeyError as exc:
        payload, status = unified_error_response(exc)

    assert status == 500
    assert payload["category"] == "unknown"
    assert payload["message_code"] == "INTERNAL_ERROR"
    assert "secret" not in payload["message"]
    assert "extra" not in payload


@pytest.mark.unit
def test_status_code_override() -> None:
    try:
        raise SystemError("x")
    except SystemError as exc:
        _, status = unified_error_response(exc, status_code=503)

    assert status == 503


@pytest.mark.unit
def test_app_error_accepts_overrides() -> None:
    error = AppError("custom", severity=ErrorSeverity.LOW, status_code=418)

    assert error.status_code == 418
    assert error.recoverable is True
