"""Property tests for structured logging.

Log entries are valid JSON with the required fields, and never carry
password, secret or token values.
"""

from __future__ import annotations

import json
import logging
import sys

from hypothesis import given, settings, strategies as st

from src.logging_config import JsonFormatter, request_id_ctx


# --- Strategies ---

request_ids = st.uuids().map(str)
messages = st.text(min_size=1, max_size=100, alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ._-/")
levels = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
methods = st.sampled_from(["GET", "POST", "PATCH", "DELETE"])
paths = st.from_regex(r"/users(/[0-9]{1,6})?", fullmatch=True)
status_codes = st.sampled_from([200, 201, 400, 404, 405, 500])
durations = st.floats(min_value=0.0, max_value=60000.0, allow_nan=False, allow_infinity=False)


def _make_record(
    message: str,
    level: str = "INFO",
    request_id: str | None = None,
    **extra: object,
) -> logging.LogRecord:
    """Create a LogRecord with optional extra attributes."""
    record = logging.LogRecord(
        name="test",
        level=getattr(logging, level),
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if request_id is not None:
        record.request_id = request_id  # type: ignore[attr-defined]
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# --- Structured log format ---

@settings(max_examples=100)
@given(message=messages, level=levels, request_id=request_ids)
def test_structured_log_format_basic(message: str, level: str, request_id: str) -> None:
    formatter = JsonFormatter()
    record = _make_record(message, level=level, request_id=request_id)
    parsed = json.loads(formatter.format(record))

    assert "timestamp" in parsed
    assert parsed["level"] == level
    assert parsed["request_id"] == request_id
    assert parsed["message"] == message


@settings(max_examples=100)
@given(request_id=request_ids, message=messages)
def test_request_id_falls_back_to_context(request_id: str, message: str) -> None:
    formatter = JsonFormatter()
    token = request_id_ctx.set(request_id)
    try:
        parsed = json.loads(formatter.format(_make_record(message)))
    finally:
        request_id_ctx.reset(token)

    assert parsed["request_id"] == request_id


@settings(max_examples=100)
@given(method=methods, path=paths, status_code=status_codes, duration_ms=durations)
def test_access_fields_are_included(
    method: str, path: str, status_code: int, duration_ms: float
) -> None:
    formatter = JsonFormatter()
    record = _make_record(
        "access",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms,
    )
    parsed = json.loads(formatter.format(record))

    assert parsed["method"] == method
    assert parsed["path"] == path
    assert parsed["status_code"] == status_code
    assert parsed["duration_ms"] == duration_ms


def test_optional_fields_absent_by_default() -> None:
    parsed = json.loads(JsonFormatter().format(_make_record("plain")))

    for key in ("method", "path", "status_code", "duration_ms", "user_id", "error_reason", "exception"):
        assert key not in parsed


def test_exception_is_included() -> None:
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        record = _make_record("failed")
        record.exc_info = sys.exc_info()

    parsed = json.loads(JsonFormatter().format(record))
    assert "kaboom" in parsed["exception"]


# --- No secrets in logs ---

@settings(max_examples=100)
@given(
    secret_value=st.text(min_size=8, max_size=32, alphabet="abcdefghijklmnopqrstuvwxyz0123456789"),
    prefix=st.sampled_from([
        "password=",
        "password: ",
        "secret=",
        "token=",
        "api_key=",
        "authorization: ",
        '"password": "',
    ]),
)
def test_no_secrets_in_logs(secret_value: str, prefix: str) -> None:
    formatter = JsonFormatter()

    tainted_message = f"Create failed for payload {prefix}{secret_value} in body"
    parsed = json.loads(formatter.format(_make_record(tainted_message, level="ERROR")))

    assert secret_value not in parsed["message"]
    assert "[REDACTED]" in parsed["message"]


@settings(max_examples=50)
@given(secret_value=st.text(min_size=8, max_size=32, alphabet="abcdefghijklmnopqrstuvwxyz0123456789"))
def test_no_secrets_in_error_reason(secret_value: str) -> None:
    formatter = JsonFormatter()
    record = _make_record("lookup failed", error_reason=f"token={secret_value}")
    parsed = json.loads(formatter.format(record))

    assert secret_value not in parsed["error_reason"]
