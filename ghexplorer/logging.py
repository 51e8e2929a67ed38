"""
GitHub Explorer logging utilities.

Provides configurable logging for HTTP requests/responses and view-model
state transitions. Ensures access tokens are never logged.
"""

import logging
import re
from typing import Any

# Package-specific loggers
_root_logger = logging.getLogger("ghexplorer")
_http_logger = logging.getLogger("ghexplorer.http")
_viewmodel_logger = logging.getLogger("ghexplorer.viewmodels")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"(Bearer|token)\s+[A-Za-z0-9_\-\.]+", re.IGNORECASE), r"\1 [TOKEN_REDACTED]"),
    # GitHub personal access tokens (classic and fine-grained)
    (re.compile(r"\bgh[pousr]_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Secret/token assignments
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password", "api_key"}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    viewmodel_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure GitHub Explorer logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        viewmodel_level: Log level for view-model logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from ghexplorer.logging import configure_logging

        # Show every request made to the API
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _viewmodel_logger.setLevel(
        viewmodel_level if viewmodel_level is not None else level
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a GitHub Explorer logger.

    Args:
        name: Logger name suffix (e.g., "http", "viewmodels"). If None, returns the package logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"ghexplorer.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask access tokens and other secrets in a string.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Lower-case keys to mask (default: authorization, token, secret, password, api_key)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers (optional)
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if params:
        log_parts.append(f"params={safe_log_dict(params)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    rate_limit_remaining: str | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        elapsed_ms: Request duration in milliseconds (optional)
        rate_limit_remaining: Value of the X-RateLimit-Remaining header (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if rate_limit_remaining is not None:
        log_parts.append(f"rate_limit_remaining={rate_limit_remaining}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
