"""API key permission checks.

Two static keys are configured: one grants read access, the other grants
read and write access. Keys are compared in constant time.
"""

from __future__ import annotations

import hmac
import logging
from enum import Enum
from typing import Callable, Optional

from fastapi import Request

from ..config import ApiConfig
from ..domain.errors import AuthorizationError, ConfigurationError

logger = logging.getLogger(__name__)


class Permission(Enum):
    READ = "read"
    READ_WRITE = "read_write"


def _matches(provided: str, expected: str) -> bool:
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


def check_api_key(
    provided: Optional[str], permission: Permission, config: ApiConfig
) -> None:
    """Verify that a key grants the requested permission.

    Raises:
        AuthorizationError: If the key is missing or insufficient.
    """
    if provided is None or not provided.strip():
        raise AuthorizationError("Missing API key.", missing_key=True)

    key = provided.strip()
    if permission is Permission.READ_WRITE:
        if not _matches(key, config.read_write_key):
            raise AuthorizationError("API key does not grant permission for SetMap.")
        return

    if not (_matches(key, config.read_key) or _matches(key, config.read_write_key)):
        raise AuthorizationError("API key does not grant permission.")


def validate_api_config(config: ApiConfig) -> None:
    """Reject configurations that would make the permission gate meaningless.

    Raises:
        ConfigurationError: If a key is blank or both keys are equal.
    """
    for name in ("read_key", "read_write_key"):
        if not getattr(config, name).strip():
            raise ConfigurationError(
                f"API key setting must not be blank: {name}", setting_name=name
            )
    if config.read_key == config.read_write_key:
        raise ConfigurationError(
            "Read and read-write API keys must differ", setting_name="read_key"
        )


def require_permission(permission: Permission) -> Callable[[Request], None]:
    """Build a FastAPI dependency enforcing ``permission`` on a route."""

    def dependency(request: Request) -> None:
        config: ApiConfig = request.app.state.container.config.api
        try:
            check_api_key(request.headers.get(config.key_header), permission, config)
        except AuthorizationError as exc:
            logger.warning(
                "Request rejected",
                extra={
                    "path": request.url.path,
                    "permission": permission.value,
                    "reason": exc.message,
                },
            )
            raise

    return dependency
