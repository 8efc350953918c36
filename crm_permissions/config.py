"""
Configuration for the permissions client.

Values come from environment variables or from a ``permissions:`` section
in a YAML settings file:

```yaml
permissions:
  base_url: "https://crm.example.com"
  permissions_path: "/api/salesforce/permissions"
  request_timeout: 15
  verify_ssl: true
  support_email: "admin@company.com"
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_PERMISSIONS_PATH = "/api/salesforce/permissions"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_SUPPORT_EMAIL = "admin@company.com"


@dataclass
class PermissionsConfig:
    """Settings for resolving the current user's permission matrix.

    Attributes:
        base_url: Origin of the CRM web application
        permissions_path: Path of the permissions endpoint
        request_timeout: Total seconds allowed for one fetch
        verify_ssl: Verify TLS certificates
        support_email: Recipient of "request access" emails
    """

    base_url: str = DEFAULT_BASE_URL
    permissions_path: str = DEFAULT_PERMISSIONS_PATH
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    verify_ssl: bool = True
    support_email: str = DEFAULT_SUPPORT_EMAIL

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty", field="base_url")
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be > 0, got {self.request_timeout}",
                field="request_timeout",
            )
        if not self.permissions_path.startswith("/"):
            self.permissions_path = "/" + self.permissions_path

    @property
    def permissions_url(self) -> str:
        """Full URL of the permissions endpoint."""
        return self.base_url.rstrip("/") + self.permissions_path

    @classmethod
    def from_environment(cls) -> PermissionsConfig:
        """Create configuration from environment variables.

        Returns:
            PermissionsConfig populated from CRM_PERMISSIONS_* variables
        """
        return cls(
            base_url=os.environ.get("CRM_PERMISSIONS_BASE_URL", DEFAULT_BASE_URL),
            permissions_path=os.environ.get("CRM_PERMISSIONS_PATH", DEFAULT_PERMISSIONS_PATH),
            request_timeout=_parse_timeout(
                os.environ.get("CRM_PERMISSIONS_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
            ),
            verify_ssl=_parse_bool(
                os.environ.get("CRM_PERMISSIONS_VERIFY_SSL", True), "verify_ssl"
            ),
            support_email=os.environ.get("CRM_PERMISSIONS_SUPPORT_EMAIL", DEFAULT_SUPPORT_EMAIL),
        )

    @classmethod
    def from_yaml(cls, config_path: Path) -> PermissionsConfig:
        """Load configuration from a YAML settings file.

        A missing file or a missing ``permissions`` section yields defaults.

        Raises:
            ConfigurationError: If the file is not valid YAML or values are invalid
        """
        section = _load_section(config_path)

        return cls(
            base_url=section.get("base_url", DEFAULT_BASE_URL),
            permissions_path=section.get("permissions_path", DEFAULT_PERMISSIONS_PATH),
            request_timeout=_parse_timeout(section.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)),
            verify_ssl=_parse_bool(section.get("verify_ssl", True), "verify_ssl"),
            support_email=section.get("support_email", DEFAULT_SUPPORT_EMAIL),
        )


def _load_section(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}

    try:
        config = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    section = config.get("permissions", {}) if isinstance(config, dict) else {}
    if not isinstance(section, dict):
        raise ConfigurationError("'permissions' section must be a mapping", field="permissions")
    return section


def _parse_timeout(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"request_timeout must be a number, got {value!r}", field="request_timeout"
        ) from e


_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def _parse_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{field} must be a boolean, got {value!r}", field=field)
