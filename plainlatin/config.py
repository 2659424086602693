"""Configuration parsing and defaults for plainlatin."""

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Optional

from .types import Axis

DEFAULT_AUDIT_PATH = "logs/plainlatin.jsonl"


class ConfigError(ValueError):
    """Raised when configuration parsing or validation fails."""

    pass


@dataclass(frozen=True)
class AuditPolicy:
    """Controls whether fold results are appended to a JSONL audit log."""

    enabled: bool = False
    path: str = DEFAULT_AUDIT_PATH


@dataclass(frozen=True)
class PlainLatinConfig:
    """Root configuration object for plainlatin."""

    axis: Axis = Axis.NONE
    audit: AuditPolicy = field(default_factory=AuditPolicy)


DEFAULT_CONFIG = PlainLatinConfig()


def load_config(path: Path) -> PlainLatinConfig:
    """Load configuration from a JSON-compatible YAML file path."""

    if not path.exists():
        return DEFAULT_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError("config must be JSON-compatible YAML") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")
    return config_from_dict(data)


def config_from_dict(data: dict) -> PlainLatinConfig:
    """Parse configuration from a Python dict."""

    axis = parse_axis(data.get("axis", Axis.NONE.value), "axis")

    audit = data.get("audit", {})
    if audit is None:
        audit = {}
    if not isinstance(audit, dict):
        raise ConfigError("audit must be an object")

    enabled = audit.get("enabled", False)
    if not isinstance(enabled, bool):
        raise ConfigError("audit.enabled must be a boolean")

    audit_path = audit.get("path", DEFAULT_AUDIT_PATH)
    if not isinstance(audit_path, str) or not audit_path:
        raise ConfigError("audit.path must be a non-empty string")

    return PlainLatinConfig(
        axis=axis,
        audit=AuditPolicy(enabled=enabled, path=audit_path),
    )


def parse_axis(value: Optional[object], name: str = "axis") -> Axis:
    """Resolve an axis name such as "lowercase" to an Axis member."""

    if isinstance(value, Axis):
        return value
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string")
    try:
        return Axis(value.lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in Axis)
        raise ConfigError(f"{name} must be one of: {choices}") from exc
