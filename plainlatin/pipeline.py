"""Fold pipeline: resolve axis, scan, hash, audit."""

from dataclasses import dataclass
import hashlib
from pathlib import Path
from typing import Optional

from .audit import AuditLogger
from .config import DEFAULT_CONFIG, PlainLatinConfig, load_config
from .normalize import scan
from .types import Axis, FoldResult

DEFAULT_CONFIG_PATH = Path("config/plainlatin.yaml")


def _content_hash(text: str) -> str:
    """Hash the original text for dedupe and auditing."""

    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


@dataclass(frozen=True)
class FoldContext:
    """Runtime context holding config and the optional audit log."""

    config: PlainLatinConfig
    audit_logger: Optional[AuditLogger]


def load_context(
    config_path: Optional[Path] = None,
    base_dir: Optional[Path] = None,
) -> FoldContext:
    """Load configuration and open the audit log when enabled."""

    resolved_config = load_config(config_path or DEFAULT_CONFIG_PATH)
    audit_logger = None
    if resolved_config.audit.enabled:
        resolved_base = base_dir or Path.cwd()
        audit_logger = AuditLogger(resolved_base / resolved_config.audit.path)
    return FoldContext(config=resolved_config, audit_logger=audit_logger)


def fold_text(
    text: str,
    axis: Optional[Axis] = None,
    config: PlainLatinConfig = DEFAULT_CONFIG,
    audit_logger: Optional[AuditLogger] = None,
) -> FoldResult:
    """Fold text along the given axis (or the configured one)."""

    resolved_axis = axis if axis is not None else config.axis
    scanned = scan(resolved_axis, text)
    result = FoldResult(
        text=scanned.text if scanned.modified else text,
        modified=scanned.modified,
        axis=resolved_axis.value,
        content_hash=_content_hash(text),
        categories=scanned.categories,
    )

    if audit_logger is not None:
        audit_logger.log(result, input_length=len(text))

    return result
