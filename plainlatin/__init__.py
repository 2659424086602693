from .audit import AuditLogger
from .classify import classify, lookup, translate
from .config import (
    AuditPolicy,
    ConfigError,
    PlainLatinConfig,
    load_config,
    parse_axis,
)
from .normalize import (
    SCRATCH_SIZE,
    ContractError,
    invariant_contains,
    invariant_equals,
    is_invariant,
    normalize,
    normalize_into,
    scan,
)
from .pipeline import FoldContext, fold_text, load_context
from .types import (
    Axis,
    Category,
    Drop,
    FoldResult,
    PassThrough,
    Replace,
    ScanResult,
)

__all__ = [
    "AuditLogger",
    "AuditPolicy",
    "Axis",
    "Category",
    "ConfigError",
    "ContractError",
    "Drop",
    "FoldContext",
    "FoldResult",
    "PassThrough",
    "PlainLatinConfig",
    "Replace",
    "SCRATCH_SIZE",
    "ScanResult",
    "classify",
    "fold_text",
    "invariant_contains",
    "invariant_equals",
    "is_invariant",
    "load_config",
    "load_context",
    "lookup",
    "normalize",
    "normalize_into",
    "parse_axis",
    "scan",
    "translate",
]
