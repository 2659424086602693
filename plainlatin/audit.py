"""Fold event creation and JSONL logging."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from .types import FoldResult


@dataclass(frozen=True)
class FoldEvent:
    """Structured audit record for a single fold; never carries the text."""

    timestamp: str
    content_hash: str
    axis: str
    modified: bool
    input_length: int
    output_length: int
    categories: Dict[str, int]


def build_fold_event(
    result: FoldResult, input_length: int, timestamp: Optional[str] = None
) -> FoldEvent:
    """Build an audit event from a FoldResult."""

    event_time = timestamp or datetime.now(timezone.utc).isoformat()
    return FoldEvent(
        timestamp=event_time,
        content_hash=result.content_hash,
        axis=result.axis,
        modified=result.modified,
        input_length=input_length,
        output_length=len(result.text),
        categories=dict(result.categories),
    )


def fold_event_to_json(event: FoldEvent) -> str:
    """Serialize a fold event to a JSON string."""

    return json.dumps(event.__dict__, sort_keys=True, ensure_ascii=True)


class AuditLogger:
    """Append-only JSONL audit log writer."""

    def __init__(self, path: Path) -> None:
        """Initialize a logger that appends to the given path."""

        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, result: FoldResult, input_length: int, timestamp: Optional[str] = None) -> None:
        """Append a FoldResult to the JSONL audit log."""

        event = build_fold_event(result, input_length, timestamp=timestamp)
        payload = fold_event_to_json(event)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(payload + "\n")
