"""Append-only audit trail for rejected (off-topic) queries."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

from src.config.constants import AUDIT_ENTRY_TYPE

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("audit")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class AuditEntry:
    """One rejected query, written once at rejection time."""

    timestamp: str
    operation: str
    query: str
    query_length: int
    type: str = field(default=AUDIT_ENTRY_TYPE)

    @classmethod
    def create(cls, query: str, operation: str) -> AuditEntry:
        """Stamp a new entry with the current UTC time."""
        return cls(
            timestamp=_utc_now_iso(),
            operation=operation,
            query=query,
            query_length=len(query),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "endpoint": self.operation,
            "query": self.query,
            "queryLength": self.query_length,
            "type": self.type,
        }


class AuditSink(Protocol):
    """Anything that can append an audit entry."""

    def record(self, entry: AuditEntry) -> None: ...


class LoggingAuditSink:
    """Writes entries to the ``audit`` logger."""

    def record(self, entry: AuditEntry) -> None:
        audit_logger.info('[OFF-TOPIC] [%s] Query: "%s"', entry.operation, entry.query)
        audit_logger.info(json.dumps(entry.to_dict(), ensure_ascii=False))


class JsonlAuditSink:
    """Appends entries as JSON lines to a file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def record(self, entry: AuditEntry) -> None:
        line = json.dumps(entry.to_dict(), ensure_ascii=False)
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")


def record_rejection(sink: AuditSink, query: str, operation: str) -> None:
    """Record a rejected query without ever raising into the request path."""
    try:
        sink.record(AuditEntry.create(query, operation))
    except Exception as e:
        logger.warning("Error logging off-topic query for %s: %s", operation, e)
