"""Audit sinks for rejected queries."""

from src.infrastructure.audit.sink import (
    AuditEntry,
    AuditSink,
    JsonlAuditSink,
    LoggingAuditSink,
    record_rejection,
)

__all__ = [
    "AuditEntry",
    "AuditSink",
    "JsonlAuditSink",
    "LoggingAuditSink",
    "record_rejection",
]
