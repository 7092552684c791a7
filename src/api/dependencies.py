"""FastAPI dependencies."""

import logging
from functools import lru_cache

from fastapi import Depends

from src.config.lexicon import Lexicon
from src.config.settings import Settings, get_settings
from src.infrastructure.audit import AuditSink, JsonlAuditSink, LoggingAuditSink
from src.infrastructure.llm import UpstreamClient
from src.orchestrator.dispatcher import ConsultationDispatcher
from src.services.relevance.classifier import RelevanceClassifier

logger = logging.getLogger(__name__)


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


@lru_cache
def get_classifier() -> RelevanceClassifier:
    """Classifier over the deployment lexicon, built once per process."""
    settings = get_settings()
    lexicon = Lexicon.from_settings(settings)
    logger.info(
        "Relevance lexicon loaded (in_scope=%d, off_topic=%d)",
        len(lexicon.in_scope),
        len(lexicon.off_topic),
    )
    return RelevanceClassifier(lexicon, min_length=settings.min_query_length)


@lru_cache
def get_audit_sink() -> AuditSink:
    """JSON-lines file sink when audit_log_path is set, log sink otherwise."""
    settings = get_settings()
    if settings.audit_log_path:
        return JsonlAuditSink(settings.audit_log_path)
    return LoggingAuditSink()


@lru_cache
def get_upstream_client() -> UpstreamClient:
    """Shared Claude client."""
    return UpstreamClient(get_settings())


def get_dispatcher(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    classifier: RelevanceClassifier = Depends(get_classifier),  # noqa: B008
    upstream: UpstreamClient = Depends(get_upstream_client),  # noqa: B008
    audit_sink: AuditSink = Depends(get_audit_sink),  # noqa: B008
) -> ConsultationDispatcher:
    """Per-request dispatcher wired to the shared collaborators."""
    return ConsultationDispatcher(settings, classifier, upstream, audit_sink)
