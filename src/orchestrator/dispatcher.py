"""Consultation dispatcher -- relevance gate in front of the upstream call."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from src.api.response import build_response
from src.config.constants import OperationKind
from src.config.settings import Settings
from src.infrastructure.audit import AuditSink, record_rejection
from src.infrastructure.llm import UpstreamClient
from src.orchestrator.operations import OperationSpec, get_operation
from src.services.relevance.classifier import RelevanceClassifier
from src.services.relevance.models import RelevanceVerdict
from src.services.relevance.rejection import compose_rejection

logger = logging.getLogger(__name__)


def first_rejection(
    classifier: RelevanceClassifier,
    fields: Iterable[tuple[str, str]],
) -> tuple[str, RelevanceVerdict] | None:
    """Classify every (name, text) pair and return the first rejected one.

    Fields are checked in the order given, so earlier fields win when more
    than one is rejected.
    """
    verdicts = [(name, classifier.classify(text)) for name, text in fields]
    for name, verdict in verdicts:
        if not verdict.allowed:
            return name, verdict
    return None


class ConsultationDispatcher:
    """Runs one request through classification and, if allowed, the upstream model."""

    def __init__(
        self,
        settings: Settings,
        classifier: RelevanceClassifier,
        upstream: UpstreamClient,
        audit_sink: AuditSink,
    ) -> None:
        self.settings = settings
        self._classifier = classifier
        self._upstream = upstream
        self._audit_sink = audit_sink

    async def dispatch(self, kind: OperationKind, request: Any) -> dict[str, Any]:
        """
        Answer a validated request or refuse it as off-topic.

        Args:
            kind: Operation being served
            request: Validated request model for that operation

        Returns:
            Response dict with camelCase keys

        Raises:
            UpstreamError: If the generation call fails
        """
        operation = get_operation(kind)

        refusal = await self._check_relevance(operation, request)
        if refusal is not None:
            return refusal

        prompt = operation.build_prompt(request)
        result = await self._upstream.generate(prompt, operation.max_tokens(self.settings))
        logger.info("%s answered (usage=%s)", operation.endpoint, result.usage)
        return build_response(result.text, is_off_topic=False, usage=result.usage)

    async def _check_relevance(
        self, operation: OperationSpec, request: Any
    ) -> dict[str, Any] | None:
        fields = [(name, getattr(request, name)) for name in operation.classified_fields]
        rejected = first_rejection(self._classifier, fields)
        if rejected is None:
            return None

        field_name, verdict = rejected
        logger.info(
            "%s refused: field=%s reason=%s",
            operation.endpoint,
            field_name,
            verdict.reason.value,
        )
        # sinks may block on file I/O, keep them off the event loop
        await asyncio.to_thread(
            record_rejection, self._audit_sink, operation.audit_query(request), operation.endpoint
        )
        return build_response(
            compose_rejection(verdict),
            is_off_topic=True,
            validation_reason=verdict.reason,
        )
