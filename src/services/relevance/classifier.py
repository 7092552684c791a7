"""Topic relevance classifier service."""

import logging

from src.config.constants import RelevanceReason
from src.config.lexicon import DEFAULT_LEXICON, Lexicon
from src.services.relevance.models import RelevanceVerdict

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 10


class RelevanceClassifier:
    """Decides whether free text belongs to the permaculture domain.

    Matching is case-insensitive substring containment against the lexicon.
    Any in-scope term overrides off-topic terms, and long text with neither
    kind of term is allowed.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON, min_length: int = DEFAULT_MIN_LENGTH):
        """Initialize relevance classifier."""
        self.lexicon = lexicon
        self.min_length = min_length

    def classify(self, text: str) -> RelevanceVerdict:
        """
        Classify a single free-text field.

        Args:
            text: Raw user input

        Returns:
            RelevanceVerdict with allowed flag and reason
        """
        lowered = text.lower()

        has_off_topic = any(term in lowered for term in self.lexicon.off_topic)
        has_in_scope = any(term in lowered for term in self.lexicon.in_scope)

        if has_off_topic and not has_in_scope:
            logger.debug("Off-topic text rejected (length=%d)", len(lowered))
            return RelevanceVerdict(allowed=False, reason=RelevanceReason.OFF_TOPIC)

        if len(lowered) < self.min_length and not has_in_scope:
            logger.debug("Vague text rejected (length=%d)", len(lowered))
            return RelevanceVerdict(allowed=False, reason=RelevanceReason.TOO_VAGUE)

        return RelevanceVerdict(allowed=True, reason=RelevanceReason.IN_SCOPE)


_default_classifier = RelevanceClassifier()


def classify(text: str) -> RelevanceVerdict:
    """Classify text with the default lexicon."""
    return _default_classifier.classify(text)
