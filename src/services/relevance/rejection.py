"""Friendly refusal text for off-topic requests."""

from src.config.constants import RelevanceReason
from src.services.relevance.models import RelevanceVerdict

REJECTION_PREAMBLE = "🌱 I'm specialized in permaculture and regenerative agriculture! "

TOO_VAGUE_MESSAGE = (
    "Could you provide more details about your gardening or permaculture question?\n\n"
)
OUT_OF_SCOPE_MESSAGE = (
    "That's outside my area of expertise, but I'd be happy to help with:\n\n"
)

SUGGESTED_TOPICS: tuple[str, ...] = (
    "• Garden design and planning",
    "• Companion planting and plant guilds",
    "• Soil health and regeneration",
    "• Permaculture principles and ethics",
    "• Seasonal farming and moon cycles",
    "• Ecological systems and biodiversity",
    "• Plant diagnostics and herbalism",
    "• Water management and swales",
    "• Animal integration and husbandry",
)

CLOSING_INVITATION = "How can I help with your permaculture or gardening needs?"


def compose_rejection(verdict: RelevanceVerdict) -> str:
    """Build the refusal message shown instead of a generated answer."""
    if verdict.reason == RelevanceReason.TOO_VAGUE:
        body = TOO_VAGUE_MESSAGE
    else:
        body = OUT_OF_SCOPE_MESSAGE

    return (
        REJECTION_PREAMBLE
        + body
        + "\n".join(SUGGESTED_TOPICS)
        + "\n\n"
        + CLOSING_INVITATION
    )
