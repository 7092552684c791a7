"""Relevance service models."""

from dataclasses import dataclass

from src.config.constants import RelevanceReason


@dataclass(frozen=True)
class RelevanceVerdict:
    """Result from relevance classification."""

    allowed: bool
    reason: RelevanceReason
