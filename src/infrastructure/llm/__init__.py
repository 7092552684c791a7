"""LLM infrastructure module."""

from src.infrastructure.llm.client import UpstreamClient, UpstreamError, UpstreamResult

__all__ = [
    "UpstreamClient",
    "UpstreamError",
    "UpstreamResult",
]
