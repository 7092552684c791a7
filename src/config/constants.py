"""
Constants, enums, and static values.
"""

from enum import Enum


class OperationKind(str, Enum):
    """Request types accepted by the consultation API."""

    CONSULT = "consult"
    PLAN = "plan"
    DIAGNOSE = "diagnose"
    GRID_PLAN = "grid-plan"


class RelevanceReason(str, Enum):
    """Reason attached to a relevance verdict."""

    IN_SCOPE = "in-scope"
    OFF_TOPIC = "off-topic"
    TOO_VAGUE = "too-vague"


# Defaults used when a request omits optional site details
DEFAULT_LOCATION = "Iowa, Zone 5"
DEFAULT_CONSULT_SOIL = "clay"
DEFAULT_SPACE_SIZE = "small homestead"
DEFAULT_SEASON = "Current season"
DEFAULT_ZONE = "5"
DEFAULT_GRID_SOIL = "loam"

AUDIT_ENTRY_TYPE = "off-topic-attempt"
