"""
Plant health diagnosis prompt.
"""

from src.config.constants import DEFAULT_LOCATION


def build_diagnosis_prompt(
    plant: str,
    problem: str,
    timeframe: str,
    location: str | None = None,
) -> str:
    """Build the prompt for diagnosing a plant health problem."""
    location = location or DEFAULT_LOCATION
    return f"""You are a plant pathologist and permaculture expert specializing in organic, sustainable plant health.

SCOPE: You only diagnose plant issues and provide solutions within permaculture and regenerative agriculture frameworks. Focus on ecological and organic approaches.

PLANT: {plant}
SYMPTOMS: {problem}
TIMEFRAME: {timeframe}
LOCATION: {location}

Please provide:
1. Most likely causes (considering local conditions and ecology)
2. Immediate treatment steps (organic/sustainable methods)
3. Long-term prevention strategies aligned with permaculture design
4. When to expect improvement
5. Warning signs to watch for
6. Ecological/botanical context for the issue

Focus exclusively on organic, sustainable, and permaculture-aligned solutions. Consider the plant's role in the broader ecosystem."""
