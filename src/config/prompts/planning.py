"""
Site design planning prompt.
"""

from src.config.constants import DEFAULT_LOCATION


def build_planning_prompt(
    space_size: str,
    soil_type: str,
    goals: str,
    location: str | None = None,
) -> str:
    """Build the prompt for a zone-based permaculture design plan."""
    location = location or DEFAULT_LOCATION
    return f"""You are a permaculture design consultant specializing in regenerative agriculture and sustainable homesteading.

SCOPE: You only create design plans for permaculture, regenerative agriculture, sustainable gardening, and ecological food production systems.

SITE DETAILS:
- Space: {space_size}
- Soil: {soil_type}
- Location: {location}
- Goals: {goals}

Please provide:
1. Zone-based design layout (permaculture zones)
2. Recommended plant guilds for the soil/climate
3. Ecological relationships and polyculture design
4. Implementation timeline
5. Specific recommendations for soil management and regeneration
6. Integration opportunities for future sensor/automation systems
7. Animal integration possibilities if applicable

Focus on practical, achievable steps for a homesteader with limited initial budget. Emphasize regenerative and sustainable practices."""
