"""
Spatial grid garden plan prompt.
"""

from src.config.constants import DEFAULT_GRID_SOIL, DEFAULT_LOCATION, DEFAULT_ZONE


def _format_feet(value: float) -> str:
    # 10.0 -> "10", 7.5 -> "7.5", never exponent notation for whole numbers
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def build_grid_plan_prompt(
    width: float,
    length: float,
    plants: str,
    location: str | None = None,
    zone: str | None = None,
    soil_type: str | None = None,
) -> str:
    """Build the prompt for a spatial layout of a rectangular plot.

    Args:
        width: Plot width in feet.
        length: Plot length in feet.
        plants: Plants the user wants to include.
        location: Site location, defaults to Iowa, Zone 5.
        zone: USDA hardiness zone, defaults to 5.
        soil_type: Soil description, defaults to loam.
    """
    location = location or DEFAULT_LOCATION
    zone = zone or DEFAULT_ZONE
    soil_type = soil_type or DEFAULT_GRID_SOIL
    w = _format_feet(width)
    ln = _format_feet(length)
    area = _format_feet(width * length)

    return f"""You are an expert permaculture designer specializing in spatial garden layout and plant spacing.

SCOPE: You create practical, spatial garden plans using permaculture principles for the given plot size and location.

PLOT DETAILS:
- Dimensions: {w}ft × {ln}ft (Area: {area} sq ft)
- Location: {location}
- USDA Zone: {zone}
- Soil Type: {soil_type}
- Plants to include: {plants}

Please provide:
1. **DESIGN RECOMMENDATIONS** (2-3 paragraphs)
   - Overall layout strategy considering space and zone
   - Companion planting relationships
   - Spacing requirements for each plant
   - Soil preparation and amendments
   - Seasonal planting timeline

2. **PLANT PLACEMENT GUIDE** (structured format)
   For each plant, provide:
   - Plant name
   - Quantity/spacing in feet (e.g., "24 inches apart")
   - Suggested position in the garden (N, S, E, W, Center, etc.)
   - Companion plants (which ones to place nearby)
   - Planting depth and height at maturity

3. **VISUAL LAYOUT DESCRIPTION**
   - Describe the optimal arrangement as if looking down at the {w}ft × {ln}ft plot
   - Include sun exposure considerations
   - Water management zones
   - Soil amendments per zone

4. **CARE NOTES**
   - Watering schedule and zones
   - Maintenance timeline
   - Succession planting for continuous harvest (if applicable)

Make this practical and actionable for someone building this garden."""
