"""
Keyword lexicon for the topic relevance classifier.

Terms are lowercase substrings matched against lowercased input, so
``cultivat`` covers cultivate/cultivation and ``ph`` matches inside any word.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.config.settings import Settings

# =============================================================================
# In-scope terms (permaculture, ecology, botany, husbandry)
# =============================================================================

IN_SCOPE_TERMS: frozenset[str] = frozenset(
    {
        # Permaculture core
        "permaculture",
        "regenerative",
        "sustainable",
        "homestead",
        "homesteading",
        # Plants & gardening
        "plant",
        "garden",
        "grow",
        "growing",
        "cultivat",
        "harvest",
        "seed",
        "soil",
        "compost",
        "mulch",
        "leaf",
        "root",
        "flower",
        "fruit",
        "vegetable",
        "tree",
        "shrub",
        "perennial",
        "annual",
        "weed",
        "herb",
        # Ecology & environment
        "ecolog",
        "ecosystem",
        "biodiversity",
        "wildlife",
        "pollinator",
        "insect",
        "bird",
        "native",
        "invasive",
        "habitat",
        "conservation",
        "restoration",
        "carbon",
        "nitrogen",
        "phosphorus",
        "nutrient",
        "cycle",
        # Botany & science
        "botany",
        "botanical",
        "species",
        "cultivar",
        "genus",
        "photosynthesis",
        "transpiration",
        "osmosis",
        "chlorophyll",
        "phenotype",
        # Water & soil management
        "water",
        "irrigation",
        "swale",
        "pond",
        "rainwater",
        "drainage",
        "hydrology",
        "tilth",
        "texture",
        "clay",
        "sand",
        "silt",
        "ph",
        "acidic",
        "alkaline",
        "microbe",
        "bacteria",
        "fungi",
        "mycorrhiz",
        # Animal husbandry
        "animal",
        "livestock",
        "cattle",
        "sheep",
        "goat",
        "chicken",
        "bee",
        "apiary",
        "composting",
        "manure",
        "pasture",
        "grazing",
        "rotation",
        # Design & planning
        "design",
        "plan",
        "layout",
        "zone",
        "guild",
        "polycultur",
        "intercrop",
        "succession",
        "yield",
        "productivity",
        # Seasonal & climate
        "season",
        "seasonal",
        "climate",
        "hardiness",
        "frost",
        "freeze",
        "microclimate",
        "phenophase",
        "moon phase",
        "lunar",
        # Herbalism
        "medicinal",
        "herbal",
        "tincture",
        "infusion",
        "remedy",
        "healing",
        # Permaculture ethics
        "ethics",
        "earthcare",
        "peoplecare",
        "fairshare",
        "principle",
    }
)

# =============================================================================
# Off-topic terms
# =============================================================================

OFF_TOPIC_TERMS: frozenset[str] = frozenset(
    {
        # Programming
        "code",
        "program",
        "function",
        "variable",
        "debug",
        "error",
        # Schoolwork & creative writing
        "homework",
        "essay",
        "write",
        "poem",
        "story",
        "fiction",
        "quiz",
        "exam",
        # Controversial
        "politics",
        "religion",
        "conspiracy",
        # Security
        "hack",
        "crack",
        "exploit",
        "malware",
        # Markets
        "investment",
        "crypto",
        "stock",
        "trading",
        # Human medicine
        "medical",
        "doctor",
        "disease",
        "prescription",
        "drug",
        # Repairs
        "repair",
        "fix",
        "mechanical",
        # Finance
        "financial",
        "tax",
        "loan",
        "mortgage",
    }
)


def _normalize_terms(terms: Iterable[str]) -> frozenset[str]:
    return frozenset(t.strip().lower() for t in terms if t and t.strip())


@dataclass(frozen=True)
class Lexicon:
    """Immutable pair of in-scope and off-topic term sets."""

    in_scope: frozenset[str] = IN_SCOPE_TERMS
    off_topic: frozenset[str] = OFF_TOPIC_TERMS

    @classmethod
    def from_terms(cls, in_scope: Iterable[str], off_topic: Iterable[str]) -> Lexicon:
        """Build a lexicon from arbitrary term lists (lowercased, blanks dropped)."""
        return cls(in_scope=_normalize_terms(in_scope), off_topic=_normalize_terms(off_topic))

    @classmethod
    def from_settings(cls, settings: Settings) -> Lexicon:
        """Default lexicon extended with the deployment's extra terms."""
        return cls.from_terms(
            in_scope=IN_SCOPE_TERMS | set(settings.lexicon_extra_in_scope),
            off_topic=OFF_TOPIC_TERMS | set(settings.lexicon_extra_off_topic),
        )


DEFAULT_LEXICON = Lexicon()
