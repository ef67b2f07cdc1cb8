"""
Seasonal adjuster.

The season is derived from the climate string and a calendar month that the
caller passes in explicitly, so the adjustment is reproducible under a fixed
clock.
"""

import logging
from dataclasses import replace
from typing import Mapping, Optional

from dermarec.knowledge import CATALOG, MONSOON_MONTHS, SEASONAL_RULES, Ingredient
from dermarec.schemas import Season
from dermarec.services.scoring import ScoreEntry

logger = logging.getLogger(__name__)

RECOMMENDED_FACTOR = 1.2
DISCOURAGED_FACTOR = 0.7


def detect_season(climate: str, month: int) -> Optional[Season]:
    if climate == "cold":
        return Season.WINTER
    if climate.startswith("hot"):
        return Season.SUMMER
    if climate == "varied_seasonal" and month in MONSOON_MONTHS:
        return Season.MONSOON
    return None


def _adjust(ingredient: Ingredient, final: float, season: Season) -> float:
    rule = SEASONAL_RULES[season]
    for concern, boost in rule.boosts.items():
        if concern in ingredient.addresses:
            final = min(1.0, final * (1 + boost))
    if ingredient.id in rule.recommended:
        final = min(1.0, final * RECOMMENDED_FACTOR)
    if ingredient.id in rule.discouraged:
        final *= DISCOURAGED_FACTOR
    return final


def apply_seasonal_adjustments(
    scores: Mapping[str, ScoreEntry],
    season: Optional[Season],
    catalog: Mapping[str, Ingredient] = CATALOG,
) -> dict[str, ScoreEntry]:
    """Return a new score mapping with seasonal multipliers applied to `final`."""
    if season is None:
        return dict(scores)

    adjusted = {}
    for ing_id, entry in scores.items():
        final = _adjust(catalog[ing_id], entry.final, season)
        if final != entry.final:
            logger.debug(f"{season.value}: {ing_id} {entry.final:.3f} -> {final:.3f}")
        adjusted[ing_id] = replace(entry, final=final)
    logger.info(f"Applied {season.value} adjustments to {len(adjusted)} ingredients")
    return adjusted
