import logging
from dataclasses import dataclass
from typing import Mapping

from dermarec.knowledge import (
    BUDGET_BANDS,
    CATALOG,
    CONCERN_WEIGHTS,
    DEFAULT_CONCERN_WEIGHT,
    EXPERIENCE_RANK,
    MEDICAL_RULES,
    SKIN_MATRIX,
    STRENGTH_BASE,
    Ingredient,
)
from dermarec.schemas import ExperienceLevel, UserProfile

logger = logging.getLogger(__name__)

# Weight Definitions
W_SKIN = 0.25
W_CONCERN = 0.35
W_SAFETY = 0.20
W_EXPERIENCE = 0.10
W_BUDGET = 0.10

CONCERN_POSITION_DECAY = 0.1
SENSITIVITY_PIVOT = 5
SENSITIVITY_STEP = 0.1
AVOID_SAFETY_FACTOR = 0.3
EXPERIENCE_GAP_PENALTY = 0.3


@dataclass
class ScoreEntry:
    final: float
    skin: float
    concern: float
    safety: float
    experience: float
    budget: float

    def as_dict(self) -> dict[str, float]:
        return {
            "final": self.final,
            "skin": self.skin,
            "concern": self.concern,
            "safety": self.safety,
            "experience": self.experience,
            "budget": self.budget,
        }


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


# Skin Score

def skin_fit(ingredient: Ingredient, skin_type: str) -> float:
    if ingredient.suits_all:
        return 1.0
    row = SKIN_MATRIX.get(skin_type)
    if row is None:
        return 0.0
    return max((row.get(t, 0.0) for t in ingredient.suitable_for), default=0.0)


# Concern Score

def concern_match(ingredient: Ingredient, concerns: list[str]) -> float:
    score = 0.0
    for position, concern in enumerate(concerns):
        if concern in ingredient.addresses:
            weight = CONCERN_WEIGHTS.get(concern, DEFAULT_CONCERN_WEIGHT)
            score += (1 - CONCERN_POSITION_DECAY * position) * weight
    return _clamp(score)


# Safety Score

def safety(ingredient: Ingredient, sensitivity: int, medical_conditions: list[str]) -> float:
    base = STRENGTH_BASE[ingredient.strength]
    penalty = max(0.0, (sensitivity - SENSITIVITY_PIVOT) * SENSITIVITY_STEP)
    for condition in medical_conditions:
        rule = MEDICAL_RULES.get(condition)
        if rule is None:
            continue
        if ingredient.id in rule.avoid:
            base *= AVOID_SAFETY_FACTOR
        penalty *= rule.sensitivity_multiplier
    return _clamp(base - penalty)


# Experience Score

def experience_fit(ingredient: Ingredient, experience: str) -> float:
    need = EXPERIENCE_RANK[ingredient.experience or ExperienceLevel.BEGINNER]
    have = EXPERIENCE_RANK.get(experience, EXPERIENCE_RANK[ExperienceLevel.BEGINNER])
    if have >= need:
        return 1.0
    return max(0.0, 1 - (need - have) * EXPERIENCE_GAP_PENALTY)


# Budget Score

def budget_fit(ingredient: Ingredient, budget: str) -> float:
    band = BUDGET_BANDS.get(budget)
    if band is None:
        return 0.0
    low, high = ingredient.price_range
    overlap = min(band[1], high) - max(band[0], low)
    if overlap <= 0:
        return 0.0
    # overlap over the ingredient's price width
    return _clamp(overlap / ((high - low) or 1))


# Total Score

def score_ingredient(ingredient: Ingredient, profile: UserProfile) -> ScoreEntry:
    s_skin = skin_fit(ingredient, profile.skin_type)
    s_concern = concern_match(ingredient, profile.concerns)
    s_safety = safety(ingredient, profile.sensitivity, profile.medical_conditions)
    s_exp = experience_fit(ingredient, profile.experience)
    s_budget = budget_fit(ingredient, profile.budget)

    final = (
        W_SKIN * s_skin
        + W_CONCERN * s_concern
        + W_SAFETY * s_safety
        + W_EXPERIENCE * s_exp
        + W_BUDGET * s_budget
    )
    return ScoreEntry(
        final=_clamp(final),
        skin=s_skin,
        concern=s_concern,
        safety=s_safety,
        experience=s_exp,
        budget=s_budget,
    )


def score_all_ingredients(
    profile: UserProfile,
    catalog: Mapping[str, Ingredient] = CATALOG,
) -> dict[str, ScoreEntry]:
    """Score every catalog ingredient; no filtering happens here."""
    if profile.skin_type not in SKIN_MATRIX:
        logger.warning(f"Unknown skin type {profile.skin_type!r}, skin fit falls back to wildcard matches only")
    if profile.budget not in BUDGET_BANDS:
        logger.warning(f"Unknown budget tier {profile.budget!r}, budget fit will be 0")

    scores = {ing_id: score_ingredient(ing, profile) for ing_id, ing in catalog.items()}
    for ing_id, entry in scores.items():
        logger.debug(f"{ing_id}: {entry.as_dict()}")
    return scores
