"""
Scoring tables, medical constraints and seasonal rules.

All tables are read-only for the lifetime of the process.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from dermarec.schemas import BudgetTier, Category, ExperienceLevel, Season, SkinType, Strength


def _frozen(table: dict) -> Mapping:
    return MappingProxyType(table)


# ── Compatibility & weights ──────────────────────────────────────────────────

# user skin type -> ingredient suitable type -> compatibility 0-1
SKIN_MATRIX: Mapping[str, Mapping[str, float]] = _frozen({
    SkinType.DRY: _frozen({"dry": 1.0, "normal": 0.6, "combination": 0.4, "oily": 0.2, "sensitive": 0.8}),
    SkinType.OILY: _frozen({"oily": 1.0, "combination": 0.7, "normal": 0.5, "dry": 0.2, "sensitive": 0.3}),
    SkinType.COMBINATION: _frozen({"combination": 1.0, "normal": 0.8, "oily": 0.7, "dry": 0.4, "sensitive": 0.4}),
    SkinType.NORMAL: _frozen({"normal": 1.0, "combination": 0.8, "dry": 0.6, "oily": 0.5, "sensitive": 0.6}),
    SkinType.SENSITIVE: _frozen({"sensitive": 1.0, "dry": 0.8, "normal": 0.6, "combination": 0.4, "oily": 0.3}),
})

CONCERN_WEIGHTS: Mapping[str, float] = _frozen({
    "acne": 0.9,
    "aging": 0.8,
    "hyperpigmentation": 0.75,
    "dryness": 0.7,
    "oiliness": 0.65,
    "texture": 0.6,
    "pores": 0.55,
    "sensitivity": 0.85,
})
DEFAULT_CONCERN_WEIGHT = 0.5

BUDGET_BANDS: Mapping[str, tuple[int, int]] = _frozen({
    BudgetTier.BUDGET: (0, 500),
    BudgetTier.MID_RANGE: (500, 1500),
    BudgetTier.PREMIUM: (1500, 3000),
    BudgetTier.LUXURY: (3000, 10000),
})

STRENGTH_BASE: Mapping[str, float] = _frozen({
    Strength.GENTLE: 1.0,
    Strength.MODERATE: 0.8,
    Strength.STRONG: 0.6,
    Strength.VERY_STRONG: 0.4,
})

EXPERIENCE_RANK: Mapping[str, int] = _frozen({
    ExperienceLevel.BEGINNER: 1,
    ExperienceLevel.INTERMEDIATE: 2,
    ExperienceLevel.ADVANCED: 3,
    ExperienceLevel.EXPERT: 4,
})


# ── Medical constraints ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class MedicalRule:
    """Hard constraints for one condition - these override any score."""
    condition: str
    required: tuple[str, ...] = ()
    avoid: tuple[str, ...] = ()
    sensitivity_multiplier: float = 1.0
    advisory: Optional[str] = None


MEDICAL_RULES: Mapping[str, MedicalRule] = _frozen({
    rule.condition: rule
    for rule in (
        MedicalRule(
            "eczema",
            required=("gentle_cleanser", "ceramides", "mineral_sunscreen"),
            avoid=("retinol", "salicylic_acid", "vitamin_c"),
            sensitivity_multiplier=1.5,
        ),
        MedicalRule(
            "psoriasis",
            required=("gentle_cleanser", "rich_moisturizer"),
            avoid=("salicylic_acid", "retinol"),
            sensitivity_multiplier=1.3,
        ),
        MedicalRule(
            "rosacea",
            required=("gentle_cleanser", "azelaic_acid", "mineral_sunscreen"),
            avoid=("retinol", "vitamin_c"),
            sensitivity_multiplier=1.4,
            advisory="Consult dermatologist for rosacea management",
        ),
        MedicalRule(
            "cystic_acne",
            required=("gentle_cleanser", "niacinamide"),
        ),
    )
})


# ── Seasonal rules ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SeasonalRule:
    season: Season
    boosts: Mapping[str, float] = field(default_factory=dict)
    recommended: tuple[str, ...] = ()
    discouraged: tuple[str, ...] = ()


SEASONAL_RULES: Mapping[Season, SeasonalRule] = _frozen({
    Season.SUMMER: SeasonalRule(
        Season.SUMMER,
        boosts=_frozen({"sun_damage": 0.4, "oiliness": 0.25, "pores": 0.2}),
        recommended=("mineral_sunscreen", "niacinamide", "salicylic_acid"),
        discouraged=("heavy_oils", "rich_moisturizer"),
    ),
    Season.WINTER: SeasonalRule(
        Season.WINTER,
        boosts=_frozen({"dryness": 0.3, "sensitivity": 0.2}),
        recommended=("ceramides", "hyaluronic_acid", "rich_moisturizer"),
        discouraged=("salicylic_acid", "retinol"),
    ),
    Season.MONSOON: SeasonalRule(
        Season.MONSOON,
        boosts=_frozen({"acne": 0.2, "sensitivity": 0.15}),
        recommended=("gentle_cleanser", "niacinamide"),
        discouraged=("heavy_moisturizers",),
    ),
})

MONSOON_MONTHS = frozenset({6, 7, 8, 9})


# ── Presentation text ────────────────────────────────────────────────────────

USAGE_BY_CATEGORY: Mapping[str, str] = _frozen({
    Category.CLEANSER: "Use twice daily",
    Category.ACTIVE: "Begin 2-3x/wk then increase",
    Category.HYDRATING: "Apply to damp skin",
    Category.MOISTURIZER: "Apply after actives",
    Category.SUNSCREEN: "Apply 15 min before sun & re-apply 2 h",
})
DEFAULT_USAGE = "Follow product instructions"

# Same onboarding script for every user
FOLLOW_UP_TIMELINE: Mapping[str, str] = _frozen({
    "week_1": "Start with cleanser & moisturiser",
    "week_2": "Add sunscreen (AM)",
    "week_3": "Introduce first active",
    "week_4": "Assess tolerance & adjust",
    "week_6": "Consider second active if needed",
    "week_8": "Full routine review",
})
