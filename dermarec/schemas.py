"""
Pydantic schemas — the data contracts of the recommendation engine.

UserProfile is what the normalizer hands to the pipeline; RecommendationResult
is the single value the pipeline hands back to callers (UI, HTTP layer).
Both are frozen: nothing downstream may mutate them.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ── Enums ────────────────────────────────────────────────────────────────────


class SkinType(str, enum.Enum):
    DRY = "dry"
    OILY = "oily"
    COMBINATION = "combination"
    NORMAL = "normal"
    SENSITIVE = "sensitive"


class Category(str, enum.Enum):
    CLEANSER = "cleanser"
    ACTIVE = "active"
    HYDRATING = "hydrating"
    BARRIER = "barrier"
    ANTI_AGING = "anti_aging"
    SOOTHING = "soothing"
    MOISTURIZER = "moisturizer"
    SUNSCREEN = "sunscreen"


class Strength(str, enum.Enum):
    GENTLE = "gentle"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very_strong"


class ExperienceLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class BudgetTier(str, enum.Enum):
    BUDGET = "budget"
    MID_RANGE = "mid-range"
    PREMIUM = "premium"
    LUXURY = "luxury"


class Season(str, enum.Enum):
    SUMMER = "summer"
    WINTER = "winter"
    MONSOON = "monsoon"


# ── UserProfile: the normalized request ─────────────────────────────────────


class UserProfile(BaseModel):
    """Normalized profile. Values are kept as plain strings so that
    unrecognized tiers pass through and simply fail to match a table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    skin_type: str = "normal"
    concerns: list[str] = Field(default_factory=lambda: ["hydrate_skin"])
    medical_conditions: list[str] = Field(default_factory=list)
    age_range: str = "20-29"
    gender: str = "prefer_not_to_say"
    sensitivity: int = Field(default=5, ge=1, le=10)
    climate: str = "moderate"
    budget: str = "mid-range"
    experience: str = "beginner"
    lifestyle: str = "mixed"
    goals: list[str] = Field(default_factory=lambda: ["hydrate_skin"])


# ── Recommendation output ────────────────────────────────────────────────────


class IngredientRecommendation(BaseModel):
    """A formatted catalog entry as shown to the user."""

    model_config = ConfigDict(frozen=True)

    ingredient: str
    name: str
    category: str
    addresses: list[str]
    strength: str
    price_range: list[int]
    final_score: float
    usage: str


class RecommendationBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    essential: list[IngredientRecommendation] = Field(default_factory=list)
    targeted: list[IngredientRecommendation] = Field(default_factory=list)
    supporting: list[IngredientRecommendation] = Field(default_factory=list)

    def all_ingredients(self) -> list[IngredientRecommendation]:
        return [*self.essential, *self.targeted, *self.supporting]


class Routine(BaseModel):
    model_config = ConfigDict(frozen=True)

    morning: list[str] = Field(default_factory=list)
    evening: list[str] = Field(default_factory=list)


class BudgetSummary(BaseModel):
    """Rough cost picture of the bundle, built from catalog price ranges."""

    model_config = ConfigDict(frozen=True)

    product_count: int = 0
    total_price_range: list[int] = Field(default_factory=lambda: [0, 0])
    bucket_totals: dict[str, list[int]] = Field(default_factory=dict)
    average_price: float = 0.0
    value_assessment: Optional[str] = None


class RecommendationResult(BaseModel):
    """Sole return value of the pipeline."""

    model_config = ConfigDict(frozen=True)

    user_profile: UserProfile
    generated_at: str
    algorithm_version: str
    season: Optional[Season] = None
    recommendations: RecommendationBundle
    warnings: list[str] = Field(default_factory=list)
    routine_suggestions: Routine
    follow_up_timeline: dict[str, str] = Field(default_factory=dict)
    budget_summary: BudgetSummary = Field(default_factory=BudgetSummary)

    def ingredient_ids(self) -> list[str]:
        return [r.ingredient for r in self.recommendations.all_ingredients()]


# ── Ingredient list analysis ─────────────────────────────────────────────────


class IngredientMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    ingredient: str
    name: str
    category: str
    conflicts_with: list[str] = Field(default_factory=list)
    compatibility_score: int = 100
    warnings: list[str] = Field(default_factory=list)


class IngredientListAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: list[IngredientMatch] = Field(default_factory=list)
    unmatched: list[str] = Field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return any(m.conflicts_with for m in self.matched)


class IngredientListRequest(BaseModel):
    ingredients: str = Field(description="Comma-separated ingredient list, e.g. from a product label")
