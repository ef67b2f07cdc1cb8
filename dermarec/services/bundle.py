"""
Bundle categorizer & formatter — turns the surviving ingredient ids into the
user-facing bundle, routine, warnings, timeline and budget summary.
"""

import logging
from typing import Mapping

from dermarec.knowledge import (
    CATALOG,
    DEFAULT_USAGE,
    FOLLOW_UP_TIMELINE,
    MEDICAL_RULES,
    USAGE_BY_CATEGORY,
    Ingredient,
)
from dermarec.schemas import (
    BudgetSummary,
    Category,
    IngredientRecommendation,
    RecommendationBundle,
    Routine,
    UserProfile,
)
from dermarec.services.scoring import ScoreEntry

logger = logging.getLogger(__name__)

TARGETED_THRESHOLD = 0.7
PATCH_TEST_SENSITIVITY = 7

ESSENTIAL_CATEGORIES = frozenset({Category.CLEANSER, Category.MOISTURIZER, Category.SUNSCREEN})
ROUTINE_ORDER = (
    Category.CLEANSER,
    Category.ACTIVE,
    Category.HYDRATING,
    Category.MOISTURIZER,
    Category.SUNSCREEN,
)
PM_ONLY = frozenset({"retinol"})

WARN_SUNSCREEN_WITH_ACTIVES = "Always use sunscreen when using active ingredients"
WARN_ONE_ACTIVE = "Introduce one active at a time"
WARN_PATCH_TEST = "Patch-test all new products"


def usage_for(category: str) -> str:
    return USAGE_BY_CATEGORY.get(category, DEFAULT_USAGE)


def format_ingredient(ingredient: Ingredient, score: float) -> IngredientRecommendation:
    return IngredientRecommendation(
        ingredient=ingredient.id,
        name=ingredient.name,
        category=ingredient.category.value,
        addresses=list(ingredient.addresses),
        strength=ingredient.strength.value,
        price_range=list(ingredient.price_range),
        final_score=round(score, 2),
        usage=usage_for(ingredient.category),
    )


def categorize(
    chosen: list[str],
    scores: Mapping[str, ScoreEntry],
    catalog: Mapping[str, Ingredient] = CATALOG,
) -> RecommendationBundle:
    essential, targeted, supporting = [], [], []
    for ing_id in chosen:
        ing = catalog[ing_id]
        score = scores[ing_id].final
        record = format_ingredient(ing, score)
        if ing.essential or ing.category in ESSENTIAL_CATEGORIES:
            essential.append(record)
        elif score >= TARGETED_THRESHOLD:
            targeted.append(record)
        else:
            supporting.append(record)
    return RecommendationBundle(essential=essential, targeted=targeted, supporting=supporting)


def build_routine(chosen: list[str], catalog: Mapping[str, Ingredient] = CATALOG) -> Routine:
    morning: list[str] = []
    evening: list[str] = []
    for category in ROUTINE_ORDER:
        for ing_id in chosen:
            ing = catalog[ing_id]
            if ing.category != category:
                continue
            if category == Category.SUNSCREEN:
                morning.append(f"{ing.name} (AM only)")
            elif ing_id in PM_ONLY:
                evening.append(f"{ing.name} (PM only)")
            else:
                morning.append(ing.name)
                evening.append(ing.name)
    return Routine(morning=morning, evening=evening)


def build_warnings(
    chosen: list[str],
    profile: UserProfile,
    catalog: Mapping[str, Ingredient] = CATALOG,
) -> list[str]:
    warnings = []
    if any(catalog[i].category == Category.ACTIVE for i in chosen):
        warnings.append(WARN_SUNSCREEN_WITH_ACTIVES)
        warnings.append(WARN_ONE_ACTIVE)
    if profile.sensitivity > PATCH_TEST_SENSITIVITY:
        warnings.append(WARN_PATCH_TEST)
    for condition in profile.medical_conditions:
        rule = MEDICAL_RULES.get(condition)
        if rule and rule.advisory and rule.advisory not in warnings:
            warnings.append(rule.advisory)
    return warnings


def build_timeline() -> dict[str, str]:
    return dict(FOLLOW_UP_TIMELINE)


# Budget Summary

def _value_assessment(average_price: float) -> str:
    if average_price < 400:
        return "Excellent value - affordable products with good efficacy"
    elif average_price < 800:
        return "Good value - balanced quality and pricing"
    elif average_price < 1500:
        return "Premium value - higher quality ingredients and formulations"
    return "Luxury value - top-tier products with advanced formulations"


def summarize_budget(bundle: RecommendationBundle) -> BudgetSummary:
    buckets = {
        "essential": bundle.essential,
        "targeted": bundle.targeted,
        "supporting": bundle.supporting,
    }
    bucket_totals = {
        name: [sum(r.price_range[0] for r in records), sum(r.price_range[1] for r in records)]
        for name, records in buckets.items()
    }
    records = bundle.all_ingredients()
    if not records:
        return BudgetSummary(bucket_totals=bucket_totals)

    low = sum(t[0] for t in bucket_totals.values())
    high = sum(t[1] for t in bucket_totals.values())
    average = round((low + high) / 2 / len(records), 2)
    return BudgetSummary(
        product_count=len(records),
        total_price_range=[low, high],
        bucket_totals=bucket_totals,
        average_price=average,
        value_assessment=_value_assessment(average),
    )
