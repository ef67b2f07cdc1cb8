from dermarec.knowledge.catalog import ALL_SKIN_TYPES, CATALOG, EXTERNAL_INGREDIENTS, Ingredient
from dermarec.knowledge.rules import (
    BUDGET_BANDS,
    CONCERN_WEIGHTS,
    DEFAULT_CONCERN_WEIGHT,
    DEFAULT_USAGE,
    EXPERIENCE_RANK,
    FOLLOW_UP_TIMELINE,
    MEDICAL_RULES,
    MONSOON_MONTHS,
    SEASONAL_RULES,
    SKIN_MATRIX,
    STRENGTH_BASE,
    USAGE_BY_CATEGORY,
    MedicalRule,
    SeasonalRule,
)
from dermarec.knowledge.validate import build_conflict_index, validate_reference_data

validate_reference_data(CATALOG, MEDICAL_RULES, SEASONAL_RULES, EXTERNAL_INGREDIENTS)

CONFLICT_INDEX = build_conflict_index(CATALOG)

__all__ = [
    "ALL_SKIN_TYPES",
    "BUDGET_BANDS",
    "CATALOG",
    "CONCERN_WEIGHTS",
    "CONFLICT_INDEX",
    "DEFAULT_CONCERN_WEIGHT",
    "DEFAULT_USAGE",
    "EXPERIENCE_RANK",
    "EXTERNAL_INGREDIENTS",
    "FOLLOW_UP_TIMELINE",
    "Ingredient",
    "MEDICAL_RULES",
    "MONSOON_MONTHS",
    "MedicalRule",
    "SEASONAL_RULES",
    "SKIN_MATRIX",
    "STRENGTH_BASE",
    "SeasonalRule",
    "USAGE_BY_CATEGORY",
    "build_conflict_index",
    "validate_reference_data",
]
