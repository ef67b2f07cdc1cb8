"""
Load-time consistency checks for the reference tables.

A typo in a rule table would otherwise silently disable a medical constraint,
so the package refuses to import when any reference cannot be resolved.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from dermarec.errors import ReferenceDataError
from dermarec.knowledge.catalog import ALL_SKIN_TYPES, Ingredient
from dermarec.knowledge.rules import MedicalRule, SeasonalRule
from dermarec.schemas import Category, ExperienceLevel, SkinType, Strength

logger = logging.getLogger(__name__)

_SKIN_TYPES = {s.value for s in SkinType} | {ALL_SKIN_TYPES}
_CATEGORIES = {c.value for c in Category}
_STRENGTHS = {s.value for s in Strength}
_EXPERIENCE = {e.value for e in ExperienceLevel}


def _missing(ids: Iterable[str], known) -> list[str]:
    return [i for i in ids if i not in known]


def validate_reference_data(
    catalog: Mapping[str, Ingredient],
    medical_rules: Mapping[str, MedicalRule],
    seasonal_rules: Mapping[str, SeasonalRule],
    external: frozenset,
) -> None:
    """Raise ReferenceDataError listing every problem found."""
    problems: list[str] = []
    resolvable = set(catalog) | set(external)

    for ing_id, ing in catalog.items():
        if ing_id != ing.id:
            problems.append(f"catalog key {ing_id!r} does not match ingredient id {ing.id!r}")
        if ing.category not in _CATEGORIES:
            problems.append(f"{ing_id}: unknown category {ing.category!r}")
        if ing.strength not in _STRENGTHS:
            problems.append(f"{ing_id}: unknown strength {ing.strength!r}")
        if ing.experience is not None and ing.experience not in _EXPERIENCE:
            problems.append(f"{ing_id}: unknown experience tier {ing.experience!r}")
        for skin in _missing(ing.suitable_for, _SKIN_TYPES):
            problems.append(f"{ing_id}: unknown skin type {skin!r}")
        low, high = ing.price_range
        if low < 0 or high < low:
            problems.append(f"{ing_id}: invalid price range {ing.price_range!r}")
        for ref in _missing(ing.conflicts, resolvable):
            problems.append(f"{ing_id}: conflict reference {ref!r} cannot be resolved")

    for name, rule in medical_rules.items():
        for ref in _missing(rule.required, catalog):
            problems.append(f"medical rule {name}: required ingredient {ref!r} not in catalog")
        for ref in _missing(rule.avoid, catalog):
            problems.append(f"medical rule {name}: avoided ingredient {ref!r} not in catalog")
        if rule.sensitivity_multiplier < 0:
            problems.append(f"medical rule {name}: negative sensitivity multiplier")

    for season, rule in seasonal_rules.items():
        for ref in _missing(rule.recommended, catalog):
            problems.append(f"seasonal rule {season}: recommended ingredient {ref!r} not in catalog")
        for ref in _missing(rule.discouraged, resolvable):
            problems.append(f"seasonal rule {season}: discouraged ingredient {ref!r} cannot be resolved")

    if problems:
        raise ReferenceDataError("Invalid reference data:\n  " + "\n  ".join(problems))

    logger.debug(
        f"Reference data OK: {len(catalog)} ingredients, "
        f"{len(medical_rules)} medical rules, {len(seasonal_rules)} seasonal rules"
    )


def build_conflict_index(catalog: Mapping[str, Ingredient]) -> Mapping[str, frozenset]:
    """Symmetric conflict adjacency between catalog ingredients.

    A conflict declared on one side only still applies both ways. References to
    ingredients outside the catalog can never be kept, so they are dropped here.
    """
    adjacency: dict[str, set[str]] = {ing_id: set() for ing_id in catalog}
    for ing_id, ing in catalog.items():
        for other in ing.conflicts:
            if other in adjacency and other != ing_id:
                adjacency[ing_id].add(other)
                adjacency[other].add(ing_id)
    return MappingProxyType({k: frozenset(v) for k, v in adjacency.items()})
