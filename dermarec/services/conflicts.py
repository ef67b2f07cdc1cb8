import logging
import re
from typing import Iterable, Mapping, Optional

from dermarec.knowledge import CATALOG, CONFLICT_INDEX, Ingredient
from dermarec.schemas import IngredientListAnalysis, IngredientMatch

logger = logging.getLogger(__name__)

CONFLICT_PENALTY = 25


def resolve_conflicts(
    ordered: Iterable[str],
    conflict_index: Mapping[str, frozenset] = CONFLICT_INDEX,
) -> list[str]:
    """Keep each ingredient unless something already kept conflicts with it.

    Earlier entries win, so required ingredients (placed first) always beat
    lower-ranked optional ones. Repeated ids are dropped.
    """
    kept: list[str] = []
    seen: set[str] = set()
    blocked: set[str] = set()
    for ing_id in ordered:
        if ing_id in seen:
            continue
        if ing_id in blocked:
            logger.debug(f"Dropping {ing_id}: conflicts with an earlier pick")
            continue
        kept.append(ing_id)
        seen.add(ing_id)
        blocked.update(conflict_index.get(ing_id, ()))
    return kept


# ── Ingredient list analysis ─────────────────────────────────────────────────


def _normalize_name(name: str) -> str:
    return re.sub(r"[\s_\-]+", "_", name.strip().lower())


def parse_ingredient_list(text: str) -> list[str]:
    return [part.strip() for part in text.split(",") if part.strip()]


def find_ingredient(name: str, catalog: Mapping[str, Ingredient] = CATALOG) -> Optional[Ingredient]:
    """Match by id or display name; spaces, underscores and hyphens are equivalent."""
    return catalog.get(_normalize_name(name))


def _display_name(ing_id: str, catalog: Mapping[str, Ingredient]) -> str:
    ing = catalog.get(ing_id)
    return ing.name if ing else ing_id.replace("_", " ").title()


def analyze_ingredient_list(
    text: str,
    catalog: Mapping[str, Ingredient] = CATALOG,
    conflict_index: Mapping[str, frozenset] = CONFLICT_INDEX,
) -> IngredientListAnalysis:
    """Check a product label's ingredient list for known pairwise conflicts.

    Label entries outside the catalog still count: an ingredient that declares
    a conflict with e.g. benzoyl peroxide is flagged when the label lists it.
    """
    found: list[Ingredient] = []
    unmatched: list[str] = []
    for entry in parse_ingredient_list(text):
        ing = find_ingredient(entry, catalog)
        if ing is None:
            unmatched.append(entry)
        elif ing not in found:
            found.append(ing)

    present = {ing.id for ing in found}
    unmatched_names = [_normalize_name(entry) for entry in unmatched]
    order = list(catalog)
    matched = []
    for ing in found:
        clashes = sorted(
            (other for other in present if other in conflict_index.get(ing.id, ())),
            key=order.index,
        )
        for ref in ing.conflicts:
            if ref in catalog or ref in clashes:
                continue
            if any(ref in name for name in unmatched_names):
                clashes.append(ref)
        matched.append(IngredientMatch(
            ingredient=ing.id,
            name=ing.name,
            category=ing.category.value,
            conflicts_with=clashes,
            compatibility_score=max(0, 100 - CONFLICT_PENALTY * len(clashes)),
            warnings=[f"May interact with {_display_name(c, catalog)}" for c in clashes],
        ))

    analysis = IngredientListAnalysis(matched=matched, unmatched=unmatched)
    logger.info(
        f"Analyzed ingredient list: {len(matched)} matched, {len(unmatched)} unmatched, "
        f"conflicts={analysis.has_conflicts}"
    )
    return analysis
