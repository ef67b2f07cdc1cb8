import logging
from typing import Mapping

from dermarec.knowledge import MEDICAL_RULES
from dermarec.services.scoring import ScoreEntry

logger = logging.getLogger(__name__)

MIN_CANDIDATE_SCORE = 0.3


def collect_constraints(medical_conditions: list[str]) -> tuple[list[str], set[str]]:
    """Union of required ids (first-seen order) and forbidden ids across conditions."""
    required: list[str] = []
    forbidden: set[str] = set()
    for condition in medical_conditions:
        rule = MEDICAL_RULES.get(condition)
        if rule is None:
            continue
        for ing_id in rule.required:
            if ing_id not in required:
                required.append(ing_id)
        forbidden.update(rule.avoid)
    return required, forbidden


def enforce_medical_rules(
    scores: Mapping[str, ScoreEntry],
    medical_conditions: list[str],
) -> list[str]:
    """Required ingredients first, then ranked candidates that clear the floor.

    Required ids may reappear in the ranked tail; the conflict resolver keeps
    only the first occurrence.
    """
    required, forbidden = collect_constraints(medical_conditions)

    candidates = [
        ing_id for ing_id, entry in scores.items()
        if entry.final >= MIN_CANDIDATE_SCORE and ing_id not in forbidden
    ]
    ranked = sorted(candidates, key=lambda i: scores[i].final, reverse=True)

    if required or forbidden:
        logger.info(f"Medical constraints: required={required}, forbidden={sorted(forbidden)}")
    return required + ranked
