"""
Profile normalizer turns an untrusted, partial profile mapping into a
complete UserProfile.

Never fails on a mapping: missing fields get defaults, scalars are wrapped,
sensitivity is clamped. Unrecognized values pass through untouched and simply
match nothing downstream.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from dermarec.errors import ProfileValidationError
from dermarec.schemas import UserProfile

logger = logging.getLogger(__name__)

SENSITIVITY_MIN = 1
SENSITIVITY_MAX = 10
DEFAULT_SENSITIVITY = 5

DEFAULT_PROFILE: dict[str, Any] = dict(
    skin_type="normal",
    concerns=["hydrate_skin"],
    medical_conditions=[],
    age_range="20-29",
    gender="prefer_not_to_say",
    sensitivity=DEFAULT_SENSITIVITY,
    climate="moderate",
    budget="mid-range",
    experience="beginner",
    lifestyle="mixed",
    goals=["hydrate_skin"],
)

LIST_FIELDS = ("concerns", "medical_conditions", "goals")

# camelCase keys as sent by the UI -> attribute names
_ALIASES = {
    "skinType": "skin_type",
    "medicalConditions": "medical_conditions",
    "ageRange": "age_range",
}


def _as_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(v) for v in value]
    return [str(value)]


def clamp_sensitivity(value: Any) -> int:
    """Coerce to int and clamp to [1, 10]; unreadable values fall back to 5."""
    try:
        level = int(float(value)) if isinstance(value, str) else int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Unreadable sensitivity {value!r}, using {DEFAULT_SENSITIVITY}")
        return DEFAULT_SENSITIVITY
    return max(SENSITIVITY_MIN, min(SENSITIVITY_MAX, level))


def normalize_profile(raw: Optional[Mapping[str, Any]]) -> UserProfile:
    """Fill defaults and coerce fields. None means "all defaults"."""
    if isinstance(raw, UserProfile):
        return raw
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ProfileValidationError(
            f"Profile must be a mapping, got {type(raw).__name__}", field=None
        )

    merged = dict(DEFAULT_PROFILE)
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in merged or value is None:
            continue
        merged[name] = value

    for name in LIST_FIELDS:
        merged[name] = _as_list(merged[name])

    merged["sensitivity"] = clamp_sensitivity(merged["sensitivity"])

    for name, value in merged.items():
        if name not in LIST_FIELDS and name != "sensitivity" and not isinstance(value, str):
            merged[name] = str(value)

    profile = UserProfile(**merged)
    logger.debug(f"Normalized profile: {profile}")
    return profile
