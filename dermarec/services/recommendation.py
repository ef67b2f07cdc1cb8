"""
RecommendationEngine: the pipeline's single entry point.

generate_recommendations(profile, now?) runs:
    normalize -> score -> seasonal -> medical -> conflicts -> categorize
and assembles one frozen RecommendationResult.

The engine holds no per-call state; the only outside input besides the
profile is `now`, which defaults to the current UTC time here and nowhere else.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from dermarec.config import Settings, get_settings
from dermarec.schemas import RecommendationResult
from dermarec.services.bundle import (
    build_routine,
    build_timeline,
    build_warnings,
    categorize,
    summarize_budget,
)
from dermarec.services.conflicts import resolve_conflicts
from dermarec.services.medical import enforce_medical_rules
from dermarec.services.profile import normalize_profile
from dermarec.services.scoring import ScoreEntry, score_all_ingredients
from dermarec.services.seasonal import apply_seasonal_adjustments, detect_season

logger = logging.getLogger(__name__)


def _as_utc(now: Optional[datetime]) -> datetime:
    """Current time when None; naive values are taken as UTC."""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


class RecommendationEngine:
    """
    Stateless recommendation engine over the static reference tables.

    Safe to share between concurrent callers: nothing here is written after
    construction.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def generate_recommendations(
        self,
        profile: Optional[Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> RecommendationResult:
        now = _as_utc(now)
        user = normalize_profile(profile)
        logger.info(
            f"Generating recommendations: skin={user.skin_type}, concerns={user.concerns}, "
            f"conditions={user.medical_conditions}, climate={user.climate}"
        )

        # 1. Score every catalog ingredient
        scores = score_all_ingredients(user)

        # 2. Seasonal boosts
        season = detect_season(user.climate, now.month)
        scores = apply_seasonal_adjustments(scores, season)

        # 3. Medical constraints override scores
        ordered = enforce_medical_rules(scores, user.medical_conditions)

        # 4. Earlier / higher-ranked ingredients win conflicts
        chosen = resolve_conflicts(ordered)

        # 5. Bundle, routine and guidance
        bundle = categorize(chosen, scores)
        result = RecommendationResult(
            user_profile=user,
            generated_at=now.isoformat(),
            algorithm_version=self.settings.algorithm_version,
            season=season,
            recommendations=bundle,
            warnings=build_warnings(chosen, user),
            routine_suggestions=build_routine(chosen),
            follow_up_timeline=build_timeline(),
            budget_summary=summarize_budget(bundle),
        )

        logger.info(
            f"Recommendations ready: season={season.value if season else None}, "
            f"essential={len(bundle.essential)}, targeted={len(bundle.targeted)}, "
            f"supporting={len(bundle.supporting)}"
        )
        return result

    def score_breakdown(
        self,
        profile: Optional[Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> dict[str, ScoreEntry]:
        """Seasonally adjusted score entries for every catalog ingredient."""
        now = _as_utc(now)
        user = normalize_profile(profile)
        scores = score_all_ingredients(user)
        return apply_seasonal_adjustments(scores, detect_season(user.climate, now.month))


_engine: Optional[RecommendationEngine] = None


def _get_engine() -> RecommendationEngine:
    global _engine
    if _engine is None:
        _engine = RecommendationEngine()
    return _engine


def generate_recommendations(
    profile: Optional[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> RecommendationResult:
    return _get_engine().generate_recommendations(profile, now=now)
