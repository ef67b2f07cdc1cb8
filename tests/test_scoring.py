"""Unit tests for the five sub-scores and the composite score."""

import pytest

from dermarec.knowledge import CATALOG
from dermarec.services.profile import normalize_profile
from dermarec.services.scoring import (
    budget_fit,
    concern_match,
    experience_fit,
    safety,
    score_all_ingredients,
    score_ingredient,
    skin_fit,
)


def _profile(**overrides):
    return normalize_profile(overrides)


# ── Skin fit ────────────────────────────────────────────────────────────────


class TestSkinFit:
    def test_wildcard_is_perfect_fit(self):
        assert skin_fit(CATALOG["niacinamide"], "dry") == 1.0

    def test_wildcard_mixed_with_types_still_perfect(self):
        assert skin_fit(CATALOG["mineral_sunscreen"], "oily") == 1.0

    def test_best_matching_type_wins(self):
        # retinol suits normal/oily/combination; combination row: 0.8 / 0.7 / 1.0
        assert skin_fit(CATALOG["retinol"], "combination") == 1.0

    def test_partial_fit_from_matrix(self):
        # dry row: normal 0.6, oily 0.2, combination 0.4
        assert skin_fit(CATALOG["retinol"], "dry") == pytest.approx(0.6)

    def test_unknown_user_skin_type_is_zero(self):
        assert skin_fit(CATALOG["retinol"], "martian") == 0.0


# ── Concern match ───────────────────────────────────────────────────────────


class TestConcernMatch:
    def test_sum_is_capped(self):
        assert concern_match(CATALOG["salicylic_acid"], ["acne", "oiliness", "pores"]) == 1.0

    def test_position_decay(self):
        # aging at position 1: (1 - 0.1) * 0.8
        assert concern_match(CATALOG["retinol"], ["dryness", "aging"]) == pytest.approx(0.72)

    def test_earlier_concerns_count_more(self):
        first = concern_match(CATALOG["hyaluronic_acid"], ["dryness", "acne"])
        second = concern_match(CATALOG["hyaluronic_acid"], ["acne", "dryness"])
        assert first > second

    def test_unweighted_concern_uses_default(self):
        assert concern_match(CATALOG["peptides"], ["firmness"]) == pytest.approx(0.5)

    def test_no_overlap_is_zero(self):
        assert concern_match(CATALOG["gentle_cleanser"], ["acne"]) == 0.0


# ── Safety ──────────────────────────────────────────────────────────────────


class TestSafety:
    def test_strength_base(self):
        assert safety(CATALOG["gentle_cleanser"], 5, []) == pytest.approx(1.0)
        assert safety(CATALOG["vitamin_c"], 5, []) == pytest.approx(0.8)
        assert safety(CATALOG["retinol"], 5, []) == pytest.approx(0.6)

    def test_low_sensitivity_has_no_penalty(self):
        assert safety(CATALOG["retinol"], 1, []) == pytest.approx(0.6)

    def test_sensitivity_penalty(self):
        assert safety(CATALOG["retinol"], 8, []) == pytest.approx(0.3)

    def test_condition_multiplies_penalty(self):
        # 1.0 - (10 - 5) * 0.1 * 1.5
        assert safety(CATALOG["gentle_cleanser"], 10, ["eczema"]) == pytest.approx(0.25)

    def test_avoided_ingredient_base_cut(self):
        # 0.6 * 0.3, no sensitivity penalty
        assert safety(CATALOG["retinol"], 5, ["eczema"]) == pytest.approx(0.18)

    def test_clamped_at_zero(self):
        assert safety(CATALOG["retinol"], 10, ["eczema", "rosacea"]) == 0.0

    def test_unknown_condition_ignored(self):
        assert safety(CATALOG["retinol"], 8, ["broken_leg"]) == safety(CATALOG["retinol"], 8, [])


# ── Experience & budget ─────────────────────────────────────────────────────


class TestExperienceFit:
    def test_meets_requirement(self):
        assert experience_fit(CATALOG["retinol"], "intermediate") == 1.0
        assert experience_fit(CATALOG["retinol"], "expert") == 1.0

    def test_gap_penalty(self):
        assert experience_fit(CATALOG["retinol"], "beginner") == pytest.approx(0.7)

    def test_no_requirement_means_beginner(self):
        assert experience_fit(CATALOG["niacinamide"], "beginner") == 1.0

    def test_unknown_tier_counts_as_beginner(self):
        assert experience_fit(CATALOG["retinol"], "guru") == pytest.approx(0.7)


class TestBudgetFit:
    def test_overlap_over_ingredient_width(self):
        # mid-range 500-1500 vs 800-3000: 700 / 2200
        assert budget_fit(CATALOG["retinol"], "mid-range") == pytest.approx(700 / 2200)

    def test_cheap_narrow_range_partial(self):
        # budget 0-500 vs 300-1200: 200 / 900
        assert budget_fit(CATALOG["gentle_cleanser"], "budget") == pytest.approx(200 / 900)

    def test_no_overlap_is_zero(self):
        assert budget_fit(CATALOG["bakuchiol"], "budget") == 0.0
        assert budget_fit(CATALOG["gentle_cleanser"], "luxury") == 0.0

    def test_unknown_tier_is_zero(self):
        assert budget_fit(CATALOG["retinol"], "free") == 0.0


# ── Composite ───────────────────────────────────────────────────────────────


class TestComposite:
    def test_weighted_sum(self):
        profile = _profile(skinType="combination", concerns=["acne", "oiliness", "pores"], sensitivity=4)
        entry = score_ingredient(CATALOG["niacinamide"], profile)
        expected = 0.25 * 1 + 0.35 * 1 + 0.20 * 1 + 0.10 * 1 + 0.10 * (1000 / 1100)
        assert entry.final == pytest.approx(expected)
        assert entry.skin == 1.0
        assert entry.concern == 1.0

    def test_retinol_for_beginner(self):
        profile = _profile(skinType="combination", concerns=["acne", "oiliness", "pores"], sensitivity=4)
        entry = score_ingredient(CATALOG["retinol"], profile)
        expected = 0.25 * 1 + 0.35 * 0.9 + 0.20 * 0.6 + 0.10 * 0.7 + 0.10 * (700 / 2200)
        assert entry.final == pytest.approx(expected)

    def test_every_catalog_ingredient_scored(self):
        scores = score_all_ingredients(_profile())
        assert list(scores) == list(CATALOG)

    @pytest.mark.parametrize("profile", [
        {},
        {"skinType": "sensitive", "sensitivity": 10, "medicalConditions": ["eczema", "rosacea"]},
        {"skinType": "oily", "concerns": ["acne", "acne", "acne"], "experience": "expert"},
        {"skinType": "martian", "budget": "free", "experience": "guru", "concerns": "???"},
        {"skinType": "dry", "budget": "luxury", "sensitivity": 1},
    ])
    def test_all_scores_in_unit_interval(self, profile):
        for entry in score_all_ingredients(normalize_profile(profile)).values():
            for value in entry.as_dict().values():
                assert 0.0 <= value <= 1.0
