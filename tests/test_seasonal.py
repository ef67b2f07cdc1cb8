"""Season detection and seasonal score adjustments."""

import pytest

from dermarec.schemas import Season
from dermarec.services.seasonal import apply_seasonal_adjustments, detect_season


# ── Detection ───────────────────────────────────────────────────────────────


class TestDetectSeason:
    @pytest.mark.parametrize("month", range(1, 13))
    def test_cold_is_always_winter(self, month):
        assert detect_season("cold", month) == Season.WINTER

    @pytest.mark.parametrize("month", range(1, 13))
    def test_hot_humid_is_always_summer(self, month):
        assert detect_season("hot_humid", month) == Season.SUMMER

    def test_any_hot_prefix_is_summer(self):
        assert detect_season("hot_dry", 1) == Season.SUMMER
        assert detect_season("hot", 12) == Season.SUMMER

    @pytest.mark.parametrize("month", [6, 7, 8, 9])
    def test_varied_seasonal_monsoon_months(self, month):
        assert detect_season("varied_seasonal", month) == Season.MONSOON

    @pytest.mark.parametrize("month", [1, 5, 10, 12])
    def test_varied_seasonal_outside_monsoon(self, month):
        assert detect_season("varied_seasonal", month) is None

    def test_moderate_has_no_season(self):
        assert detect_season("moderate", 7) is None


# ── Adjustments ─────────────────────────────────────────────────────────────


class TestSeasonalAdjustments:
    def test_no_season_leaves_scores(self, make_entry):
        scores = {"retinol": make_entry(0.5)}
        adjusted = apply_seasonal_adjustments(scores, None)
        assert adjusted == scores
        assert adjusted is not scores

    def test_boost_for_addressed_concern(self, make_entry):
        # chemical sunscreen addresses sun_damage (+40% in summer), not recommended
        adjusted = apply_seasonal_adjustments({"chemical_sunscreen": make_entry(0.5)}, Season.SUMMER)
        assert adjusted["chemical_sunscreen"].final == pytest.approx(0.7)

    def test_boost_and_recommendation_compound(self, make_entry):
        adjusted = apply_seasonal_adjustments({"mineral_sunscreen": make_entry(0.5)}, Season.SUMMER)
        assert adjusted["mineral_sunscreen"].final == pytest.approx(0.5 * 1.4 * 1.2)

    def test_cumulative_boosts_across_concerns(self, make_entry):
        # salicylic_acid_cleanser: oiliness +25%, pores +20%
        adjusted = apply_seasonal_adjustments({"salicylic_acid_cleanser": make_entry(0.5)}, Season.SUMMER)
        assert adjusted["salicylic_acid_cleanser"].final == pytest.approx(0.5 * 1.25 * 1.2)

    def test_boosts_capped_at_one(self, make_entry):
        adjusted = apply_seasonal_adjustments({"salicylic_acid": make_entry(0.9)}, Season.SUMMER)
        assert adjusted["salicylic_acid"].final == 1.0

    def test_discouraged_penalty(self, make_entry):
        adjusted = apply_seasonal_adjustments({"rich_moisturizer": make_entry(0.5)}, Season.SUMMER)
        assert adjusted["rich_moisturizer"].final == pytest.approx(0.35)

    def test_discouraged_compounds_with_low_scores(self, make_entry):
        adjusted = apply_seasonal_adjustments({"retinol": make_entry(0.1)}, Season.WINTER)
        assert adjusted["retinol"].final == pytest.approx(0.07)

    def test_sub_scores_untouched(self, make_entry):
        entry = make_entry(0.5, concern=0.3)
        adjusted = apply_seasonal_adjustments({"ceramides": entry}, Season.WINTER)
        assert adjusted["ceramides"].concern == 0.3
        assert entry.final == 0.5  # input not mutated

    def test_monsoon_rules(self, make_entry):
        adjusted = apply_seasonal_adjustments(
            {"niacinamide": make_entry(0.5), "gentle_cleanser": make_entry(0.5)},
            Season.MONSOON,
        )
        # niacinamide: acne +20%, sensitivity +15%, recommended x1.2
        assert adjusted["niacinamide"].final == pytest.approx(0.5 * 1.2 * 1.15 * 1.2)
        assert adjusted["gentle_cleanser"].final == pytest.approx(0.6)
