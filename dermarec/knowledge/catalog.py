"""
Ingredient catalog — the static knowledge base every score is computed from.

Declaration order matters: it is the tie-break order when two ingredients end
up with the same final score.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from dermarec.schemas import Category, ExperienceLevel, Strength

# Wildcard entry in Ingredient.suitable_for
ALL_SKIN_TYPES = "all"


@dataclass(frozen=True)
class Ingredient:
    id: str
    category: Category
    suitable_for: frozenset[str]
    addresses: tuple[str, ...]
    strength: Strength
    price_range: tuple[int, int]
    experience: Optional[ExperienceLevel] = None
    conflicts: tuple[str, ...] = ()
    essential: bool = False

    @property
    def name(self) -> str:
        return self.id.replace("_", " ").title()

    @property
    def suits_all(self) -> bool:
        return ALL_SKIN_TYPES in self.suitable_for


def _ingredient(id, category, suitable_for, addresses, strength, price_range, **extra) -> Ingredient:
    return Ingredient(
        id=id,
        category=category,
        suitable_for=frozenset(suitable_for),
        addresses=tuple(addresses),
        strength=strength,
        price_range=tuple(price_range),
        conflicts=tuple(extra.pop("conflicts", ())),
        **extra,
    )


_G, _M, _S = Strength.GENTLE, Strength.MODERATE, Strength.STRONG
_INTERMEDIATE = ExperienceLevel.INTERMEDIATE

_INGREDIENTS = [
    # Cleansers
    _ingredient("gentle_cleanser", Category.CLEANSER, ["all"], ["basic_cleansing"], _G, [300, 1200]),
    _ingredient(
        "salicylic_acid_cleanser", Category.CLEANSER, ["oily", "combination"],
        ["acne", "oiliness", "pores"], _M, [500, 2000],
        conflicts=["retinoids", "benzoyl_peroxide"],
    ),
    # Actives
    _ingredient(
        "retinol", Category.ACTIVE, ["normal", "oily", "combination"],
        ["aging", "acne", "texture"], _S, [800, 3000],
        conflicts=["benzoyl_peroxide", "vitamin_c", "aha_bha"], experience=_INTERMEDIATE,
    ),
    _ingredient(
        "niacinamide", Category.ACTIVE, ["all"],
        ["oiliness", "pores", "sensitivity", "acne"], _G, [400, 1500],
        conflicts=["vitamin_c_high_concentration"],
    ),
    _ingredient(
        "vitamin_c", Category.ACTIVE, ["normal", "dry", "oily"],
        ["hyperpigmentation", "aging", "sun_damage"], _M, [600, 2500],
        conflicts=["retinoids", "niacinamide_high_concentration"], experience=_INTERMEDIATE,
    ),
    _ingredient(
        "salicylic_acid", Category.ACTIVE, ["oily", "combination"],
        ["acne", "oiliness", "pores", "texture"], _M, [500, 2000],
        conflicts=["retinoids", "benzoyl_peroxide"],
    ),
    _ingredient("hyaluronic_acid", Category.HYDRATING, ["all"], ["dryness", "aging"], _G, [400, 1800]),
    _ingredient(
        "azelaic_acid", Category.ACTIVE, ["sensitive", "combination"],
        ["acne", "sensitivity", "hyperpigmentation"], _G, [800, 2500], experience=_INTERMEDIATE,
    ),
    _ingredient("ceramides", Category.BARRIER, ["all"], ["dryness", "sensitivity"], _G, [600, 2800]),
    _ingredient(
        "peptides", Category.ANTI_AGING, ["all"], ["aging", "firmness"], _G, [800, 3500],
        experience=_INTERMEDIATE,
    ),
    _ingredient(
        "centella_asiatica", Category.SOOTHING, ["all"],
        ["sensitivity", "inflammation", "healing"], _G, [400, 1800],
    ),
    _ingredient("bakuchiol", Category.ANTI_AGING, ["all"], ["aging", "firmness"], _G, [1000, 4000]),
    # Moisturizers
    _ingredient(
        "lightweight_moisturizer", Category.MOISTURIZER, ["oily", "combination", "normal"],
        ["basic_hydration"], _G, [300, 1500],
    ),
    _ingredient(
        "rich_moisturizer", Category.MOISTURIZER, ["dry", "sensitive"],
        ["dryness", "sensitivity"], _G, [500, 2500],
    ),
    # Sunscreens
    _ingredient(
        "mineral_sunscreen", Category.SUNSCREEN, ["sensitive", "all"], ["sun_damage"], _G, [400, 2000],
        essential=True,
    ),
    _ingredient(
        "chemical_sunscreen", Category.SUNSCREEN, ["normal", "oily", "combination"],
        ["sun_damage"], _M, [300, 1800],
    ),
]

CATALOG: Mapping[str, Ingredient] = MappingProxyType({i.id: i for i in _INGREDIENTS})

# Ingredient families that conflict lists and seasonal rules may name even
# though the catalog does not stock them.
EXTERNAL_INGREDIENTS = frozenset({
    "retinoids",
    "benzoyl_peroxide",
    "aha_bha",
    "vitamin_c_high_concentration",
    "niacinamide_high_concentration",
    "heavy_oils",
    "heavy_moisturizers",
})
