# recipe_nutrition/domain/nutrition_tables.py
"""
Per-100g nutrition reference data (USDA-based where available).

Lookup is first-match by declaration order, so a compound key ("olive oil",
"sweet potato", "cream cheese") must be declared before any simpler key it
contains ("oil", "potato", "cream", "cheese").
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from recipe_nutrition.domain.entities import NutritionFact

#        key                  kcal   protein fat   sugar  fiber
_ROWS: Tuple[Tuple[str, float, float, float, float, float], ...] = (
    # Proteins
    ("chicken",            165,  27,   3.6,  0,    0),
    ("beef",               250,  26,   15,   0,    0),
    ("pork",               242,  25,   21,   0,    0),
    ("bacon",              417,  37,   42,   1.4,  0),
    ("egg",                155,  13,   11,   0.4,  0),
    ("pilchards",          208,  24,   10,   0,    0),
    ("salmon",             206,  20,   13,   0,    0),
    ("tuna",               132,  23,   1,    0,    0),
    ("shrimp",             99,   24,   0.3,  0,    0),
    ("prawn",              99,   24,   0.3,  0,    0),
    ("cod",                82,   18,   0.7,  0,    0),
    ("turkey",             135,  29,   1,    0,    0),
    ("lamb",               294,  25,   21,   0,    0),
    ("duck",               337,  19,   28,   0,    0),
    ("sausage",            301,  13,   28,   1,    0),
    ("ham",                145,  22,   3.5,  1.5,  0),

    # Carbs & grains
    ("rice",               130,  2.7,  0.3,  0.1,  1.3),
    ("pasta",              158,  5.8,  0.9,  1.1,  2.7),
    ("spaghetti",          158,  5.8,  0.9,  1.1,  2.7),
    ("noodles",            138,  4.7,  0.5,  0.4,  1.8),
    ("bread",              265,  9,    3.2,  5,    2.7),
    ("breadcrumbs",        395,  13,   5,    5,    4),
    ("flour",              364,  10,   1,    1,    3.4),
    ("oats",               389,  17,   7,    1,    11),
    ("quinoa",             120,  4.4,  1.9,  0.9,  2.8),
    ("couscous",           112,  3.8,  0.2,  0.1,  1.4),
    ("sweet potato",       86,   1.6,  0.1,  4.2,  3),
    ("potato starch",      330,  0.3,  0.1,  0.3,  0.5),
    ("potato",             77,   2,    0.1,  0.8,  2.2),

    # Condiments & spices
    ("soy sauce",          53,   10,   0.1,  1.6,  0.8),
    ("fish sauce",         35,   5,    0,    1,    0),
    ("ketchup",            112,  1.7,  0.3,  22,   0.3),
    ("mustard",            66,   4.4,  4,    3.3,  3.2),
    ("mayonnaise",         680,  1.4,  75,   0.6,  0),
    ("balsamic vinegar",   88,   0.5,  0,    17,   0),
    ("vinegar",            21,   0,    0,    0.4,  0),
    ("salt",               0,    0,    0,    0,    0),
    ("curry powder",       325,  14,   14,   2,    33),
    ("garam masala",       340,  14,   14,   2,    33),
    ("paprika",            282,  14,   13,   10,   35),
    ("turmeric",           354,  8,    10,   3.2,  23),
    ("cumin",              375,  18,   22,   2.3,  10.5),
    ("chilli",             318,  2,    0.4,  5,    1.5),
    ("chili powder",       318,  2,    0.4,  5,    1.5),
    ("cinnamon",           247,  4,    1.2,  2.2,  53),
    ("black pepper",       251,  10,   3.3,  0.6,  25),
    ("basil",              23,   3.2,  0.6,  0.3,  1.6),
    ("oregano",            265,  9,    4.3,  4,    43),
    ("thyme",              101,  5.6,  1.7,  0,    14),
    ("rosemary",           131,  3.3,  6,    0,    14),
    ("parsley",            36,   3,    0.8,  0.9,  3.3),
    ("cilantro",           23,   2.1,  0.5,  0.9,  2.8),
    ("coriander",          23,   2.1,  0.5,  0.9,  2.8),
    ("mint",               44,   3.8,  0.9,  0,    8),

    # Vegetables
    ("onion",              40,   1.1,  0.1,  4.2,  1.7),
    ("tomato puree",       82,   5,    1,    12,   18),
    ("passata",            18,   1.6,  0.2,  4,    1.3),
    ("tomato",             18,   0.9,  0.2,  2.6,  1.2),
    ("carrot",             41,   0.9,  0.2,  4.7,  2.8),
    ("mushroom",           22,   3.1,  0.3,  2,    1),
    ("broccoli",           34,   2.8,  0.4,  1.7,  2.6),
    ("spinach",            23,   2.9,  0.4,  0.4,  2.2),
    ("peas",               81,   5.4,  0.4,  5.7,  5.7),
    ("bell pepper",        20,   1,    0.3,  4.2,  2.1),
    ("pepper",             20,   1,    0.3,  4.2,  2.1),
    ("cucumber",           15,   0.7,  0.1,  1.7,  0.5),
    ("lettuce",            15,   1.4,  0.2,  0.8,  1.3),
    ("celery",             16,   0.7,  0.2,  1.3,  1.6),
    ("zucchini",           17,   1.2,  0.3,  2.5,  1),
    ("eggplant",           25,   1,    0.2,  3.5,  3),
    ("cabbage",            25,   1.3,  0.1,  3.2,  2.5),
    ("cauliflower",        25,   1.9,  0.3,  1.9,  2),
    ("asparagus",          20,   2.2,  0.1,  1.9,  2.1),
    ("kale",               49,   4.3,  0.9,  2.3,  3.6),
    ("green beans",        31,   1.8,  0.2,  3.3,  2.7),
    ("corn",               86,   3.4,  1.5,  6.3,  2),

    # Fruits
    ("apple",              52,   0.3,  0.2,  10.4, 2.4),
    ("banana",             89,   1.1,  0.3,  12.2, 2.6),
    ("orange",             47,   0.9,  0.1,  9.4,  2.4),
    ("lemon",              29,   1.1,  0.3,  2.5,  2.8),
    ("lime",               30,   0.7,  0.2,  1.7,  2.8),
    ("strawberry",         32,   0.7,  0.3,  4.9,  2),
    ("blueberry",          57,   0.7,  0.3,  10,   2.4),
    ("avocado",            160,  2,    15,   0.7,  6.7),
    ("mango",              60,   0.8,  0.4,  13.7, 1.6),
    ("pineapple",          50,   0.5,  0.1,  9.9,  1.4),

    # Spreads
    ("peanut butter",      588,  25,   50,   9,    6),

    # Dairy & plant milks
    ("coconut milk",       230,  2.3,  24,   3.3,  2.2),
    ("soy milk",           54,   3.3,  1.8,  1,    0.6),
    ("almond milk",        17,   0.4,  1.1,  0,    0.2),
    ("milk",               61,   3.4,  3.3,  5,    0),
    ("heavy cream",        340,  2,    35,   3.2,  0),
    ("sour cream",         193,  2.4,  19,   2.7,  0),
    ("cream cheese",       342,  6,    34,   4,    0),
    ("cheddar cheese",     403,  25,   33,   1.3,  0),
    ("creme fraiche",      300,  2.5,  30,   3.6,  0),
    ("cream",              340,  2,    35,   3.2,  0),
    ("butter",             717,  0.9,  81,   0.1,  0),
    ("cheese",             402,  25,   33,   3,    0),
    ("mozzarella",         280,  22,   22,   2.2,  0),
    ("parmesan",           431,  35,   25,   0.9,  0),
    ("greek yogurt",       97,   9,    5,    3.6,  0),
    ("yogurt",             59,   10,   0.4,  3.6,  0),

    # Oils & fats
    ("olive oil",          884,  0,    100,  0,    0),
    ("vegetable oil",      884,  0,    100,  0,    0),
    ("coconut oil",        862,  0,    99,   0,    0),
    ("sesame oil",         884,  0,    100,  0,    0),
    ("oil",                884,  0,    100,  0,    0),
    ("olive",              115,  0.8,  10.7, 0,    3.2),

    # Nuts & seeds
    ("almond",             579,  21,   50,   4,    12),
    ("walnut",             654,  15,   65,   2.6,  6.7),
    ("peanut",             567,  26,   49,   4,    8.5),
    ("cashew",             553,  18,   44,   6,    3.3),
    ("sesame seeds",       573,  18,   50,   0.3,  12),
    ("sunflower seeds",    584,  21,   51,   2.6,  9),
    ("chia seeds",         486,  17,   31,   0,    34),

    # Sweeteners
    ("brown sugar",        380,  0,    0,    97,   0),
    ("sugar",              387,  0,    0,    100,  0),
    ("honey",              304,  0.3,  0,    82,   0.2),
    ("maple syrup",        260,  0,    0.1,  67,   0),

    # Aromatics, legumes & others
    ("garlic",             149,  6.4,  0.5,  1,    2.1),
    ("ginger",             80,   1.8,  0.8,  1.7,  2),
    ("stock",              5,    0.5,  0.2,  0.2,  0),
    ("red wine",           85,   0.1,  0,    0.6,  0),
    ("white wine",         82,   0.1,  0,    1.4,  0),
    ("wine",               85,   0.1,  0,    0.6,  0),
    ("beer",               43,   0.5,  0,    0,    0),
    ("tofu",               76,   8,    4.8,  0.6,  0.3),
    ("black beans",        132,  9,    0.5,  0.3,  7.5),
    ("kidney beans",       127,  9,    0.5,  1.2,  6.4),
    ("beans",              127,  9,    0.5,  1.2,  6.4),
    ("chickpeas",          164,  9,    2.6,  2.9,  7.6),
    ("lentils",            116,  9,    0.4,  1.8,  7.9),
)

NUTRITION_100G: Mapping[str, NutritionFact] = MappingProxyType(
    {key: NutritionFact(kcal, protein, fat, sugar, fiber) for key, kcal, protein, fat, sugar, fiber in _ROWS}
)

OIL_KEYS = frozenset(k for k in NUTRITION_100G if k == "oil" or k.endswith(" oil"))

# Typical weight of one whole item, used when a line only gives a count.
PIECE_WEIGHTS_G: Dict[str, float] = {
    "banana": 120.0,
    "apple": 180.0,
    "orange": 180.0,
    "lemon": 85.0,
    "lime": 65.0,
    "avocado": 200.0,
    "potato": 150.0,
    "tomato": 123.0,
    "zucchini": 200.0,
    "cucumber": 300.0,
    "mushroom": 18.0,
    "corn": 200.0,
    "bell pepper": 150.0,
    "sausage": 100.0,
    "bread": 30.0,  # slice
}
