"""Grocery categories and the keyword taxonomy used to assign them."""

from enum import Enum
from types import MappingProxyType
from typing import Any


class Category(str, Enum):
    """Store sections, in the order a shopping list is walked."""

    PRODUCE = "Produce"
    MEAT = "Meat"
    DRY_GOODS = "Dry Goods"
    SAUCES = "Sauces"
    DAIRY = "Dairy"
    FROZEN = "Frozen"
    OTHER = "Other"


CATEGORY_ORDER: MappingProxyType[Category, int] = MappingProxyType(
    {category: index for index, category in enumerate(Category)}
)


# =============================================================================
# Keyword Taxonomy
# =============================================================================

# Substring matching is first-match-wins, so declaration order decides which
# category a name containing several keywords falls into.
TAXONOMY: tuple[tuple[str, Category], ...] = (
    # Produce
    ("tomato", Category.PRODUCE),
    ("tomatoes", Category.PRODUCE),
    ("onion", Category.PRODUCE),
    ("onions", Category.PRODUCE),
    ("garlic", Category.PRODUCE),
    ("lettuce", Category.PRODUCE),
    ("spinach", Category.PRODUCE),
    ("basil", Category.PRODUCE),
    ("cilantro", Category.PRODUCE),
    ("parsley", Category.PRODUCE),
    ("carrot", Category.PRODUCE),
    ("carrots", Category.PRODUCE),
    ("bell pepper", Category.PRODUCE),
    ("peppers", Category.PRODUCE),
    ("cucumber", Category.PRODUCE),
    ("cucumbers", Category.PRODUCE),
    ("broccoli", Category.PRODUCE),
    ("cabbage", Category.PRODUCE),
    ("potato", Category.PRODUCE),
    ("potatoes", Category.PRODUCE),
    ("celery", Category.PRODUCE),
    ("ginger", Category.PRODUCE),
    ("turmeric", Category.PRODUCE),
    ("lemongrass", Category.PRODUCE),
    ("lime", Category.PRODUCE),
    ("lemon", Category.PRODUCE),
    ("apple", Category.PRODUCE),
    ("banana", Category.PRODUCE),
    ("orange", Category.PRODUCE),
    # Meat & seafood
    ("chicken", Category.MEAT),
    ("chicken breast", Category.MEAT),
    ("beef", Category.MEAT),
    ("pork", Category.MEAT),
    ("lamb", Category.MEAT),
    ("fish", Category.MEAT),
    ("shrimp", Category.MEAT),
    ("prawns", Category.MEAT),
    ("salmon", Category.MEAT),
    ("tuna", Category.MEAT),
    ("bacon", Category.MEAT),
    ("sausage", Category.MEAT),
    ("turkey", Category.MEAT),
    # Dairy
    ("milk", Category.DAIRY),
    ("butter", Category.DAIRY),
    ("cheese", Category.DAIRY),
    ("yogurt", Category.DAIRY),
    ("cream", Category.DAIRY),
    ("sour cream", Category.DAIRY),
    ("greek yogurt", Category.DAIRY),
    ("mozzarella", Category.DAIRY),
    ("cheddar", Category.DAIRY),
    ("parmesan", Category.DAIRY),
    ("egg", Category.DAIRY),
    ("eggs", Category.DAIRY),
    # Dry goods
    ("rice", Category.DRY_GOODS),
    ("pasta", Category.DRY_GOODS),
    ("flour", Category.DRY_GOODS),
    ("sugar", Category.DRY_GOODS),
    ("salt", Category.DRY_GOODS),
    ("pepper", Category.DRY_GOODS),
    ("black pepper", Category.DRY_GOODS),
    ("cumin", Category.DRY_GOODS),
    ("paprika", Category.DRY_GOODS),
    ("chili powder", Category.DRY_GOODS),
    ("red curry paste", Category.DRY_GOODS),
    ("green curry paste", Category.DRY_GOODS),
    ("curry powder", Category.DRY_GOODS),
    ("peanut butter", Category.DRY_GOODS),
    ("almond flour", Category.DRY_GOODS),
    ("oats", Category.DRY_GOODS),
    ("beans", Category.DRY_GOODS),
    ("lentils", Category.DRY_GOODS),
    ("baking powder", Category.DRY_GOODS),
    ("baking soda", Category.DRY_GOODS),
    ("yeast", Category.DRY_GOODS),
    # Sauces & condiments
    ("fish sauce", Category.SAUCES),
    ("soy sauce", Category.SAUCES),
    ("oyster sauce", Category.SAUCES),
    ("sriracha", Category.SAUCES),
    ("hot sauce", Category.SAUCES),
    ("worcestershire sauce", Category.SAUCES),
    ("olive oil", Category.SAUCES),
    ("oil", Category.SAUCES),
    ("vinegar", Category.SAUCES),
    ("rice vinegar", Category.SAUCES),
    ("balsamic vinegar", Category.SAUCES),
    ("ketchup", Category.SAUCES),
    ("mustard", Category.SAUCES),
    ("honey", Category.SAUCES),
    ("coconut milk", Category.SAUCES),
    # Frozen
    ("frozen vegetables", Category.FROZEN),
    ("frozen peas", Category.FROZEN),
    ("frozen corn", Category.FROZEN),
    ("frozen mixed vegetables", Category.FROZEN),
    ("frozen berries", Category.FROZEN),
)

# Exact-match index; keywords are unique so the first declaration is kept anyway.
_EXACT_MATCHES: MappingProxyType[str, Category] = MappingProxyType(
    {keyword: category for keyword, category in reversed(TAXONOMY)}
)


def categorize(name: Any) -> Category:
    """
    Assign a grocery category to an ingredient name.

    An exact match on the lowercased name wins; otherwise the first taxonomy
    keyword contained in the name decides. Unmatched names fall back to
    Category.OTHER. Never raises.
    """
    if not isinstance(name, str):
        return Category.OTHER

    lower_name = name.lower()

    if lower_name in _EXACT_MATCHES:
        return _EXACT_MATCHES[lower_name]

    for keyword, category in TAXONOMY:
        if keyword in lower_name:
            return category

    return Category.OTHER
