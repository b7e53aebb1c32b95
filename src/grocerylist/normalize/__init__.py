"""Parse recipe ingredient lists and classify ingredients into store sections."""

from grocerylist.normalize.ingredients import (
    Ingredient,
    RawIngredient,
    parse_ingredients,
    parse_quantity,
)
from grocerylist.normalize.taxonomy import (
    CATEGORY_ORDER,
    TAXONOMY,
    Category,
    categorize,
)

__all__ = [
    "CATEGORY_ORDER",
    "Category",
    "Ingredient",
    "RawIngredient",
    "TAXONOMY",
    "categorize",
    "parse_ingredients",
    "parse_quantity",
]
