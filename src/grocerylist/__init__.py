"""Consolidated, store-section-grouped shopping lists from meal plan recipes."""

from grocerylist.normalize import Category, Ingredient, categorize, parse_ingredients
from grocerylist.plan import (
    AggregatedLine,
    Contribution,
    ShoppingList,
    aggregate,
    build_shopping_list,
    group_by_category,
    merge_lines,
    to_csv,
    to_text,
)
from grocerylist.schemas import RecipeSelection

__version__ = "0.1.0"

__all__ = [
    "AggregatedLine",
    "Category",
    "Contribution",
    "Ingredient",
    "RecipeSelection",
    "ShoppingList",
    "aggregate",
    "build_shopping_list",
    "categorize",
    "group_by_category",
    "merge_lines",
    "parse_ingredients",
    "to_csv",
    "to_text",
]
