"""Shopping list aggregation across the recipes of a meal plan."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from grocerylist.logging_config import get_logger
from grocerylist.normalize.ingredients import parse_ingredients
from grocerylist.normalize.taxonomy import CATEGORY_ORDER, Category, categorize
from grocerylist.plan.export import group_by_category, to_csv, to_text
from grocerylist.plan.models import AggregatedLine, Contribution, aggregation_key
from grocerylist.schemas import GroceryListResponse, RecipeSelection

logger = get_logger(__name__)

SelectionInput = RecipeSelection | Mapping[str, Any] | tuple[str, Any]


@dataclass
class ShoppingList:
    """Aggregated shopping list for a meal plan, with its presentation views."""

    lines: list[AggregatedLine] = field(default_factory=list)
    recipe_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def by_category(self) -> dict[Category, list[AggregatedLine]]:
        """Lines grouped into all seven store sections."""
        return group_by_category(self.lines)

    def to_csv(self, escape_quotes: bool | None = None) -> str:
        return to_csv(self.lines, escape_quotes=escape_quotes)

    def to_text(self, divider_width: int | None = None) -> str:
        return to_text(self.lines, divider_width=divider_width)

    def to_response(self) -> GroceryListResponse:
        return GroceryListResponse.from_shopping_list(self)


def sort_lines(lines: Iterable[AggregatedLine]) -> list[AggregatedLine]:
    """Order lines by store section, then by display name."""
    return sorted(lines, key=lambda line: (CATEGORY_ORDER[Category(line.category)], line.name))


def _iter_selections(selections: Iterable[SelectionInput] | None) -> Iterator[RecipeSelection]:
    """Yield valid selections, skipping ones that do not validate."""
    for selection in selections or ():
        if isinstance(selection, RecipeSelection):
            yield selection
            continue

        try:
            if isinstance(selection, Mapping):
                yield RecipeSelection.model_validate(selection)
            elif isinstance(selection, tuple) and len(selection) == 2:
                title, ingredients = selection
                yield RecipeSelection(recipe_title=title, ingredients=ingredients)
            else:
                logger.debug(f"Skipping selection of type {type(selection).__name__}")
        except ValidationError as e:
            logger.debug(f"Skipping malformed selection ({e.error_count()} errors)")


def _aggregate(selections: Iterable[SelectionInput] | None) -> tuple[list[AggregatedLine], int]:
    lines: dict[str, AggregatedLine] = {}
    recipe_count = 0
    ingredient_count = 0
    skipped_count = 0

    for selection in _iter_selections(selections):
        recipe_count += 1

        for ingredient in parse_ingredients(selection.ingredients):
            ingredient_count += 1

            quantity = ingredient.amount
            if quantity <= 0:
                skipped_count += 1
                logger.debug(
                    f"Skipping {ingredient.name!r} from {selection.recipe_title!r}: "
                    f"unusable quantity {ingredient.quantity!r}"
                )
                continue

            contribution = Contribution(
                recipe_title=selection.recipe_title,
                quantity=quantity,
                unit=ingredient.unit,
                notes=ingredient.notes,
            )

            key = aggregation_key(ingredient.name, ingredient.unit)
            if key in lines:
                lines[key].add(contribution)
            else:
                lines[key] = AggregatedLine(
                    name=ingredient.name,
                    unit=ingredient.unit,
                    quantity=quantity,
                    category=categorize(ingredient.name),
                    contributions=[contribution],
                )

    logger.debug(
        f"Aggregated {ingredient_count} ingredients from {recipe_count} recipes "
        f"into {len(lines)} lines ({skipped_count} skipped)"
    )

    return sort_lines(lines.values()), recipe_count


def aggregate(selections: Iterable[SelectionInput] | None) -> list[AggregatedLine]:
    """
    Merge the ingredients of the selected recipes into shopping list lines.

    Ingredients merge when their lowercased names and literal units match.
    Quantities that are not positive numbers are skipped. The first-seen
    spelling of a name is displayed and decides the line's category.

    Args:
        selections: RecipeSelection objects, mappings with recipeTitle and
            ingredientsSerialized keys, or (title, ingredients) tuples.

    Returns:
        Lines sorted by category, then by name. Empty input gives an empty list.
    """
    lines, _ = _aggregate(selections)
    return lines


def merge_lines(*batches: Iterable[AggregatedLine]) -> list[AggregatedLine]:
    """
    Merge separately aggregated batches into one sorted list.

    Contributions are folded one by one in batch order, so the result equals
    aggregating all selections in a single call. Inputs are not modified.
    """
    merged: dict[str, AggregatedLine] = {}

    for batch in batches:
        for line in batch:
            existing = merged.get(line.key)
            if existing is None:
                merged[line.key] = AggregatedLine(
                    name=line.name,
                    unit=line.unit,
                    quantity=line.quantity,
                    category=line.category,
                    contributions=list(line.contributions),
                )
            else:
                for contribution in line.contributions:
                    existing.add(contribution)

    return sort_lines(merged.values())


def build_shopping_list(selections: Iterable[SelectionInput] | None) -> ShoppingList:
    """Aggregate the selections and wrap the result with its views."""
    lines, recipe_count = _aggregate(selections)
    return ShoppingList(lines=lines, recipe_count=recipe_count)
