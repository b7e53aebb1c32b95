"""Pydantic schemas for the engine's input records and JSON output."""

from typing import TYPE_CHECKING, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from grocerylist.normalize.taxonomy import Category

if TYPE_CHECKING:
    from grocerylist.plan.shopping_list import ShoppingList


# =============================================================================
# Input records
# =============================================================================


class RecipeSelection(BaseModel):
    """A recipe picked into the meal plan, as handed over by the plan store."""

    model_config = ConfigDict(populate_by_name=True)

    recipe_title: str = Field(
        validation_alias=AliasChoices("recipe_title", "recipeTitle", "title"),
    )
    ingredients: Any = Field(
        default="[]",
        validation_alias=AliasChoices(
            "ingredients",
            "ingredients_serialized",
            "ingredientsSerialized",
            "ingredientsJson",
        ),
        description="Serialized JSON ingredient list, or an already decoded list",
    )


# =============================================================================
# Output view
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContributionResponse(_CamelModel):
    """One recipe's share of a shopping list line."""

    recipe: str
    qty: float
    unit: str
    notes: str | None = None


class GroceryLineResponse(_CamelModel):
    """A consolidated shopping list line."""

    name: str
    qty: float
    unit: str
    total_qty: str
    category: Category
    items: list[ContributionResponse] = Field(default_factory=list)


class GroceryListResponse(_CamelModel):
    """Flat shopping list payload for direct UI binding."""

    ingredients: list[GroceryLineResponse] = Field(default_factory=list)
    total_meals: int = 0

    @classmethod
    def from_shopping_list(cls, shopping_list: "ShoppingList") -> "GroceryListResponse":
        """Build the payload from an aggregated shopping list."""
        return cls(
            ingredients=[
                GroceryLineResponse(
                    name=line.name,
                    qty=line.quantity,
                    unit=line.unit,
                    total_qty=line.total_quantity,
                    category=line.category,
                    items=[
                        ContributionResponse(
                            recipe=c.recipe_title,
                            qty=c.quantity,
                            unit=c.unit,
                            notes=c.notes,
                        )
                        for c in line.contributions
                    ],
                )
                for line in shopping_list.lines
            ],
            total_meals=shopping_list.recipe_count,
        )
