"""Data types for consolidated shopping list lines."""

import math
from dataclasses import dataclass, field

from grocerylist.normalize.taxonomy import Category


def aggregation_key(name: str, unit: str) -> str:
    """Key under which ingredients merge: lowercased name plus the literal unit."""
    return f"{name.lower()}__{unit}"


def format_number(value: float) -> str:
    """Format a quantity without a trailing '.0' for whole numbers."""
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Contribution:
    """One recipe's share of a shopping list line."""

    recipe_title: str
    quantity: float
    unit: str
    notes: str | None = None

    def describe(self) -> str:
        """Render as 'Recipe (qty unit)'."""
        return f"{self.recipe_title} ({format_number(self.quantity)} {self.unit})"


@dataclass
class AggregatedLine:
    """An ingredient summed across every recipe that uses it with the same unit."""

    name: str
    unit: str
    quantity: float
    category: Category
    contributions: list[Contribution] = field(default_factory=list)

    @property
    def key(self) -> str:
        """Aggregation key of this line."""
        return aggregation_key(self.name, self.unit)

    @property
    def total_quantity(self) -> str:
        """Quantity formatted with two decimals."""
        return f"{self.quantity:.2f}"

    def add(self, contribution: Contribution) -> None:
        """Fold another recipe's contribution into this line."""
        self.quantity += contribution.quantity
        self.contributions.append(contribution)
