"""Shopping list aggregation and export."""

from grocerylist.plan.export import (
    CSV_HEADER,
    group_by_category,
    to_csv,
    to_text,
)
from grocerylist.plan.models import (
    AggregatedLine,
    Contribution,
    aggregation_key,
)
from grocerylist.plan.shopping_list import (
    ShoppingList,
    aggregate,
    build_shopping_list,
    merge_lines,
    sort_lines,
)

__all__ = [
    "AggregatedLine",
    "CSV_HEADER",
    "Contribution",
    "ShoppingList",
    "aggregate",
    "aggregation_key",
    "build_shopping_list",
    "group_by_category",
    "merge_lines",
    "sort_lines",
    "to_csv",
    "to_text",
]
