"""Grouped and text views of an aggregated shopping list."""

from collections.abc import Iterable

from grocerylist.config import get_settings
from grocerylist.normalize.taxonomy import Category
from grocerylist.plan.models import AggregatedLine, format_number

CSV_HEADER = ("Item", "Quantity", "Unit", "Category", "From Recipes")
CHECKLIST_TITLE = "🛒 GROCERY LIST"


def group_by_category(lines: Iterable[AggregatedLine]) -> dict[Category, list[AggregatedLine]]:
    """
    Group lines by store section.

    Every category is present, in section order, even when it has no lines.
    Lines keep their relative order within a section.
    """
    grouped: dict[Category, list[AggregatedLine]] = {category: [] for category in Category}
    for line in lines:
        grouped[Category(line.category)].append(line)
    return grouped


def _csv_cells(line: AggregatedLine) -> list[str]:
    return [
        line.name,
        line.total_quantity,
        line.unit,
        Category(line.category).value,
        "; ".join(c.describe() for c in line.contributions),
    ]


def to_csv(lines: Iterable[AggregatedLine], escape_quotes: bool | None = None) -> str:
    """
    Serialize lines as CSV text.

    The header row is unquoted; every data field is wrapped in double quotes.
    Rows are separated by newlines with no trailing newline.

    Args:
        lines: Aggregated shopping list lines.
        escape_quotes: Double embedded quotes inside fields. None uses the
            csv_escape_quotes setting.
    """
    if escape_quotes is None:
        escape_quotes = get_settings().csv_escape_quotes

    rows = [",".join(CSV_HEADER)]
    for line in lines:
        cells = _csv_cells(line)
        if escape_quotes:
            cells = [cell.replace('"', '""') for cell in cells]
        rows.append(",".join(f'"{cell}"' for cell in cells))

    return "\n".join(rows)


def to_text(lines: Iterable[AggregatedLine], divider_width: int | None = None) -> str:
    """Render a printable checklist with one section per non-empty category."""
    if divider_width is None:
        divider_width = get_settings().checklist_divider_width

    text = f"{CHECKLIST_TITLE}\n\n"

    for category, items in group_by_category(lines).items():
        if not items:
            continue

        text += f"{category.value.upper()}\n"
        text += "─" * divider_width + "\n"

        for line in items:
            entry = f"[ ] {line.name} {format_number(line.quantity)} {line.unit}"
            text += entry.rstrip() + "\n"

        text += "\n"

    return text
