"""Command-line export of a shopping list from a JSON file of recipe selections.

The input file holds a list of {"recipeTitle": ..., "ingredientsSerialized": ...}
objects, as exported by the meal plan store.

Run with: uv run grocerylist plan.json --format csv
"""

import argparse
import json
import sys
from pathlib import Path

from grocerylist.logging_config import LoggingContext, configure_logging, get_logger
from grocerylist.plan.shopping_list import ShoppingList, build_shopping_list

logger = get_logger(__name__)

FORMATS = ("csv", "text", "json", "sections")
EMPTY_MESSAGE = "No recipes with ingredients yet."


def render(shopping_list: ShoppingList, output_format: str, escape_quotes: bool | None) -> str:
    """Render the shopping list in the requested format."""
    if output_format == "csv":
        return shopping_list.to_csv(escape_quotes=escape_quotes)
    if output_format == "text":
        return shopping_list.to_text()
    if output_format == "json":
        return shopping_list.to_response().model_dump_json(by_alias=True, indent=2)

    out = []
    for category, lines in shopping_list.by_category().items():
        out.append(f"{category.value} ({len(lines)})")
        for line in lines:
            out.append(f"  {line.name}: {line.total_quantity} {line.unit}".rstrip())
    return "\n".join(out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build a grocery list from meal plan recipes")
    parser.add_argument("input", type=Path, help="JSON file with the selected recipes")
    parser.add_argument(
        "--format", "-f", choices=FORMATS, default="csv", help="Output format (default: csv)"
    )
    parser.add_argument("--output", "-o", type=Path, help="Write to this file instead of stdout")
    parser.add_argument(
        "--escape-quotes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Double embedded quotes in CSV fields (default: from settings)",
    )
    parser.add_argument("--plan-id", help="Plan identifier attached to log records")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")

    args = parser.parse_args(argv)
    configure_logging(log_level=args.log_level)

    try:
        selections = json.loads(args.input.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as e:
        print(f"Error: could not read {args.input}: {e}", file=sys.stderr)
        return 1

    if not isinstance(selections, list):
        print(f"Error: {args.input} must contain a JSON list of recipes", file=sys.stderr)
        return 1

    with LoggingContext(plan_id=args.plan_id):
        shopping_list = build_shopping_list(selections)
        logger.info(
            f"Built shopping list: {len(shopping_list.lines)} items "
            f"from {shopping_list.recipe_count} recipes"
        )

    if shopping_list.is_empty:
        print(EMPTY_MESSAGE, file=sys.stderr)

    rendered = render(shopping_list, args.format, args.escape_quotes)

    if args.output:
        args.output.write_text(rendered + "\n", encoding="utf-8")
        print(f"Wrote {len(shopping_list.lines)} items to {args.output}")
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
