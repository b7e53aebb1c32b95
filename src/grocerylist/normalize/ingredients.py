"""Parsing of serialized recipe ingredient lists."""

import json
import math
import re
from dataclasses import asdict, dataclass
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


_MIXED_FRACTION = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)")
_SIMPLE_FRACTION = re.compile(r"^(\d+)\s*/\s*(\d+)")
_DECIMAL = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Ingredient:
    """A single ingredient of one recipe, as supplied by the recipe store."""

    name: str
    quantity: str
    unit: str = ""
    notes: str | None = None

    @property
    def amount(self) -> float:
        """Numeric value of the quantity string (0.0 when unusable)."""
        return parse_quantity(self.quantity)


class RawIngredient(BaseModel):
    """Validation schema for one entry of a serialized ingredient list."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    qty: str = Field(default="0", validation_alias=AliasChoices("qty", "quantity"))
    unit: str = ""
    notes: str | None = None

    @field_validator("qty", mode="before")
    @classmethod
    def coerce_qty(cls, v: Any) -> Any:
        """Accept numbers from AI-generated or imported recipes as strings."""
        if v is None:
            return "0"
        if isinstance(v, bool):
            raise ValueError("quantity must be a number or a numeric string")
        if isinstance(v, (int, float)):
            return str(v)
        return v

    @field_validator("unit", mode="before")
    @classmethod
    def default_unit(cls, v: Any) -> Any:
        """Treat a missing unit as unitless."""
        if v is None:
            return ""
        return v


_RAW_INGREDIENTS = TypeAdapter(list[RawIngredient])


def parse_quantity(value: Any) -> float:
    """
    Parse the leading number of a quantity.

    Handles formats like:
    - "2", "1.5", "2e2"
    - "400g" (trailing text is ignored)
    - "1/2"
    - "1 1/2" (one and a half)

    Returns 0.0 for anything that is not a finite, non-negative number.
    """
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return 0.0
    elif isinstance(value, str):
        number = _parse_quantity_string(value.strip())
    else:
        return 0.0

    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _parse_quantity_string(quantity_str: str) -> float:
    mixed_match = _MIXED_FRACTION.match(quantity_str)
    if mixed_match:
        whole, num, denom = (int(g) for g in mixed_match.groups())
        return whole + num / denom if denom else 0.0

    frac_match = _SIMPLE_FRACTION.match(quantity_str)
    if frac_match:
        num, denom = (int(g) for g in frac_match.groups())
        return num / denom if denom else 0.0

    num_match = _DECIMAL.match(quantity_str)
    if num_match:
        return float(num_match.group(0))

    return 0.0


def parse_ingredients(serialized: str | bytes | list[Any] | None) -> list[Ingredient]:
    """
    Decode a recipe's serialized ingredient list into Ingredient records.

    Args:
        serialized: JSON text (or an already decoded list) of
            {name, qty, unit, notes?} records.

    Returns:
        The parsed ingredients, or an empty list when the input is not a
        list of ingredient-shaped records. Never raises.
    """
    if isinstance(serialized, (str, bytes, bytearray)):
        try:
            decoded = json.loads(serialized)
        except (ValueError, RecursionError) as e:
            logger.debug(f"Ignoring undecodable ingredient list: {e}")
            return []
    else:
        decoded = serialized

    if not isinstance(decoded, list):
        logger.debug(f"Ignoring ingredient list of type {type(decoded).__name__}")
        return []

    records = [asdict(item) if isinstance(item, Ingredient) else item for item in decoded]

    try:
        raw_ingredients = _RAW_INGREDIENTS.validate_python(records)
    except ValidationError as e:
        logger.debug(f"Ignoring malformed ingredient list ({e.error_count()} errors)")
        return []

    ingredients = []
    for raw in raw_ingredients:
        # Unusable quantities are kept as "0" and dropped during aggregation
        quantity = raw.qty if parse_quantity(raw.qty) > 0 else "0"
        ingredients.append(
            Ingredient(name=raw.name, quantity=quantity, unit=raw.unit, notes=raw.notes)
        )

    return ingredients
