"""Pytest configuration and shared fixtures."""

import json
import logging

import pytest

from grocerylist.config import get_settings
from grocerylist.logging_config import clear_context

# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Start every test from default settings and an empty logging context."""
    for var in ("CSV_ESCAPE_QUOTES", "CHECKLIST_DIVIDER_WIDTH", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers replaced by configure_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


# =============================================================================
# Recipe Selection Fixtures
# =============================================================================


def make_selection(title: str, *ingredients: dict) -> dict:
    """Build a selection the way the meal plan store hands it over."""
    return {"recipeTitle": title, "ingredientsSerialized": json.dumps(list(ingredients))}


@pytest.fixture
def selection():
    """Factory for recipe selections."""
    return make_selection


@pytest.fixture
def curry_and_soup():
    """Two recipes sharing chicken breast with different casing."""
    return [
        make_selection("Curry", {"name": "Chicken breast", "qty": "400", "unit": "g"}),
        make_selection("Soup", {"name": "chicken breast", "qty": "100", "unit": "g"}),
    ]


@pytest.fixture
def weekly_plan():
    """A small week of dinners touching several store sections."""
    return [
        make_selection(
            "Green Curry",
            {"name": "Chicken thigh", "qty": "500", "unit": "g"},
            {"name": "Coconut milk", "qty": "400", "unit": "ml"},
            {"name": "Green curry paste", "qty": "2", "unit": "tbsp"},
            {"name": "Jasmine rice", "qty": "300", "unit": "g"},
            {"name": "Lime", "qty": "1", "unit": "whole", "notes": "juiced"},
        ),
        make_selection(
            "Spaghetti Bolognese",
            {"name": "Beef mince", "qty": "500", "unit": "g"},
            {"name": "Onion", "qty": "1", "unit": "whole"},
            {"name": "Garlic", "qty": "3", "unit": "cloves"},
            {"name": "Pasta", "qty": "400", "unit": "g"},
            {"name": "Parmesan", "qty": "50", "unit": "g", "notes": "grated"},
        ),
        make_selection(
            "Fried Rice",
            {"name": "Jasmine rice", "qty": "200", "unit": "g"},
            {"name": "eggs", "qty": "2", "unit": "whole"},
            {"name": "Frozen peas", "qty": "100", "unit": "g"},
            {"name": "Soy sauce", "qty": "2", "unit": "tbsp"},
            {"name": "onion", "qty": "1", "unit": "whole"},
        ),
    ]
