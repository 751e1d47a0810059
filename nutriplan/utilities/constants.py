from typing import Final

# Node kinds, leaves last
KIND_WEEK: Final[str] = "week"
KIND_DAY: Final[str] = "day"
KIND_MEAL: Final[str] = "meal"
KIND_FOOD: Final[str] = "food"

# Drag identifiers look like "food:3:m1:f1"
DRAG_ID_SEPARATOR: Final[str] = ":"
# Expansion keys look like "1-3" (week-day) or "3-m1" (day-meal)
EXPANSION_KEY_SEPARATOR: Final[str] = "-"

# A food not yet resolved against the catalog carries foodItemId == "temp-<id>"
TEMP_ID_PREFIX: Final[str] = "temp-"

DEFAULT_UNIT: Final[str] = "g"
MACRO_FIELDS: Final[tuple] = ("calories", "protein", "carbs", "fats")
EMPTY_MACROS: Final[dict[str, float]] = {"calories": 0, "protein": 0, "carbs": 0, "fats": 0}
