"""
Input validation schemas using Pydantic for plan snapshots handed in by the plan owner.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from nutriplan.utilities.constants import DEFAULT_UNIT


class _Input(BaseModel):
    # Plan owners send camelCase (weekNumber, foodItemId); snake_case is accepted too
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class MacrosInput(_Input):
    """Schema for externally computed macros."""
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fats: float = Field(0, ge=0)


class FoodItemInput(_Input):
    """Schema for a catalog entry picked by the user."""
    id: str = Field(..., min_length=1)
    name: str = ''
    unit: Optional[str] = None
    macros: Optional[MacrosInput] = None


class FoodInput(_Input):
    """Schema for a food inside a meal."""
    id: str = Field(..., min_length=1)
    food_item_id: Optional[str] = Field(None, alias='foodItemId')
    name: str = ''
    quantity: float = Field(0, ge=0)
    unit: str = DEFAULT_UNIT
    macros: Optional[MacrosInput] = None

    @field_validator('unit')
    @classmethod
    def default_unit(cls, v):
        """Blank units fall back to grams."""
        return v.strip() if v and v.strip() else DEFAULT_UNIT


class MealInput(_Input):
    """Schema for a meal inside a day."""
    id: str = Field(..., min_length=1)
    name: str = ''
    total_macros: MacrosInput = Field(default_factory=MacrosInput, alias='totalMacros')
    foods: List[FoodInput] = Field(default_factory=list)

    @field_validator('foods')
    @classmethod
    def unique_food_ids(cls, v):
        """Food ids must be unique within a meal."""
        _ensure_unique([f.id for f in v], 'food id')
        return v


class DayInput(_Input):
    """Schema for a day inside a week."""
    day_number: int = Field(..., ge=1, alias='dayNumber')
    meals: List[MealInput] = Field(default_factory=list)

    @field_validator('meals')
    @classmethod
    def unique_meal_ids(cls, v):
        """Meal ids must be unique within a day."""
        _ensure_unique([m.id for m in v], 'meal id')
        return v


class WeekInput(_Input):
    """Schema for a week inside a plan."""
    week_number: int = Field(..., ge=1, alias='weekNumber')
    days: List[DayInput] = Field(default_factory=list)

    @field_validator('days')
    @classmethod
    def unique_day_numbers(cls, v):
        """Day numbers must be unique within a week."""
        _ensure_unique([d.day_number for d in v], 'day number')
        return v


class PlanInput(_Input):
    """Schema for a full plan snapshot."""
    weeks: List[WeekInput] = Field(default_factory=list)

    @field_validator('weeks')
    @classmethod
    def unique_week_numbers(cls, v):
        """Week numbers must be unique within a plan."""
        _ensure_unique([w.week_number for w in v], 'week number')
        return v

    @field_validator('weeks')
    @classmethod
    def plan_wide_day_numbers(cls, v):
        """Day numbers run across the whole plan; meal and food ids carry no week number."""
        _ensure_unique([d.day_number for w in v for d in w.days], 'day number across weeks')
        return v


def _ensure_unique(values, label: str):
    seen = set()
    for value in values:
        if value in seen:
            raise ValueError(f'Duplicate {label}: {value}')
        seen.add(value)
