"""Meal domain entity: named group of foods with externally computed total macros."""
from typing import Iterable, Optional

from nutriplan.domain.Food import Food
from nutriplan.domain.Macros import Macros
from nutriplan.utilities.validators import MealInput


class Meal:
    def __init__(self, id: str, name: str = "", total_macros: Optional[Macros] = None,
                 foods: Optional[Iterable[Food]] = None):
        self.id = id
        self.name = name
        self.total_macros = total_macros if total_macros is not None else Macros()
        # Snapshots are read-only: children are kept as tuples
        self.foods = tuple(foods) if foods else ()

    def __eq__(self, other):
        if not isinstance(other, Meal):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    def __str__(self) -> str:
        return f"{self.name} ({len(self.foods)} foods) - {round(self.total_macros.calories)} kcal"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        return Meal._from_input(MealInput.model_validate(data))

    @staticmethod
    def _from_input(model):
        return Meal(
            id=model.id,
            name=model.name,
            total_macros=Macros._from_input(model.total_macros),
            foods=[Food._from_input(f) for f in model.foods],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "totalMacros": self.total_macros.to_dict(),
            "foods": [f.to_dict() for f in self.foods],
        }
