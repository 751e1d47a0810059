"""Day domain entity: numbered day holding an ordered list of meals."""
from typing import Iterable, Optional

from nutriplan.domain.Meal import Meal
from nutriplan.utilities.validators import DayInput


class Day:
    def __init__(self, day_number: int, meals: Optional[Iterable[Meal]] = None):
        self.day_number = day_number
        self.meals = tuple(meals) if meals else ()

    def __eq__(self, other):
        if not isinstance(other, Day):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.day_number)

    def __repr__(self) -> str:
        return f"Day({self.day_number}, meals={[m.id for m in self.meals]})"

    @staticmethod
    def from_dict(data):
        return Day._from_input(DayInput.model_validate(data))

    @staticmethod
    def _from_input(model):
        return Day(model.day_number, [Meal._from_input(m) for m in model.meals])

    def to_dict(self):
        return {"dayNumber": self.day_number, "meals": [m.to_dict() for m in self.meals]}
