"""Plan domain entity: the full week -> day -> meal -> food snapshot being edited."""
from typing import Iterable, Iterator, Optional, Tuple

from nutriplan.domain.Day import Day
from nutriplan.domain.Food import Food
from nutriplan.domain.Meal import Meal
from nutriplan.domain.Week import Week
from nutriplan.utilities.validators import PlanInput


class Plan:
    def __init__(self, weeks: Optional[Iterable[Week]] = None):
        self.weeks = tuple(weeks) if weeks else ()

    def __eq__(self, other):
        if not isinstance(other, Plan):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(tuple(w.week_number for w in self.weeks))

    def __repr__(self) -> str:
        return f"Plan(weeks={[w.week_number for w in self.weeks]})"

    def iter_days(self) -> Iterator[Tuple[Week, Day]]:
        for week in self.weeks:
            for day in week.days:
                yield week, day

    def iter_meals(self) -> Iterator[Tuple[Week, Day, Meal]]:
        for week, day in self.iter_days():
            for meal in day.meals:
                yield week, day, meal

    def iter_foods(self) -> Iterator[Tuple[Week, Day, Meal, Food]]:
        for week, day, meal in self.iter_meals():
            for food in meal.foods:
                yield week, day, meal, food

    @staticmethod
    def from_dict(data):
        '''Validates a plan snapshot (list of weeks or {"weeks": [...]}) and builds the tree.'''
        if isinstance(data, list):
            data = {"weeks": data}
        model = PlanInput.model_validate(data or {})
        return Plan([Week._from_input(w) for w in model.weeks])

    def to_dict(self):
        return {"weeks": [w.to_dict() for w in self.weeks]}
