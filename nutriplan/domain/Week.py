"""Week domain entity: numbered week holding an ordered list of days."""
from typing import Iterable, Optional

from nutriplan.domain.Day import Day
from nutriplan.utilities.validators import WeekInput


class Week:
    def __init__(self, week_number: int, days: Optional[Iterable[Day]] = None):
        self.week_number = week_number
        self.days = tuple(days) if days else ()

    def __eq__(self, other):
        if not isinstance(other, Week):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.week_number)

    def __repr__(self) -> str:
        return f"Week({self.week_number}, days={[d.day_number for d in self.days]})"

    @staticmethod
    def from_dict(data):
        return Week._from_input(WeekInput.model_validate(data))

    @staticmethod
    def _from_input(model):
        return Week(model.week_number, [Day._from_input(d) for d in model.days])

    def to_dict(self):
        return {"weekNumber": self.week_number, "days": [d.to_dict() for d in self.days]}
