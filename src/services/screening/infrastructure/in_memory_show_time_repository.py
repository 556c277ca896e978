from services.screening.domain.entity import ShowTime
from services.screening.domain.enum import DayOfWeek
from services.screening.domain.repository import ShowTimeRepository
from services.shared.domain import ShowTimeId


class InMemoryShowTimeRepository(ShowTimeRepository):
    """プロセス内のメモリに上映回を保持する ShowTimeRepository"""

    def __init__(self) -> None:
        self._show_times: dict[ShowTimeId, ShowTime] = {}

    def save(self, show_time: ShowTime) -> ShowTime:
        self._show_times[show_time.id] = show_time
        return show_time

    def find_by_id(self, show_time_id: ShowTimeId) -> ShowTime | None:
        return self._show_times.get(show_time_id)

    def find_by_day_of_week(self, day_of_week: DayOfWeek) -> list[ShowTime]:
        return sorted(
            (s for s in self._show_times.values() if s.day_of_week == day_of_week),
            key=lambda s: s.start_time,
        )
