from dataclasses import dataclass
from datetime import datetime

from services.screening.domain.entity import ShowTime
from services.screening.domain.enum import DayOfWeek
from services.screening.domain.repository import ShowTimeRepository


@dataclass(frozen=True)
class ShowTimeSummary:
    """一覧表示用の上映回"""

    id: str
    movie_title: str
    hall_name: str
    start_time: datetime


@dataclass(frozen=True)
class ListShowTimesResult:
    show_times: tuple[ShowTimeSummary, ...]

    @property
    def count(self) -> int:
        return len(self.show_times)

    def is_empty(self) -> bool:
        return not self.show_times


class ListShowTimesService:
    """曜日別の上映回一覧ユースケース"""

    def __init__(self, repository: ShowTimeRepository) -> None:
        self._repository = repository

    def list_by_day(self, day_of_week: DayOfWeek) -> ListShowTimesResult:
        """指定した曜日の上映回を開始日時順に返す"""
        show_times = sorted(
            self._repository.find_by_day_of_week(day_of_week),
            key=lambda s: s.start_time,
        )
        return ListShowTimesResult(
            show_times=tuple(_to_summary(s) for s in show_times)
        )


def _to_summary(show_time: ShowTime) -> ShowTimeSummary:
    return ShowTimeSummary(
        id=str(show_time.id),
        movie_title=show_time.movie_title,
        hall_name=show_time.hall.name,
        start_time=show_time.start_time,
    )
