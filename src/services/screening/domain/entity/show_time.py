from datetime import datetime, timezone, tzinfo

from services.screening.domain.enum import DayOfWeek
from services.screening.domain.value_object import Hall
from services.shared.domain import AggregateRoot, ShowTimeId


class ShowTime(AggregateRoot[ShowTimeId]):
    """上映回エンティティ

    ある映画をあるホールで上映する1回分。
    曜日は映画館のタイムゾーンでの開始日時から決まる。
    """

    def __init__(
        self,
        id: ShowTimeId,
        movie_title: str,
        hall: Hall,
        start_time: datetime,
        day_of_week: DayOfWeek,
    ) -> None:
        super().__init__(id)
        if not movie_title or not movie_title.strip():
            raise ValueError("Movie title cannot be blank")
        self._movie_title = movie_title
        self._hall = hall
        self._start_time = start_time
        self._day_of_week = day_of_week

    @classmethod
    def create(
        cls,
        id: ShowTimeId,
        movie_title: str,
        hall: Hall,
        start_time: datetime,
        tz: tzinfo = timezone.utc,
    ) -> "ShowTime":
        """開始日時から曜日を求めて上映回を生成する"""
        if start_time.tzinfo is None:
            start_time = start_time.replace(tzinfo=timezone.utc)
        return cls(
            id=id,
            movie_title=movie_title,
            hall=hall,
            start_time=start_time,
            day_of_week=DayOfWeek.of(start_time.astimezone(tz)),
        )

    @property
    def movie_title(self) -> str:
        return self._movie_title

    @property
    def hall(self) -> Hall:
        return self._hall

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._day_of_week
