from datetime import datetime, timezone, tzinfo
from typing import TypedDict

from services.screening.domain.entity import ShowTime
from services.screening.domain.repository import ShowTimeRepository
from services.screening.domain.value_object import Hall
from services.shared.domain import ShowTimeId
from services.shared.utils import get_logger

logger = get_logger("screening-service")


class ShowTimeDetails(TypedDict):
    """上映回登録の入力データ構造"""

    movie_title: str
    start_time: datetime
    hall_id: str
    hall_name: str
    seat_rows: list[tuple[str, int]]


class RegisterShowTimeService:
    """上映回登録ユースケース

    プリミティブ型から Hall / ShowTime を組み立てて保存する。
    曜日は映画館のタイムゾーン (tz) で判定する。
    """

    def __init__(
        self, repository: ShowTimeRepository, tz: tzinfo = timezone.utc
    ) -> None:
        self._repository = repository
        self._tz = tz

    def register(self, show_time_id: ShowTimeId, details: ShowTimeDetails) -> ShowTime:
        """上映回を登録する（同じIDは上書き）"""
        hall = Hall(
            id=details["hall_id"],
            name=details["hall_name"],
            seat_rows=tuple(details["seat_rows"]),
        )
        show_time = ShowTime.create(
            id=show_time_id,
            movie_title=details["movie_title"],
            hall=hall,
            start_time=details["start_time"],
            tz=self._tz,
        )
        self._repository.save(show_time)

        logger.info(
            "Show time registered",
            extra={
                "show_time_id": str(show_time_id),
                "day_of_week": show_time.day_of_week.value,
                "capacity": hall.capacity,
            },
        )
        return show_time
