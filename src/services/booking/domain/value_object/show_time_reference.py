from dataclasses import dataclass
from datetime import datetime

from services.shared.domain import ShowTimeId


@dataclass(frozen=True)
class ShowTimeReference:
    """上映回の参照（Value Object）

    上映回そのものは screening コンテキストが所有する。
    予約に必要な情報だけを投影したもので、参照のたびに生成される。
    """

    id: ShowTimeId
    movie_title: str
    start_time: datetime
    hall_id: str

    def __post_init__(self) -> None:
        if not self.movie_title or not self.movie_title.strip():
            raise ValueError("Movie title cannot be blank")
        if not self.hall_id or not self.hall_id.strip():
            raise ValueError("Hall id cannot be blank")
