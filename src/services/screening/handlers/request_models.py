from pydantic import AwareDatetime, BaseModel, Field, field_validator

from services.screening.domain.enum import DayOfWeek


class ListShowTimesRequest(BaseModel):
    """曜日別上映回一覧のクエリパラメータ"""

    day: DayOfWeek = Field(..., description="曜日", examples=["MONDAY"])

    @field_validator("day", mode="before")
    @classmethod
    def normalize_day(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class SeatRowRequest(BaseModel):
    """ホールの1列分の座席"""

    row: str = Field(..., pattern=r"^[A-Z]$", description="列")
    count: int = Field(..., ge=1, le=50, description="座席数")


class HallRequest(BaseModel):
    """ホールのリクエストモデル"""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    seat_rows: list[SeatRowRequest] = Field(default_factory=list)


class RegisterShowTimeRequest(BaseModel):
    """上映回登録リクエストモデル"""

    movie_title: str = Field(..., min_length=1, max_length=200, description="映画タイトル")
    start_time: AwareDatetime = Field(
        ...,
        description="開始日時（ISO 8601、タイムゾーン付き）",
        examples=["2024-01-08T14:00:00+09:00"],
    )
    hall: HallRequest
