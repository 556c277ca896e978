from pydantic import BaseModel, Field, model_validator


class BookSeatRequest(BaseModel):
    """座席予約リクエストモデル

    座席は "B4" のような seat か、seat_row / seat_number のどちらかで指定する。
    列・番号の値の検証は上映回の確認後に Seat が行う。
    """

    customer_id: str = Field(..., min_length=1, description="顧客ID")
    seat: str | None = Field(
        default=None,
        pattern=r"^[A-Za-z]\d{1,2}$",
        description="座席ラベル",
        examples=["B4"],
    )
    seat_row: str | None = Field(default=None, description="列")
    seat_number: int | None = Field(default=None, description="座席番号")

    @model_validator(mode="after")
    def resolve_seat(self) -> "BookSeatRequest":
        if self.seat is not None:
            row, number = self.seat[0], int(self.seat[1:])
            if (self.seat_row, self.seat_number) not in ((None, None), (row, number)):
                raise ValueError("seat conflicts with seat_row/seat_number")
            self.seat_row = row
            self.seat_number = number
        if self.seat_row is None or self.seat_number is None:
            raise ValueError("seat or seat_row/seat_number is required")
        return self
