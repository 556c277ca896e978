from pydantic import BaseModel


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    seat: str
    movie_title: str


class AvailabilityData(BaseModel):
    """空席データのレスポンスモデル"""

    show_time_id: str
    available_seats: list[str]
    booked_seats: list[str]
    total_seats: int
    available_count: int
    booked_count: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData | AvailabilityData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None
