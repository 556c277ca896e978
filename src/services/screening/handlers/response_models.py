from pydantic import BaseModel


class ShowTimeData(BaseModel):
    """上映回データのレスポンスモデル"""

    id: str
    movie_title: str
    hall_name: str
    start_time: str


class ShowTimeListData(BaseModel):
    day: str
    show_times: list[ShowTimeData]
    count: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ShowTimeData | ShowTimeListData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None
