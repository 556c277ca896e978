from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.screening.applications.list_show_times import (
    ListShowTimesResult,
    ListShowTimesService,
)
from services.screening.domain.enum import DayOfWeek
from services.screening.handlers.request_models import ListShowTimesRequest
from services.screening.handlers.response_models import (
    ErrorResponse,
    ShowTimeData,
    ShowTimeListData,
    SuccessResponse,
)
from services.screening.infrastructure.dynamodb_show_time_repository import (
    DynamoDBShowTimeRepository,
)
from services.shared.utils import api_response

logger = Logger()

service = ListShowTimesService(repository=DynamoDBShowTimeRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """曜日別上映回一覧 Lambda Handler

    GET /showtimes?day=MONDAY
    """
    query = event.query_string_parameters or {}

    try:
        request = ListShowTimesRequest.model_validate(query)
    except ValidationError as e:
        return _error_response(
            400,
            "VALIDATION_ERROR",
            "Invalid query parameters",
            e.errors(include_url=False, include_context=False),
        )

    logger.info("Listing show times", extra={"day": request.day.value})

    try:
        result = service.list_by_day(request.day)
    except Exception:
        logger.exception("Failed to list show times")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, _to_body(request.day, result))


def _to_body(day: DayOfWeek, result: ListShowTimesResult) -> dict:
    return SuccessResponse(
        data=ShowTimeListData(
            day=day.value,
            show_times=[
                ShowTimeData(
                    id=s.id,
                    movie_title=s.movie_title,
                    hall_name=s.hall_name,
                    start_time=s.start_time.isoformat(),
                )
                for s in result.show_times
            ],
            count=result.count,
        )
    ).model_dump()


def _error_response(
    status_code: int, error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(status_code, body)
