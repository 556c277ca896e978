import os
from zoneinfo import ZoneInfo

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.screening.applications.register_show_time import (
    RegisterShowTimeService,
    ShowTimeDetails,
)
from services.screening.domain.entity import ShowTime
from services.screening.handlers.request_models import RegisterShowTimeRequest
from services.screening.handlers.response_models import (
    ErrorResponse,
    ShowTimeData,
    SuccessResponse,
)
from services.screening.infrastructure.dynamodb_show_time_repository import (
    DynamoDBShowTimeRepository,
)
from services.shared.domain import ShowTimeId
from services.shared.utils import api_response

logger = Logger()

service = RegisterShowTimeService(
    repository=DynamoDBShowTimeRepository(),
    tz=ZoneInfo(os.getenv("CINEMA_TIMEZONE", "UTC")),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """上映回登録 Lambda Handler

    PUT /showtimes/{show_time_id}
    """
    path_params = event.path_parameters or {}

    try:
        show_time_id = ShowTimeId(value=path_params.get("show_time_id", ""))
        request = RegisterShowTimeRequest.model_validate_json(event.body or "")
        show_time = service.register(show_time_id, _to_details(request))
    except ValidationError as e:
        return _error_response(
            400,
            "VALIDATION_ERROR",
            "Invalid request body",
            e.errors(include_url=False, include_context=False),
        )
    except ValueError as e:
        return _error_response(400, "VALIDATION_ERROR", str(e))
    except Exception:
        logger.exception("Failed to register show time")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, _to_body(show_time))


def _to_details(request: RegisterShowTimeRequest) -> ShowTimeDetails:
    """リクエストボディから ShowTimeDetails を構築する"""
    return {
        "movie_title": request.movie_title,
        "start_time": request.start_time,
        "hall_id": request.hall.id,
        "hall_name": request.hall.name,
        "seat_rows": [(r.row, r.count) for r in request.hall.seat_rows],
    }


def _to_body(show_time: ShowTime) -> dict:
    return SuccessResponse(
        data=ShowTimeData(
            id=str(show_time.id),
            movie_title=show_time.movie_title,
            hall_name=show_time.hall.name,
            start_time=show_time.start_time.isoformat(),
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
