from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.find_available_seats import (
    AvailableSeatsResult,
    FindAvailableSeatsService,
)
from services.booking.handlers.response_models import (
    AvailabilityData,
    ErrorResponse,
    SuccessResponse,
)
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.dynamodb_show_time_repository import (
    DynamoDBShowTimeRepository,
)
from services.shared.domain import ShowTimeId
from services.shared.utils import api_response

logger = Logger()

service = FindAvailableSeatsService(
    show_time_repository=DynamoDBShowTimeRepository(),
    booking_repository=DynamoDBBookingRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """空席取得 Lambda Handler

    GET /showtimes/{show_time_id}/seats
    """
    path_params = event.path_parameters or {}

    try:
        show_time_id = ShowTimeId(value=path_params.get("show_time_id", ""))
    except ValueError as e:
        return _error_response(400, "VALIDATION_ERROR", str(e))

    logger.info("Fetching seat availability", extra={"show_time_id": str(show_time_id)})

    try:
        result = service.find(show_time_id)
    except Exception:
        logger.exception("Failed to fetch seat availability")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")

    return api_response(200, _to_body(show_time_id, result))


def _to_body(show_time_id: ShowTimeId, result: AvailableSeatsResult) -> dict:
    return SuccessResponse(
        data=AvailabilityData(
            show_time_id=str(show_time_id),
            available_seats=[str(seat) for seat in result.available_seats],
            booked_seats=[str(seat) for seat in result.booked_seats],
            total_seats=result.total_seats,
            available_count=result.available_count,
            booked_count=result.booked_count,
        )
    ).model_dump()


def _error_response(status_code: int, error_code: str, message: str) -> dict:
    body = ErrorResponse(error_code=error_code, message=message).model_dump(
        exclude_none=True
    )
    return api_response(status_code, body)
