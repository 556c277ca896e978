from typing import assert_never

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.booking.applications.book_seat import (
    BookSeatResult,
    BookSeatService,
    SeatAlreadyBooked,
    SeatNotInHall,
    ShowTimeNotFound,
    Success,
)
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import CustomerId
from services.booking.handlers.request_models import BookSeatRequest
from services.booking.handlers.response_models import (
    BookingData,
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

service = BookSeatService(
    booking_repository=DynamoDBBookingRepository(),
    show_time_repository=DynamoDBShowTimeRepository(),
    factory=BookingFactory(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席予約 Lambda Handler

    POST /showtimes/{show_time_id}/bookings
    """
    path_params = event.path_parameters or {}
    show_time_id = path_params.get("show_time_id", "")

    logger.info("Received book seat request", extra={"show_time_id": show_time_id})

    try:
        request = BookSeatRequest.model_validate_json(event.body or "")
        result = service.book(
            customer_id=CustomerId(value=request.customer_id),
            show_time_id=ShowTimeId(value=show_time_id),
            seat_row=request.seat_row,
            seat_number=request.seat_number,
        )
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
        logger.exception("Failed to book seat")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")

    return _to_response(result)


def _to_response(result: BookSeatResult) -> dict:
    """予約結果を HTTP レスポンスに変換"""
    match result:
        case Success(booking_id=booking_id, seat=seat, movie_title=movie_title):
            body = SuccessResponse(
                data=BookingData(
                    booking_id=booking_id, seat=seat, movie_title=movie_title
                )
            ).model_dump()
            return api_response(201, body)
        case SeatAlreadyBooked(seat=seat):
            return _error_response(
                409, "SEAT_ALREADY_BOOKED", f"Seat {seat} is already booked"
            )
        case ShowTimeNotFound(show_time_id=show_time_id):
            return _error_response(
                404, "SHOW_TIME_NOT_FOUND", f"Show time not found: {show_time_id}"
            )
        case SeatNotInHall(seat=seat, hall_id=hall_id):
            return _error_response(
                422,
                "SEAT_NOT_IN_HALL",
                f"Seat {seat} does not exist in hall {hall_id}",
                [{"seat": seat, "hall_id": hall_id}],
            )
        case _:
            assert_never(result)


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
