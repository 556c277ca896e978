from .book_seat import (
    BookSeatResult,
    BookSeatService,
    SeatAlreadyBooked,
    SeatNotInHall,
    ShowTimeNotFound,
    Success,
)
from .find_available_seats import AvailableSeatsResult, FindAvailableSeatsService

__all__ = [
    "BookSeatService",
    "BookSeatResult",
    "Success",
    "SeatAlreadyBooked",
    "ShowTimeNotFound",
    "SeatNotInHall",
    "FindAvailableSeatsService",
    "AvailableSeatsResult",
]
