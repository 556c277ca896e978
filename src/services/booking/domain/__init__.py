from .entity import Booking
from .factory import BookingFactory
from .repository import BookingRepository, ShowTimeRepository
from .value_object import BookingId, CustomerId, Seat, ShowTimeReference

__all__ = [
    "Booking",
    "BookingId",
    "CustomerId",
    "Seat",
    "ShowTimeReference",
    "BookingRepository",
    "ShowTimeRepository",
    "BookingFactory",
]
