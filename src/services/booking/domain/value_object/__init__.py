from .booking_id import BookingId
from .customer_id import CustomerId
from .seat import Seat
from .show_time_reference import ShowTimeReference

__all__ = ["BookingId", "CustomerId", "Seat", "ShowTimeReference"]
