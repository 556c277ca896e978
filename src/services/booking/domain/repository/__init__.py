from .booking_repository import BookingRepository
from .show_time_repository import ShowTimeRepository

__all__ = ["BookingRepository", "ShowTimeRepository"]
