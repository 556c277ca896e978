import threading

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, Seat
from services.shared.domain import ShowTimeId
from services.shared.domain.exception import DuplicateResourceException


class InMemoryBookingRepository(BookingRepository):
    """プロセス内のメモリに予約を保持する BookingRepository

    (上映回, 座席) をキーにし、確認と追加をロックの中で行う。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bookings: dict[tuple[ShowTimeId, Seat], Booking] = {}

    def save(self, booking: Booking) -> Booking:
        key = (booking.show_time_id, booking.seat)
        with self._lock:
            if key in self._bookings:
                raise DuplicateResourceException(
                    f"Seat already booked: {booking.show_time_id} {booking.seat}"
                )
            self._bookings[key] = booking
        return booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            return next(
                (b for b in self._bookings.values() if b.id == booking_id), None
            )

    def find_booked_seats_for_show_time(self, show_time_id: ShowTimeId) -> list[Seat]:
        with self._lock:
            return [seat for (sid, seat) in self._bookings if sid == show_time_id]

    def exists_booking_for_seat(self, show_time_id: ShowTimeId, seat: Seat) -> bool:
        with self._lock:
            return (show_time_id, seat) in self._bookings
