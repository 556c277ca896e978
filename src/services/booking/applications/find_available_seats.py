from dataclasses import dataclass

from services.booking.domain.repository import BookingRepository, ShowTimeRepository
from services.booking.domain.value_object import Seat
from services.shared.domain import ShowTimeId
from services.shared.utils import get_logger

logger = get_logger("booking-service")


@dataclass(frozen=True)
class AvailableSeatsResult:
    """上映回の座席を空席と予約済みに分割した結果"""

    available_seats: tuple[Seat, ...]
    booked_seats: tuple[Seat, ...]
    total_seats: int

    @property
    def available_count(self) -> int:
        return len(self.available_seats)

    @property
    def booked_count(self) -> int:
        return len(self.booked_seats)

    def has_available_seats(self) -> bool:
        return bool(self.available_seats)

    def is_seat_available(self, seat: Seat) -> bool:
        return seat in self.available_seats

    def is_seat_booked(self, seat: Seat) -> bool:
        return seat in self.booked_seats


class FindAvailableSeatsService:
    """空席検索ユースケース

    ホールの全座席から予約済みの座席を差し引く。読み取りのみで副作用はない。
    """

    def __init__(
        self,
        show_time_repository: ShowTimeRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._show_time_repository = show_time_repository
        self._booking_repository = booking_repository

    def find(self, show_time_id: ShowTimeId) -> AvailableSeatsResult:
        """上映回の空席を求める

        存在しない上映回は座席0件の上映回と同じく空の結果になる。
        """
        all_seats = self._show_time_repository.get_all_seats_for_show_time(show_time_id)
        booked = set(
            self._booking_repository.find_booked_seats_for_show_time(show_time_id)
        )

        # 両方とも座席表の並び順を保ち、座席表にない予約は数えない
        available_seats = tuple(seat for seat in all_seats if seat not in booked)
        booked_seats = tuple(seat for seat in all_seats if seat in booked)

        logger.debug(
            "Computed seat availability",
            extra={
                "show_time_id": str(show_time_id),
                "available": len(available_seats),
                "booked": len(booked_seats),
            },
        )

        return AvailableSeatsResult(
            available_seats=available_seats,
            booked_seats=booked_seats,
            total_seats=len(available_seats) + len(booked_seats),
        )
