from datetime import datetime

from services.booking.domain.value_object import BookingId, CustomerId, Seat
from services.shared.domain import AggregateRoot, ShowTimeId


class Booking(AggregateRoot[BookingId]):
    """座席予約エンティティ

    1人の顧客を1つの上映回の1座席に結び付ける。
    予約は無料で即時確定し、生成後に変更されることはない。
    """

    def __init__(
        self,
        id: BookingId,
        customer_id: CustomerId,
        seat: Seat,
        show_time_id: ShowTimeId,
        booked_at: datetime,
    ) -> None:
        super().__init__(id)
        self._customer_id = customer_id
        self._seat = seat
        self._show_time_id = show_time_id
        self._booked_at = booked_at

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def seat(self) -> Seat:
        return self._seat

    @property
    def show_time_id(self) -> ShowTimeId:
        return self._show_time_id

    @property
    def booked_at(self) -> datetime:
        return self._booked_at

    def to_dict(self) -> dict:
        """永続化用の辞書表現を返す"""
        return {
            "booking_id": str(self.id),
            "customer_id": str(self._customer_id),
            "seat": self._seat.display_name(),
            "show_time_id": str(self._show_time_id),
            "booked_at": self._booked_at.isoformat(),
        }
