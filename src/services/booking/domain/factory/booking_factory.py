from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId, CustomerId, Seat
from services.shared.domain import ShowTimeId
from services.shared.utils.clock import Clock, SystemClock


class BookingFactory:
    """座席予約エンティティのファクトリ

    - BookingId の採番
    - Clock から予約日時を決定
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def create(
        self,
        customer_id: CustomerId,
        seat: Seat,
        show_time_id: ShowTimeId,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            customer_id: 顧客ID
            seat: 予約する座席
            show_time_id: 上映回ID

        Returns:
            Booking: 生成された予約エンティティ
        """
        return Booking(
            id=BookingId.generate(),
            customer_id=customer_id,
            seat=seat,
            show_time_id=show_time_id,
            booked_at=self._clock.now(),
        )
