from dataclasses import dataclass

from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository, ShowTimeRepository
from services.booking.domain.value_object import CustomerId, Seat
from services.shared.domain import DuplicateResourceException, ShowTimeId
from services.shared.utils import get_logger

logger = get_logger("booking-service")


@dataclass(frozen=True)
class Success:
    """予約成功"""

    booking_id: str
    seat: str
    movie_title: str


@dataclass(frozen=True)
class SeatAlreadyBooked:
    """座席が既に予約されている"""

    seat: str


@dataclass(frozen=True)
class ShowTimeNotFound:
    """上映回が存在しない"""

    show_time_id: str


@dataclass(frozen=True)
class SeatNotInHall:
    """座席が上映回のホールに存在しない"""

    seat: str
    hall_id: str


BookSeatResult = Success | SeatAlreadyBooked | ShowTimeNotFound | SeatNotInHall


class BookSeatService:
    """座席予約ユースケース

    上映回の存在、ホールの座席、既存の予約の順に検証し、
    全て通った場合のみ予約を保存する。業務上の失敗は例外ではなく
    BookSeatResult の各バリアントとして返す。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        show_time_repository: ShowTimeRepository,
        factory: BookingFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._show_time_repository = show_time_repository
        self._factory = factory

    def book(
        self,
        customer_id: CustomerId,
        show_time_id: ShowTimeId,
        seat_row: str,
        seat_number: int,
    ) -> BookSeatResult:
        """座席を予約する

        Raises:
            ValueError: 座席の列・番号が不正な場合
        """
        # 1. 上映回の存在確認
        show_time = self._show_time_repository.find_by_id(show_time_id)
        if show_time is None:
            logger.info("Show time not found", extra={"show_time_id": str(show_time_id)})
            return ShowTimeNotFound(show_time_id=str(show_time_id))

        # 2. 座席の生成（不正な値はここで ValueError）
        seat = Seat(row=seat_row, number=seat_number)

        # 3. ホールの座席か確認
        hall_seats = self._show_time_repository.get_all_seats_for_show_time(show_time_id)
        if seat not in hall_seats:
            logger.info(
                "Seat not in hall",
                extra={"seat": str(seat), "hall_id": show_time.hall_id},
            )
            return SeatNotInHall(seat=seat.display_name(), hall_id=show_time.hall_id)

        # 4. 二重予約の確認
        if self._booking_repository.exists_booking_for_seat(show_time_id, seat):
            logger.info(
                "Seat already booked",
                extra={"show_time_id": str(show_time_id), "seat": str(seat)},
            )
            return SeatAlreadyBooked(seat=seat.display_name())

        # 5. 予約の生成と保存
        booking = self._factory.create(customer_id, seat, show_time_id)
        try:
            saved = self._booking_repository.save(booking)
        except DuplicateResourceException:
            # 確認と保存の間に同じ座席の予約が入った
            logger.warning(
                "Seat taken by a concurrent booking",
                extra={"show_time_id": str(show_time_id), "seat": str(seat)},
            )
            return SeatAlreadyBooked(seat=seat.display_name())

        logger.info(
            "Seat booked",
            extra={
                "booking_id": str(saved.id),
                "show_time_id": str(show_time_id),
                "seat": str(seat),
            },
        )

        # 6. 成功
        return Success(
            booking_id=str(saved.id),
            seat=saved.seat.display_name(),
            movie_title=show_time.movie_title,
        )
