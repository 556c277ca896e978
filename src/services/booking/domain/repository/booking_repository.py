from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import BookingId, Seat
from services.shared.domain import Repository, ShowTimeId


class BookingRepository(Repository[Booking, BookingId]):
    """座席予約リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    同じ (上映回, 座席) の予約が2件保存されないことは実装側が保証する。
    """

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """予約を保存する

        Raises:
            DuplicateResourceException: 同じ上映回・座席の予約が既に存在する場合
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_booked_seats_for_show_time(self, show_time_id: ShowTimeId) -> list[Seat]:
        """上映回で予約済みの座席を返す"""
        raise NotImplementedError

    @abstractmethod
    def exists_booking_for_seat(self, show_time_id: ShowTimeId, seat: Seat) -> bool:
        """上映回の座席に予約が存在するかどうか"""
        raise NotImplementedError
