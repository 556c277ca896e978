from services.booking.domain.repository import ShowTimeRepository
from services.booking.domain.value_object import Seat, ShowTimeReference
from services.shared.domain import ShowTimeId


class InMemoryShowTimeRepository(ShowTimeRepository):
    """上映回と座席表をメモリに保持する ShowTimeRepository"""

    def __init__(self) -> None:
        self._show_times: dict[ShowTimeId, ShowTimeReference] = {}
        self._seats: dict[ShowTimeId, list[Seat]] = {}

    def add_show_time(self, show_time: ShowTimeReference, seats: list[Seat]) -> None:
        """上映回と、そのホールの座席表を登録する"""
        self._show_times[show_time.id] = show_time
        self._seats[show_time.id] = list(seats)

    def find_by_id(self, show_time_id: ShowTimeId) -> ShowTimeReference | None:
        return self._show_times.get(show_time_id)

    def get_all_seats_for_show_time(self, show_time_id: ShowTimeId) -> list[Seat]:
        return list(self._seats.get(show_time_id, []))
