from datetime import datetime, timezone

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import (
    BookingId,
    CustomerId,
    Seat,
    ShowTimeReference,
)
from services.booking.infrastructure.in_memory_booking_repository import (
    InMemoryBookingRepository,
)
from services.booking.infrastructure.in_memory_show_time_repository import (
    InMemoryShowTimeRepository,
)
from services.shared.domain import ShowTimeId


def build_seats(layout: list[tuple[str, int]]) -> list[Seat]:
    """(列, 座席数) の並びから座席表を作る"""
    return [
        Seat(row=row, number=number)
        for row, count in layout
        for number in range(1, count + 1)
    ]


@pytest.fixture
def hall_seats() -> list[Seat]:
    """A1-A10, B1-B10, C1-C8 の28席"""
    return build_seats([("A", 10), ("B", 10), ("C", 8)])


@pytest.fixture
def show_time_reference(show_time_id) -> ShowTimeReference:
    return ShowTimeReference(
        id=show_time_id,
        movie_title="The Matrix",
        start_time=datetime(2024, 1, 8, 14, 0, tzinfo=timezone.utc),
        hall_id="hall-1",
    )


@pytest.fixture
def booking_repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def show_time_repository(show_time_reference, hall_seats) -> InMemoryShowTimeRepository:
    """28席のホールで上映する上映回が1件登録された状態"""
    repository = InMemoryShowTimeRepository()
    repository.add_show_time(show_time_reference, hall_seats)
    return repository


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        customer_id: str = "alice",
        seat: Seat = Seat(row="B", number=4),
        show_time_id: str = "show-123",
        booked_at: datetime = datetime(2024, 1, 8, 12, 0, tzinfo=timezone.utc),
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            customer_id=CustomerId(value=customer_id),
            seat=seat,
            show_time_id=ShowTimeId(value=show_time_id),
            booked_at=booked_at,
        )

    return _factory
