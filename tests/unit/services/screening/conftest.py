from datetime import datetime, timezone

import pytest

from services.screening.domain import Hall, ShowTime
from services.screening.infrastructure.in_memory_show_time_repository import (
    InMemoryShowTimeRepository,
)
from services.shared.domain import ShowTimeId


@pytest.fixture
def hall() -> Hall:
    return Hall(
        id="hall-1",
        name="Screen 1",
        seat_rows=(("A", 10), ("B", 10), ("C", 8)),
    )


@pytest.fixture
def create_show_time(hall):
    """ShowTime を生成する Factory fixture"""

    def _factory(
        show_time_id: str = "show-123",
        movie_title: str = "The Matrix",
        start_time: datetime = datetime(2024, 1, 8, 14, 0, tzinfo=timezone.utc),
        tz=timezone.utc,
    ) -> ShowTime:
        return ShowTime.create(
            id=ShowTimeId(value=show_time_id),
            movie_title=movie_title,
            hall=hall,
            start_time=start_time,
            tz=tz,
        )

    return _factory


@pytest.fixture
def screening_repository() -> InMemoryShowTimeRepository:
    return InMemoryShowTimeRepository()
