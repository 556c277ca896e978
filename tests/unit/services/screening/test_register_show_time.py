from datetime import datetime, timedelta, timezone

import pytest

from services.screening.applications.register_show_time import (
    RegisterShowTimeService,
)
from services.screening.domain import DayOfWeek
from services.shared.domain import ShowTimeId

JST = timezone(timedelta(hours=9))


@pytest.fixture
def details():
    return {
        "movie_title": "The Matrix",
        "start_time": datetime(2024, 1, 7, 22, 0, tzinfo=timezone.utc),
        "hall_id": "hall-1",
        "hall_name": "Screen 1",
        "seat_rows": [("A", 10), ("B", 10), ("C", 8)],
    }


class TestRegisterShowTimeService:
    def test_register_saves_show_time(self, screening_repository, details):
        service = RegisterShowTimeService(screening_repository)

        show_time = service.register(ShowTimeId(value="show-1"), details)

        assert screening_repository.find_by_id(ShowTimeId(value="show-1")) == show_time
        assert show_time.hall.capacity == 28
        assert show_time.day_of_week == DayOfWeek.SUNDAY

    def test_register_uses_cinema_time_zone(self, screening_repository, details):
        service = RegisterShowTimeService(screening_repository, tz=JST)

        show_time = service.register(ShowTimeId(value="show-1"), details)

        assert show_time.day_of_week == DayOfWeek.MONDAY

    def test_register_overwrites_same_id(self, screening_repository, details):
        service = RegisterShowTimeService(screening_repository)
        service.register(ShowTimeId(value="show-1"), details)

        service.register(
            ShowTimeId(value="show-1"), {**details, "movie_title": "Alien"}
        )

        saved = screening_repository.find_by_id(ShowTimeId(value="show-1"))
        assert saved.movie_title == "Alien"

    def test_invalid_hall_raises_error(self, mock_repository, details):
        service = RegisterShowTimeService(mock_repository)

        with pytest.raises(ValueError, match="Hall rows must be unique"):
            service.register(
                ShowTimeId(value="show-1"),
                {**details, "seat_rows": [("A", 1), ("A", 2)]},
            )
        mock_repository.save.assert_not_called()
