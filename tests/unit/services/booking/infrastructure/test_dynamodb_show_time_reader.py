from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest

from services.booking.domain.value_object import Seat
from services.booking.infrastructure.dynamodb_show_time_repository import (
    DynamoDBShowTimeRepository,
)
from services.shared.domain import ShowTimeId

MODULE = "services.booking.infrastructure.dynamodb_show_time_repository"

META_ITEM = {
    "PK": "SHOWTIME#show-123",
    "SK": "META",
    "show_time_id": "show-123",
    "movie_title": "The Matrix",
    "start_time": "2024-01-08T14:00:00+00:00",
    "hall_id": "hall-1",
    "seats": ["A1", "A2", "B1"],
}


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    with patch(f"{MODULE}.boto3.resource") as resource:
        resource.return_value.Table.return_value = table
        yield DynamoDBShowTimeRepository(table_name="cinema-table")


class TestBookingDynamoDBShowTimeRepository:
    """予約コンテキストから見た上映回の読み取り"""

    def test_find_by_id(self, repository, table):
        table.get_item.return_value = {"Item": META_ITEM}

        reference = repository.find_by_id(ShowTimeId(value="show-123"))

        assert reference is not None
        assert reference.movie_title == "The Matrix"
        assert reference.hall_id == "hall-1"
        assert reference.start_time == datetime(2024, 1, 8, 14, 0, tzinfo=timezone.utc)
        table.get_item.assert_called_once_with(
            Key={"PK": "SHOWTIME#show-123", "SK": "META"}
        )

    def test_find_by_id_not_found(self, repository, table):
        table.get_item.return_value = {}

        assert repository.find_by_id(ShowTimeId(value="missing")) is None

    def test_get_all_seats_keeps_layout_order(self, repository, table):
        table.get_item.return_value = {"Item": META_ITEM}

        seats = repository.get_all_seats_for_show_time(ShowTimeId(value="show-123"))

        assert seats == [
            Seat(row="A", number=1),
            Seat(row="A", number=2),
            Seat(row="B", number=1),
        ]

    def test_get_all_seats_for_unknown_show_time(self, repository, table):
        table.get_item.return_value = {}

        assert repository.get_all_seats_for_show_time(ShowTimeId(value="x")) == []
