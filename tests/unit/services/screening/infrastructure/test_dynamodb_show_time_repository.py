from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from services.screening.domain import DayOfWeek
from services.screening.infrastructure.dynamodb_show_time_repository import (
    DynamoDBShowTimeRepository,
)
from services.shared.domain import ShowTimeId

MODULE = "services.screening.infrastructure.dynamodb_show_time_repository"


@pytest.fixture
def table():
    return MagicMock()


@pytest.fixture
def repository(table):
    with patch(f"{MODULE}.boto3.resource") as resource:
        resource.return_value.Table.return_value = table
        yield DynamoDBShowTimeRepository(table_name="cinema-table")


def stored_item(show_time_id: str = "show-123") -> dict:
    """DynamoDB から返る形（数値は Decimal）"""
    return {
        "PK": f"SHOWTIME#{show_time_id}",
        "SK": "META",
        "show_time_id": show_time_id,
        "movie_title": "The Matrix",
        "start_time": "2024-01-08T14:00:00+00:00",
        "day_of_week": "MONDAY",
        "hall_id": "hall-1",
        "hall_name": "Screen 1",
        "seat_rows": [{"row": "A", "count": Decimal("10")}],
    }


class TestDynamoDBShowTimeRepository:
    def test_save_writes_meta_item(self, repository, table, create_show_time):
        repository.save(create_show_time())

        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "SHOWTIME#show-123"
        assert item["SK"] == "META"
        assert item["GSI1PK"] == "DAY#MONDAY"
        assert item["GSI1SK"] == "2024-01-08T14:00:00+00:00"
        assert item["seat_rows"][0] == {"row": "A", "count": 10}
        assert len(item["seats"]) == 28
        assert item["seats"][-1] == "C8"

    def test_find_by_id(self, repository, table):
        table.get_item.return_value = {"Item": stored_item()}

        show_time = repository.find_by_id(ShowTimeId(value="show-123"))

        assert show_time is not None
        assert show_time.day_of_week == DayOfWeek.MONDAY
        assert show_time.start_time == datetime(2024, 1, 8, 14, 0, tzinfo=timezone.utc)
        assert show_time.hall.seat_rows == (("A", 10),)

    def test_find_by_id_not_found(self, repository, table):
        table.get_item.return_value = {}

        assert repository.find_by_id(ShowTimeId(value="missing")) is None

    def test_find_by_day_of_week_queries_index(self, repository, table):
        table.query.side_effect = [
            {"Items": [stored_item("s-1")], "LastEvaluatedKey": {"PK": "p"}},
            {"Items": [stored_item("s-2")]},
        ]

        show_times = repository.find_by_day_of_week(DayOfWeek.MONDAY)

        assert [str(s.id) for s in show_times] == ["s-1", "s-2"]
        first_call = table.query.call_args_list[0].kwargs
        assert first_call["IndexName"] == "GSI1"
        assert table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {"PK": "p"}
