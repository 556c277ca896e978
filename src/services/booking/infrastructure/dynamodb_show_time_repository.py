import os
from datetime import datetime

import boto3

from services.booking.domain.repository import ShowTimeRepository
from services.booking.domain.value_object import Seat, ShowTimeReference
from services.shared.domain import ShowTimeId


class DynamoDBShowTimeRepository(ShowTimeRepository):
    """screening が保存した上映回アイテムを予約コンテキスト向けに読む"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, show_time_id: ShowTimeId) -> ShowTimeReference | None:
        item = self._get_item(show_time_id)
        if item is None:
            return None
        return ShowTimeReference(
            id=ShowTimeId(value=item["show_time_id"]),
            movie_title=item["movie_title"],
            start_time=datetime.fromisoformat(item["start_time"]),
            hall_id=item["hall_id"],
        )

    def get_all_seats_for_show_time(self, show_time_id: ShowTimeId) -> list[Seat]:
        item = self._get_item(show_time_id)
        if item is None:
            return []
        return [Seat.from_display(label) for label in item.get("seats", [])]

    def _get_item(self, show_time_id: ShowTimeId) -> dict | None:
        response = self.table.get_item(
            Key={"PK": f"SHOWTIME#{show_time_id}", "SK": "META"}
        )
        return response.get("Item")
