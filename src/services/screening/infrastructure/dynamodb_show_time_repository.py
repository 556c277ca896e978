import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Key

from services.screening.domain.entity import ShowTime
from services.screening.domain.enum import DayOfWeek
from services.screening.domain.repository import ShowTimeRepository
from services.screening.domain.value_object import Hall
from services.shared.domain import ShowTimeId


class DynamoDBShowTimeRepository(ShowTimeRepository):
    """DynamoDBを使用した ShowTimeRepository の具象実装

    上映回は PK=SHOWTIME#<id>, SK=META の1アイテムに保存し、
    GSI1 (DAY#<曜日>, 開始日時) で曜日検索する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, show_time: ShowTime) -> ShowTime:
        """上映回をDBに保存する（同じIDは上書き）"""
        start_time = show_time.start_time.isoformat()
        item = {
            "PK": f"SHOWTIME#{show_time.id}",
            "SK": "META",
            "entity_type": "SHOWTIME",
            "show_time_id": str(show_time.id),
            "movie_title": show_time.movie_title,
            "start_time": start_time,
            "day_of_week": show_time.day_of_week.value,
            "hall_id": show_time.hall.id,
            "hall_name": show_time.hall.name,
            "seat_rows": [
                {"row": row, "count": count} for row, count in show_time.hall.seat_rows
            ],
            "seats": show_time.hall.seat_labels(),
            "GSI1PK": f"DAY#{show_time.day_of_week.value}",
            "GSI1SK": start_time,
        }
        self.table.put_item(Item=item)
        return show_time

    def find_by_id(self, show_time_id: ShowTimeId) -> ShowTime | None:
        """上映回IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"SHOWTIME#{show_time_id}", "SK": "META"}
        )
        item = response.get("Item")
        if item is None:
            return None
        return self._to_entity(item)

    def find_by_day_of_week(self, day_of_week: DayOfWeek) -> list[ShowTime]:
        """曜日で検索（GSI1SK の昇順 = 開始日時順）"""
        items: list[dict] = []
        kwargs = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(f"DAY#{day_of_week.value}"),
        }
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if last_key is None:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> ShowTime:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        hall = Hall(
            id=item["hall_id"],
            name=item["hall_name"],
            seat_rows=tuple(
                (row["row"], int(row["count"])) for row in item.get("seat_rows", [])
            ),
        )
        return ShowTime(
            id=ShowTimeId(value=item["show_time_id"]),
            movie_title=item["movie_title"],
            hall=hall,
            start_time=datetime.fromisoformat(item["start_time"]),
            day_of_week=DayOfWeek(item["day_of_week"]),
        )