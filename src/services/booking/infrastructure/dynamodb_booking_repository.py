import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, CustomerId, Seat
from services.shared.domain import ShowTimeId
from services.shared.domain.exception import DuplicateResourceException


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用した BookingRepository の具象実装

    予約は PK=SHOWTIME#<上映回ID>, SK=BOOKING#<座席> に保存する。
    キーが (上映回, 座席) そのものなので、条件付き書き込みで二重予約を防ぐ。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> Booking:
        """予約をDBに保存する"""
        item = {
            "PK": f"SHOWTIME#{booking.show_time_id}",
            "SK": f"BOOKING#{booking.seat.display_name()}",
            "entity_type": "BOOKING",
            **booking.to_dict(),
        }
        try:
            self.table.put_item(
                Item=item, ConditionExpression="attribute_not_exists(PK)"
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Seat already booked: {booking.show_time_id} {booking.seat}"
                ) from e
            raise
        return booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        kwargs = {
            "FilterExpression": "booking_id = :bid",
            "ExpressionAttributeValues": {":bid": str(booking_id)},
        }
        while True:
            response = self.table.scan(**kwargs)
            items = response.get("Items", [])
            if items:
                return self._to_entity(items[0])
            last_key = response.get("LastEvaluatedKey")
            if last_key is None:
                return None
            kwargs["ExclusiveStartKey"] = last_key

    def find_booked_seats_for_show_time(self, show_time_id: ShowTimeId) -> list[Seat]:
        """上映回の予約済み座席を返す"""
        items: list[dict] = []
        kwargs = {
            "KeyConditionExpression": Key("PK").eq(f"SHOWTIME#{show_time_id}")
            & Key("SK").begins_with("BOOKING#"),
        }
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if last_key is None:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return [Seat.from_display(item["seat"]) for item in items]

    def exists_booking_for_seat(self, show_time_id: ShowTimeId, seat: Seat) -> bool:
        """上映回の座席に予約があるか"""
        response = self.table.get_item(
            Key={
                "PK": f"SHOWTIME#{show_time_id}",
                "SK": f"BOOKING#{seat.display_name()}",
            },
            ProjectionExpression="PK",
        )
        return "Item" in response

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            customer_id=CustomerId(value=item["customer_id"]),
            seat=Seat.from_display(item["seat"]),
            show_time_id=ShowTimeId(value=item["show_time_id"]),
            booked_at=datetime.fromisoformat(item["booked_at"]),
        )
