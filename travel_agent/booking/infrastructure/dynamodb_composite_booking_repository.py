import os

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.enum import CompositeBookingStatus
from travel_agent.booking.domain.repository import CompositeBookingRepository
from travel_agent.booking.domain.value_object import CompositeBookingId
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.provider.domain.value_object import ReservationId
from travel_agent.shared.domain import (
    DuplicateResourceException,
    PersistenceException,
)


class DynamoDBCompositeBookingRepository(CompositeBookingRepository):
    """DynamoDBを使用したCompositeBookingRepository の具象実装

    1件の複合予約を1アイテムとして put_item するため、書き込みは原子的。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: CompositeBooking) -> None:
        """複合予約をDBに保存する"""
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "COMPOSITE",
            "entity_type": "COMPOSITE_BOOKING",
            "booking_id": str(booking.id),
            "customer_id": booking.customer_id.value,
            "hotel_id": booking.hotel_id.value,
            "taxi_reservation_id": str(booking.taxi_reservation_id),
            "flight_reservation_id": str(booking.flight_reservation_id),
            "status": booking.status.value,
            "GSI1PK": f"CUSTOMER#{booking.customer_id}",
            "GSI1SK": f"BOOKING#{booking.id}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Composite booking already exists: {booking.id}"
                ) from e
            raise PersistenceException(
                f"Failed to save composite booking {booking.id}: {e}"
            ) from e
        except BotoCoreError as e:
            raise PersistenceException(
                f"Failed to save composite booking {booking.id}: {e}"
            ) from e

    def find_by_id(self, booking_id: CompositeBookingId) -> CompositeBooking | None:
        """複合予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "COMPOSITE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> CompositeBooking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return CompositeBooking(
            id=CompositeBookingId(value=item["booking_id"]),
            customer_id=CustomerId(value=int(item["customer_id"])),
            hotel_id=HotelId(value=int(item["hotel_id"])),
            taxi_reservation_id=ReservationId(value=item["taxi_reservation_id"]),
            flight_reservation_id=ReservationId(value=item["flight_reservation_id"]),
            status=CompositeBookingStatus(item["status"]),
        )
