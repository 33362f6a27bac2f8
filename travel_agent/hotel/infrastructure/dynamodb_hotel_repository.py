import os

import boto3
from botocore.exceptions import ClientError

from travel_agent.hotel.domain.entity import Hotel
from travel_agent.hotel.domain.repository import HotelRepository
from travel_agent.hotel.domain.value_object import HotelId, HotelLocation, HotelName
from travel_agent.shared.domain import PersistenceException


class DynamoDBHotelRepository(HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"HOTEL#{hotel_id}", "SK": "PROFILE"},
            )
        except ClientError as e:
            raise PersistenceException(f"Failed to read hotel {hotel_id}: {e}") from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Hotel:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Hotel(
            id=HotelId(value=int(item["hotel_id"])),
            name=HotelName(value=item["hotel_name"]),
            location=HotelLocation(value=item["hotel_location"]),
        )
