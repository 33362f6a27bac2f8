import os

import boto3
from botocore.exceptions import ClientError

from travel_agent.customer.domain.entity import Customer
from travel_agent.customer.domain.repository import CustomerRepository
from travel_agent.customer.domain.value_object import CustomerId, EmailAddress
from travel_agent.shared.domain import PersistenceException


class DynamoDBCustomerRepository(CustomerRepository):
    """DynamoDBを使用したCustomerRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        """顧客IDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"CUSTOMER#{customer_id}", "SK": "PROFILE"},
            )
        except ClientError as e:
            raise PersistenceException(
                f"Failed to read customer {customer_id}: {e}"
            ) from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Customer:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Customer(
            id=CustomerId(value=int(item["customer_id"])),
            first_name=item["first_name"],
            last_name=item["last_name"],
            email=EmailAddress(value=item["email"]),
        )
