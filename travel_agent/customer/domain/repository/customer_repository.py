from abc import abstractmethod

from travel_agent.customer.domain.entity import Customer
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.shared.domain import Repository


class CustomerRepository(Repository[Customer, CustomerId]):
    """顧客リポジトリのインターフェース（参照専用）"""

    @abstractmethod
    def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        """顧客IDで検索する"""
        raise NotImplementedError
