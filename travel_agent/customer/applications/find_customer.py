from travel_agent.customer.domain.entity import Customer
from travel_agent.customer.domain.exception import CustomerNotFoundException
from travel_agent.customer.domain.repository import CustomerRepository
from travel_agent.customer.domain.value_object import CustomerId


class FindCustomerService:
    """顧客参照のユースケース

    複合予約の前に顧客IDの存在を確認するために使う。
    """

    def __init__(self, repository: CustomerRepository) -> None:
        self._repository = repository

    def find(self, customer_id: CustomerId) -> Customer:
        """顧客を取得する。存在しなければ CustomerNotFoundException"""
        customer = self._repository.find_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundException(customer_id)
        return customer
