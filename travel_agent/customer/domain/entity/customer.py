from travel_agent.customer.domain.value_object import CustomerId, EmailAddress
from travel_agent.shared.domain import Entity


class Customer(Entity[CustomerId]):
    """顧客エンティティ

    顧客の作成・更新は別サービスの責務で、ここでは参照のみ行う。
    """

    def __init__(
        self,
        id: CustomerId,
        first_name: str,
        last_name: str,
        email: EmailAddress,
    ) -> None:
        super().__init__(id)
        self._first_name = first_name
        self._last_name = last_name
        self._email = email

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> EmailAddress:
        return self._email
