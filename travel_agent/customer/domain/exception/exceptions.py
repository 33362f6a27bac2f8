from travel_agent.shared.domain import ResourceNotFoundException


class CustomerNotFoundException(ResourceNotFoundException):
    """指定した顧客が存在しない場合"""

    def __init__(self, customer_id: object) -> None:
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id
