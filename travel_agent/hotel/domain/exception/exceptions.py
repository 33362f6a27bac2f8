from travel_agent.shared.domain import ResourceNotFoundException


class HotelNotFoundException(ResourceNotFoundException):
    """指定したホテルが存在しない場合"""

    def __init__(self, hotel_id: object) -> None:
        super().__init__(f"Hotel not found: {hotel_id}")
        self.hotel_id = hotel_id
