from travel_agent.hotel.domain.value_object import HotelId, HotelLocation, HotelName
from travel_agent.shared.domain import Entity


class Hotel(Entity[HotelId]):
    """ホテルエンティティ"""

    def __init__(self, id: HotelId, name: HotelName, location: HotelLocation) -> None:
        super().__init__(id)
        self._name = name
        self._location = location

    @property
    def name(self) -> HotelName:
        return self._name

    @property
    def location(self) -> HotelLocation:
        return self._location
