from travel_agent.hotel.domain.entity import Hotel
from travel_agent.hotel.domain.exception import HotelNotFoundException
from travel_agent.hotel.domain.repository import HotelRepository
from travel_agent.hotel.domain.value_object import HotelId


class FindHotelService:
    """ホテル参照のユースケース（読み取り専用）"""

    def __init__(self, repository: HotelRepository) -> None:
        self._repository = repository

    def find(self, hotel_id: HotelId) -> Hotel:
        """ホテルを取得する。存在しなければ HotelNotFoundException"""
        hotel = self._repository.find_by_id(hotel_id)
        if hotel is None:
            raise HotelNotFoundException(hotel_id)
        return hotel
