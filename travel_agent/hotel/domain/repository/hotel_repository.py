from abc import abstractmethod

from travel_agent.hotel.domain.entity import Hotel
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.shared.domain import Repository


class HotelRepository(Repository[Hotel, HotelId]):
    """ホテルリポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    在庫の更新はこのリポジトリの責務ではない。
    """

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索する"""
        raise NotImplementedError
