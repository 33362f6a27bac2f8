from abc import abstractmethod

from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.value_object import CompositeBookingId
from travel_agent.shared.domain import Repository


class CompositeBookingRepository(Repository[CompositeBooking, CompositeBookingId]):
    """複合予約リポジトリのインターフェース

    1件の複合予約は全体が書き込まれるか、何も書き込まれないかのどちらか。
    """

    @abstractmethod
    def save(self, booking: CompositeBooking) -> None:
        """複合予約を保存する

        Raises:
            DuplicateResourceException: 同じ ID の予約が既に存在する
            PersistenceException: ストアへの書き込みに失敗した
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: CompositeBookingId) -> CompositeBooking | None:
        """複合予約IDで検索する"""
        raise NotImplementedError
