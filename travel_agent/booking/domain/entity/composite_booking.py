from travel_agent.booking.domain.enum import CompositeBookingStatus
from travel_agent.booking.domain.value_object import CompositeBookingId
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.provider.domain.value_object import ReservationId
from travel_agent.shared.domain import Entity


class CompositeBooking(Entity[CompositeBookingId]):
    """複合予約エンティティ（ホテル + タクシー + フライト）

    両方の外部予約が成功し、ホテルが確認できた場合にのみ生成・永続化される。
    生成後は変更しない。
    """

    def __init__(
        self,
        id: CompositeBookingId,
        customer_id: CustomerId,
        hotel_id: HotelId,
        taxi_reservation_id: ReservationId,
        flight_reservation_id: ReservationId,
        status: CompositeBookingStatus = CompositeBookingStatus.CONFIRMED,
    ) -> None:
        super().__init__(id)
        self._customer_id = customer_id
        self._hotel_id = hotel_id
        self._taxi_reservation_id = taxi_reservation_id
        self._flight_reservation_id = flight_reservation_id
        self._status = status

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def taxi_reservation_id(self) -> ReservationId:
        return self._taxi_reservation_id

    @property
    def flight_reservation_id(self) -> ReservationId:
        return self._flight_reservation_id

    @property
    def status(self) -> CompositeBookingStatus:
        return self._status

    def to_dict(self) -> dict:
        """永続化・レスポンス用の辞書表現を返す"""
        return {
            "booking_id": str(self.id),
            "customer_id": self._customer_id.value,
            "hotel_id": self._hotel_id.value,
            "taxi_reservation_id": str(self._taxi_reservation_id),
            "flight_reservation_id": str(self._flight_reservation_id),
            "status": self._status.value,
        }
