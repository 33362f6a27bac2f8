from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.enum import CompositeBookingStatus
from travel_agent.booking.domain.value_object import CompositeBookingId
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.domain.value_object import Reservation
from travel_agent.shared.domain import BusinessRuleViolationException


class CompositeBookingFactory:
    """複合予約エンティティのファクトリ

    - 試行ごとに新しい ID を生成
    - 予約結果のプロバイダを検証
    - 初期状態（CONFIRMED）の設定
    """

    def create(
        self,
        customer_id: CustomerId,
        hotel_id: HotelId,
        taxi_reservation: Reservation,
        flight_reservation: Reservation,
    ) -> CompositeBooking:
        """確定済みの複合予約を生成する

        Args:
            customer_id: 顧客ID
            hotel_id: 確認済みのホテルID
            taxi_reservation: タクシー予約の結果
            flight_reservation: フライト予約の結果

        Returns:
            CompositeBooking: CONFIRMED 状態の複合予約
        """
        if taxi_reservation.provider != Provider.TAXI:
            raise BusinessRuleViolationException(
                f"Expected a taxi reservation, got {taxi_reservation.provider.value}"
            )
        if flight_reservation.provider != Provider.FLIGHT:
            raise BusinessRuleViolationException(
                "Expected a flight reservation, "
                f"got {flight_reservation.provider.value}"
            )

        return CompositeBooking(
            id=CompositeBookingId.generate(),
            customer_id=customer_id,
            hotel_id=hotel_id,
            taxi_reservation_id=taxi_reservation.id,
            flight_reservation_id=flight_reservation.id,
            status=CompositeBookingStatus.CONFIRMED,
        )
