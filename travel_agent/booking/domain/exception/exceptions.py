from travel_agent.booking.domain.enum import BookingStage, SagaState
from travel_agent.booking.domain.saga import CompensationError
from travel_agent.shared.domain import DomainException


class BookingFailedException(DomainException):
    """複合予約の失敗

    cause には最初に発生した例外をそのまま保持する。
    補償処理の失敗は compensation_errors に付随情報として載せるだけで、
    cause を置き換えることはない。
    """

    stage: BookingStage
    error_code: str

    def __init__(
        self,
        cause: Exception,
        compensation_errors: list[CompensationError] | None = None,
        last_state: SagaState = SagaState.INIT,
    ) -> None:
        super().__init__(f"Booking failed at {self.stage.value} stage: {cause}")
        self.cause = cause
        self.compensation_errors = list(compensation_errors or [])
        self.last_state = last_state

    @property
    def fully_compensated(self) -> bool:
        return not self.compensation_errors


class HotelLookupFailedException(BookingFailedException):
    """ホテルの確認に失敗した（補償対象なし）"""

    stage = BookingStage.HOTEL
    error_code = "HOTEL_LOOKUP_FAILED"


class TaxiBookingFailedException(BookingFailedException):
    """タクシー予約に失敗した（補償対象なし）"""

    stage = BookingStage.TAXI
    error_code = "TAXI_BOOKING_FAILED"


class FlightBookingFailedException(BookingFailedException):
    """フライト予約に失敗した（タクシー予約を取り消す）"""

    stage = BookingStage.FLIGHT
    error_code = "FLIGHT_BOOKING_FAILED"


class PersistenceFailedException(BookingFailedException):
    """複合予約の保存に失敗した（フライト → タクシーの順に取り消す）"""

    stage = BookingStage.PERSISTENCE
    error_code = "PERSISTENCE_FAILED"
