from travel_agent.booking.applications.compensation_stack import CompensationStack
from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.enum import BookingStage, SagaState
from travel_agent.booking.domain.exception import (
    BookingFailedException,
    FlightBookingFailedException,
    HotelLookupFailedException,
    PersistenceFailedException,
    TaxiBookingFailedException,
)
from travel_agent.booking.domain.factory import CompositeBookingFactory
from travel_agent.booking.domain.repository import CompositeBookingRepository
from travel_agent.booking.domain.saga import BookingAttempt, CompensationError
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.applications.find_hotel import FindHotelService
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.provider.domain.booking_spec import FlightSpec, TaxiSpec
from travel_agent.provider.domain.client import RemoteBookingClient
from travel_agent.shared.utils import get_logger

logger = get_logger()

_FAILURES: dict[BookingStage, type[BookingFailedException]] = {
    BookingStage.HOTEL: HotelLookupFailedException,
    BookingStage.TAXI: TaxiBookingFailedException,
    BookingStage.FLIGHT: FlightBookingFailedException,
    BookingStage.PERSISTENCE: PersistenceFailedException,
}


class BookCompositeService:
    """複合予約（ホテル + タクシー + フライト）のユースケース

    分散トランザクションを使わず、Saga パターンで全体の整合性を保つ。

    1. ホテルの存在を確認する
    2. タクシーを予約し、取り消し手順をスタックに積む
    3. フライトを予約し、取り消し手順をスタックに積む
    4. 複合予約を CONFIRMED で保存する

    どの手順で失敗しても、それまでに積んだ取り消しを逆順に実行してから
    BookingFailedException を送出する。リトライは行わない。
    依存はすべてコンストラクタで受け取り、リクエスト間で状態を共有しない。
    """

    def __init__(
        self,
        hotel_lookup: FindHotelService,
        taxi_client: RemoteBookingClient[TaxiSpec],
        flight_client: RemoteBookingClient[FlightSpec],
        repository: CompositeBookingRepository,
        factory: CompositeBookingFactory,
    ) -> None:
        self._hotel_lookup = hotel_lookup
        self._taxi_client = taxi_client
        self._flight_client = flight_client
        self._repository = repository
        self._factory = factory

    def book(
        self,
        customer_id: CustomerId,
        hotel_id: HotelId,
        taxi_spec: TaxiSpec,
        flight_spec: FlightSpec,
    ) -> CompositeBooking:
        """ホテル・タクシー・フライトをまとめて予約する

        Raises:
            HotelLookupFailedException: ホテルが見つからない
            TaxiBookingFailedException: タクシー予約に失敗した
            FlightBookingFailedException: フライト予約に失敗した（タクシーは取り消し済み）
            PersistenceFailedException: 保存に失敗した（両方取り消し済み）
        """
        attempt = BookingAttempt()
        compensations = CompensationStack()
        stage = BookingStage.HOTEL

        try:
            hotel = self._hotel_lookup.find(hotel_id)
            self._advance(attempt, SagaState.HOTEL_VALIDATED, hotel_id=str(hotel.id))

            stage = BookingStage.TAXI
            taxi_reservation = self._taxi_client.book(taxi_spec)
            compensations.push(self._taxi_client, taxi_reservation)
            self._advance(
                attempt,
                SagaState.TAXI_BOOKED,
                reservation_id=str(taxi_reservation.id),
            )

            stage = BookingStage.FLIGHT
            flight_reservation = self._flight_client.book(flight_spec)
            compensations.push(self._flight_client, flight_reservation)
            self._advance(
                attempt,
                SagaState.FLIGHT_BOOKED,
                reservation_id=str(flight_reservation.id),
            )

            stage = BookingStage.PERSISTENCE
            booking = self._factory.create(
                customer_id=customer_id,
                hotel_id=hotel.id,
                taxi_reservation=taxi_reservation,
                flight_reservation=flight_reservation,
            )
            self._repository.save(booking)
            self._advance(attempt, SagaState.PERSISTED, booking_id=str(booking.id))
        except Exception as e:
            last_state = attempt.state
            logger.warning(
                "Composite booking failed",
                extra={
                    "stage": stage.value,
                    "state": last_state.value,
                    "error": str(e),
                },
            )
            errors = self._compensate(attempt, compensations)
            raise _FAILURES[stage](
                cause=e, compensation_errors=errors, last_state=last_state
            ) from e
        except BaseException:
            # 中断時も積まれた補償だけは実行を試みてから中断を伝える
            logger.warning(
                "Composite booking interrupted",
                extra={"stage": stage.value, "state": attempt.state.value},
            )
            self._compensate(attempt, compensations)
            raise

        return booking

    def _advance(self, attempt: BookingAttempt, to: SagaState, **extra: str) -> None:
        attempt.advance(to)
        logger.info("Saga state changed", extra={"state": to.value, **extra})

    def _compensate(
        self, attempt: BookingAttempt, compensations: CompensationStack
    ) -> list[CompensationError]:
        attempt.advance(SagaState.COMPENSATING)
        logger.info(
            "Running compensations",
            extra={
                "state": SagaState.COMPENSATING.value,
                "pending": [c.provider.value for c in compensations.pending()],
            },
        )
        errors = compensations.drain()
        attempt.advance(SagaState.FAILED)
        logger.info(
            "Saga state changed",
            extra={
                "state": SagaState.FAILED.value,
                "compensation_errors": len(errors),
            },
        )
        return errors
