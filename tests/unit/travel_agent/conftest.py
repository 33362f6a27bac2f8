from unittest.mock import MagicMock

import pytest

from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.domain.entity import Hotel
from travel_agent.hotel.domain.value_object import HotelId, HotelLocation, HotelName
from travel_agent.provider.domain.booking_spec import FlightSpec, TaxiSpec
from travel_agent.provider.domain.client import RemoteBookingClient
from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.domain.value_object import Reservation, ReservationId


class InMemoryBookingClient(RemoteBookingClient):
    """テスト用のインメモリ予約クライアント

    全ての呼び出しを共有ジャーナルに ("book" | "cancel", provider, 値) で記録する。
    """

    def __init__(
        self,
        provider: Provider,
        journal: list,
        reservation_ids: list[str] | None = None,
        book_error: Exception | None = None,
        cancel_error: Exception | None = None,
    ) -> None:
        self.provider = provider
        self.journal = journal
        self.book_error = book_error
        self.cancel_error = cancel_error
        self.active: list[str] = []
        self._reservation_ids = list(reservation_ids or [])
        self._sequence = 0

    def book(self, spec) -> Reservation:
        self.journal.append(("book", self.provider, spec))
        if self.book_error is not None:
            raise self.book_error
        self._sequence += 1
        if self._reservation_ids:
            reservation_id = self._reservation_ids.pop(0)
        else:
            reservation_id = f"{self.provider.value}-{self._sequence}"
        self.active.append(reservation_id)
        return Reservation(provider=self.provider, id=ReservationId(reservation_id))

    def cancel(self, reservation_id: ReservationId) -> None:
        self.journal.append(("cancel", self.provider, str(reservation_id)))
        if self.cancel_error is not None:
            raise self.cancel_error
        self.active.remove(str(reservation_id))


@pytest.fixture
def journal() -> list:
    """プロバイダ横断の呼び出し記録"""
    return []


@pytest.fixture
def create_client(journal):
    """InMemoryBookingClient を生成する Factory fixture"""

    def _factory(provider: Provider, **kwargs) -> InMemoryBookingClient:
        return InMemoryBookingClient(provider=provider, journal=journal, **kwargs)

    return _factory


@pytest.fixture
def customer_id() -> CustomerId:
    return CustomerId(value=1)


@pytest.fixture
def hotel_id() -> HotelId:
    return HotelId(value=42)


@pytest.fixture
def hotel(hotel_id) -> Hotel:
    return Hotel(
        id=hotel_id,
        name=HotelName(value="Grand Hotel"),
        location=HotelLocation(value="London"),
    )


@pytest.fixture
def taxi_spec() -> TaxiSpec:
    return {"registration": "AB12CDE", "seats": 2}


@pytest.fixture
def flight_spec() -> FlightSpec:
    return {
        "flight_number": "BA100",
        "departure_location": "LON",
        "arrival_location": "NYC",
        "departure_date": "2026-03-01",
    }


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
