from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.enum import CompositeBookingStatus
from travel_agent.booking.domain.value_object import CompositeBookingId
from travel_agent.booking.infrastructure.dynamodb_composite_booking_repository import (
    DynamoDBCompositeBookingRepository,
)
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.provider.domain.value_object import ReservationId
from travel_agent.shared.domain import (
    DuplicateResourceException,
    PersistenceException,
)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "PutItem")


class TestDynamoDBCompositeBookingRepository:
    @pytest.fixture
    def repository(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-2")
        repository = DynamoDBCompositeBookingRepository(table_name="travel-agent")
        repository.table = MagicMock()
        return repository

    @pytest.fixture
    def booking(self):
        return CompositeBooking(
            id=CompositeBookingId("booking-1"),
            customer_id=CustomerId(1),
            hotel_id=HotelId(42),
            taxi_reservation_id=ReservationId("T-9"),
            flight_reservation_id=ReservationId("F-7"),
        )

    def test_save_puts_single_item(self, repository, booking):
        repository.save(booking)

        repository.table.put_item.assert_called_once()
        item = repository.table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "BOOKING#booking-1"
        assert item["SK"] == "COMPOSITE"
        assert item["customer_id"] == 1
        assert item["hotel_id"] == 42
        assert item["taxi_reservation_id"] == "T-9"
        assert item["flight_reservation_id"] == "F-7"
        assert item["status"] == "CONFIRMED"
        assert item["GSI1PK"] == "CUSTOMER#1"

    def test_save_duplicate_raises(self, repository, booking):
        repository.table.put_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(booking)

    def test_save_store_error_raises_persistence_exception(self, repository, booking):
        repository.table.put_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException"
        )

        with pytest.raises(PersistenceException):
            repository.save(booking)

    def test_find_by_id_returns_entity(self, repository):
        repository.table.get_item.return_value = {
            "Item": {
                "booking_id": "booking-1",
                "customer_id": 1,
                "hotel_id": 42,
                "taxi_reservation_id": "T-9",
                "flight_reservation_id": "F-7",
                "status": "CONFIRMED",
            }
        }

        booking = repository.find_by_id(CompositeBookingId("booking-1"))

        assert booking is not None
        assert booking.id == CompositeBookingId("booking-1")
        assert booking.customer_id == CustomerId(1)
        assert booking.taxi_reservation_id == ReservationId("T-9")
        assert booking.status == CompositeBookingStatus.CONFIRMED

    def test_find_by_id_returns_none_when_missing(self, repository):
        repository.table.get_item.return_value = {}

        assert repository.find_by_id(CompositeBookingId("missing")) is None
