import json
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.exception import (
    FlightBookingFailedException,
    HotelLookupFailedException,
)
from travel_agent.booking.domain.saga import CompensationError
from travel_agent.booking.domain.value_object import CompositeBookingId
from travel_agent.booking.handlers import book
from travel_agent.customer.domain.exception import CustomerNotFoundException
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.hotel.domain.exception import HotelNotFoundException
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.domain.exception import (
    UpstreamRejectedException,
    UpstreamUnavailableException,
)
from travel_agent.provider.domain.value_object import ReservationId


@pytest.fixture
def lambda_context():
    @dataclass
    class LambdaContext:
        function_name: str = "book-composite"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:eu-west-2:123456789012:function:book-composite"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()


@pytest.fixture
def request_body():
    return {
        "customer_id": 1,
        "hotel_id": 42,
        "taxi": {"registration": "AB12CDE", "seats": 2},
        "flight": {
            "flight_number": "BA100",
            "departure_location": "LON",
            "arrival_location": "NYC",
            "departure_date": "2026-03-01",
        },
    }


@pytest.fixture
def services(monkeypatch):
    customer_service = MagicMock()
    booking_service = MagicMock()
    monkeypatch.setattr(book, "_build_customer_service", lambda: customer_service)
    monkeypatch.setattr(book, "_build_booking_service", lambda: booking_service)
    return customer_service, booking_service


def _event(body) -> dict:
    return {
        "version": "2.0",
        "routeKey": "POST /bookings",
        "rawPath": "/bookings",
        "body": body if isinstance(body, str) else json.dumps(body),
        "isBase64Encoded": False,
    }


class TestBookHandler:
    def test_created_booking_returns_201(
        self, services, request_body, lambda_context
    ):
        _, booking_service = services
        booking_service.book.return_value = CompositeBooking(
            id=CompositeBookingId("booking-1"),
            customer_id=CustomerId(1),
            hotel_id=HotelId(42),
            taxi_reservation_id=ReservationId("T-9"),
            flight_reservation_id=ReservationId("F-7"),
        )

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["status"] == "success"
        assert body["data"] == {
            "booking_id": "booking-1",
            "customer_id": 1,
            "hotel_id": 42,
            "taxi_reservation_id": "T-9",
            "flight_reservation_id": "F-7",
            "status": "CONFIRMED",
        }
        kwargs = booking_service.book.call_args.kwargs
        assert kwargs["customer_id"] == CustomerId(1)
        assert kwargs["hotel_id"] == HotelId(42)
        assert kwargs["taxi_spec"] == {"registration": "AB12CDE", "seats": 2}
        assert kwargs["flight_spec"] == {
            "flight_number": "BA100",
            "departure_location": "LON",
            "arrival_location": "NYC",
            "departure_date": "2026-03-01",
        }

    def test_invalid_body_returns_400_without_booking(
        self, services, request_body, lambda_context
    ):
        customer_service, booking_service = services
        request_body["taxi"]["seats"] = 0

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error_code"] == "VALIDATION_ERROR"
        customer_service.find.assert_not_called()
        booking_service.book.assert_not_called()

    def test_malformed_json_returns_400(self, services, lambda_context):
        response = book.lambda_handler(_event("{not json"), lambda_context)

        assert response["statusCode"] == 400

    def test_same_departure_and_arrival_returns_400(
        self, services, request_body, lambda_context
    ):
        request_body["flight"]["arrival_location"] = "LON"

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 400

    def test_unknown_customer_returns_404(
        self, services, request_body, lambda_context
    ):
        customer_service, booking_service = services
        customer_service.find.side_effect = CustomerNotFoundException(CustomerId(1))

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error_code"] == "CUSTOMER_NOT_FOUND"
        booking_service.book.assert_not_called()

    def test_unknown_hotel_returns_404(self, services, request_body, lambda_context):
        _, booking_service = services
        booking_service.book.side_effect = HotelLookupFailedException(
            cause=HotelNotFoundException(HotelId(42))
        )

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 404
        body = json.loads(response["body"])
        assert body["stage"] == "hotel"
        assert body["error_code"] == "HOTEL_LOOKUP_FAILED"

    def test_flight_failure_returns_400_with_compensation_details(
        self, services, request_body, lambda_context
    ):
        _, booking_service = services
        booking_service.book.side_effect = FlightBookingFailedException(
            cause=UpstreamRejectedException(
                Provider.FLIGHT, "no seats", status_code=409
            ),
            compensation_errors=[
                CompensationError(
                    provider=Provider.TAXI,
                    reservation_id=ReservationId("T-9"),
                    cause=UpstreamUnavailableException(Provider.TAXI, "timeout"),
                )
            ],
        )

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["stage"] == "flight"
        assert body["error_code"] == "FLIGHT_BOOKING_FAILED"
        assert body["message"] == "[flight] no seats"
        assert body["compensation_errors"] == [
            {
                "provider": "taxi",
                "reservation_id": "T-9",
                "error": "[taxi] timeout",
            }
        ]

    def test_unexpected_error_returns_500(
        self, services, request_body, lambda_context
    ):
        _, booking_service = services
        booking_service.book.side_effect = RuntimeError("boom")

        response = book.lambda_handler(_event(request_body), lambda_context)

        assert response["statusCode"] == 500
