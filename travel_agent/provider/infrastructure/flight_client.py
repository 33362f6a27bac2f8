from travel_agent.provider.domain.booking_spec import FlightSpec
from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.infrastructure.http_booking_client import HttpBookingClient


class FlightClient(HttpBookingClient[FlightSpec]):
    """フライト予約 API のクライアント"""

    provider = Provider.FLIGHT
    resource_path = "/flights/bookings"
    base_url_env = "FLIGHT_API_URL"

    def _to_payload(self, spec: FlightSpec) -> dict:
        return {
            "flightNumber": spec["flight_number"],
            "departureLocation": spec["departure_location"],
            "arrivalLocation": spec["arrival_location"],
            "departureDate": spec["departure_date"],
        }
