from travel_agent.provider.domain.booking_spec import TaxiSpec
from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.infrastructure.http_booking_client import HttpBookingClient


class TaxiClient(HttpBookingClient[TaxiSpec]):
    """タクシー予約 API のクライアント"""

    provider = Provider.TAXI
    resource_path = "/taxis/bookings"
    base_url_env = "TAXI_API_URL"

    def _to_payload(self, spec: TaxiSpec) -> dict:
        return {
            "registration": spec["registration"],
            "numberOfSeats": spec["seats"],
        }
