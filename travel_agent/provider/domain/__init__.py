from .booking_spec import FlightSpec as FlightSpec
from .booking_spec import TaxiSpec as TaxiSpec
from .client import RemoteBookingClient as RemoteBookingClient
from .enum import Provider as Provider
from .exception import (
    ReservationNotFoundException as ReservationNotFoundException,
)
from .exception import (
    UpstreamException as UpstreamException,
)
from .exception import (
    UpstreamRejectedException as UpstreamRejectedException,
)
from .exception import (
    UpstreamTimeoutException as UpstreamTimeoutException,
)
from .exception import (
    UpstreamUnavailableException as UpstreamUnavailableException,
)
from .value_object import Reservation as Reservation
from .value_object import ReservationId as ReservationId
