from .exceptions import BookingFailedException as BookingFailedException
from .exceptions import (
    FlightBookingFailedException as FlightBookingFailedException,
)
from .exceptions import HotelLookupFailedException as HotelLookupFailedException
from .exceptions import PersistenceFailedException as PersistenceFailedException
from .exceptions import TaxiBookingFailedException as TaxiBookingFailedException
