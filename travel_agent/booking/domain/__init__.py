from .entity import CompositeBooking as CompositeBooking
from .enum import BookingStage as BookingStage
from .enum import CompositeBookingStatus as CompositeBookingStatus
from .enum import SagaState as SagaState
from .exception import BookingFailedException as BookingFailedException
from .exception import (
    FlightBookingFailedException as FlightBookingFailedException,
)
from .exception import HotelLookupFailedException as HotelLookupFailedException
from .exception import PersistenceFailedException as PersistenceFailedException
from .exception import TaxiBookingFailedException as TaxiBookingFailedException
from .factory import CompositeBookingFactory as CompositeBookingFactory
from .repository import CompositeBookingRepository as CompositeBookingRepository
from .saga import BookingAttempt as BookingAttempt
from .saga import CompensationError as CompensationError
from .value_object import CompositeBookingId as CompositeBookingId
