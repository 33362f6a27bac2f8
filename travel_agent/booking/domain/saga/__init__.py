from .booking_attempt import BookingAttempt as BookingAttempt
from .compensation_error import CompensationError as CompensationError
