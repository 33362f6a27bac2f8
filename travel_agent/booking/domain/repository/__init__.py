from .composite_booking_repository import (
    CompositeBookingRepository as CompositeBookingRepository,
)
