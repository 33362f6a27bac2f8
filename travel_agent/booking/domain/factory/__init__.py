from .composite_booking_factory import (
    CompositeBookingFactory as CompositeBookingFactory,
)
