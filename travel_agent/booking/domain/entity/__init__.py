from .composite_booking import CompositeBooking as CompositeBooking
