from .composite_booking_id import CompositeBookingId as CompositeBookingId
