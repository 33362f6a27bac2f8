from .booking_stage import BookingStage as BookingStage
from .composite_booking_status import CompositeBookingStatus as CompositeBookingStatus
from .saga_state import SagaState as SagaState
