from enum import Enum


class SagaState(str, Enum):
    """1回の予約試行の状態"""

    INIT = "INIT"
    HOTEL_VALIDATED = "HOTEL_VALIDATED"
    TAXI_BOOKED = "TAXI_BOOKED"
    FLIGHT_BOOKED = "FLIGHT_BOOKED"
    PERSISTED = "PERSISTED"
    COMPENSATING = "COMPENSATING"
    FAILED = "FAILED"
