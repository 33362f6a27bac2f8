from enum import Enum


class CompositeBookingStatus(str, Enum):
    """複合予約ステータス"""

    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"
