from enum import Enum


class BookingStage(str, Enum):
    """複合予約の処理段階（失敗時にどこで止まったかを示す）"""

    HOTEL = "hotel"
    TAXI = "taxi"
    FLIGHT = "flight"
    PERSISTENCE = "persistence"
