from typing import TypedDict


class TaxiSpec(TypedDict):
    """タクシー予約の入力データ構造

    オーケストレーターは中身を解釈せず、そのままクライアントへ渡す。
    """

    registration: str
    seats: int


class FlightSpec(TypedDict):
    """フライト予約の入力データ構造"""

    flight_number: str
    departure_location: str
    arrival_location: str
    departure_date: str
