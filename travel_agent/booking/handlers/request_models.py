from datetime import date

from pydantic import BaseModel, Field, model_validator


class TaxiSpecRequest(BaseModel):
    """タクシー予約の入力スキーマ"""

    registration: str = Field(
        ...,
        min_length=1,
        max_length=10,
        description="車両登録番号",
        examples=["AB12CDE"],
    )

    seats: int = Field(..., ge=1, le=20, description="座席数", examples=[2])


class FlightSpecRequest(BaseModel):
    """フライト予約の入力スキーマ"""

    flight_number: str = Field(
        ...,
        min_length=2,
        max_length=10,
        description="フライト番号",
        examples=["BA100"],
    )

    departure_location: str = Field(
        ...,
        pattern="^[A-Z]{3}$",
        description="出発地コード",
        examples=["LON"],
    )

    arrival_location: str = Field(
        ...,
        pattern="^[A-Z]{3}$",
        description="到着地コード",
        examples=["NYC"],
    )

    departure_date: date = Field(
        ...,
        description="出発日（ISO 8601形式）",
        examples=["2026-03-01"],
    )

    @model_validator(mode="after")
    def check_locations_differ(self) -> "FlightSpecRequest":
        """出発地と到着地は異なる必要がある"""
        if self.departure_location == self.arrival_location:
            raise ValueError("Departure and arrival locations must differ")
        return self


class BookCompositeRequest(BaseModel):
    """複合予約リクエストスキーマ"""

    customer_id: int = Field(..., gt=0, description="顧客ID", examples=[1])
    hotel_id: int = Field(..., gt=0, description="ホテルID", examples=[42])
    taxi: TaxiSpecRequest
    flight: FlightSpecRequest

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": 1,
                    "hotel_id": 42,
                    "taxi": {"registration": "AB12CDE", "seats": 2},
                    "flight": {
                        "flight_number": "BA100",
                        "departure_location": "LON",
                        "arrival_location": "NYC",
                        "departure_date": "2026-03-01",
                    },
                }
            ]
        }
    }
