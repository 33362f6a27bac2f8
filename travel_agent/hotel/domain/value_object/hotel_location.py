from dataclasses import dataclass


@dataclass(frozen=True)
class HotelLocation:
    """ホテルの所在地"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Hotel location cannot be empty")
        if len(self.value) > 50:
            raise ValueError("Hotel location is too long (max 50 characters)")

    def __str__(self) -> str:
        return self.value
