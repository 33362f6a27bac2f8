from dataclasses import dataclass


@dataclass(frozen=True)
class HotelId:
    """ホテルID"""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"HotelId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
