from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerId:
    """顧客ID"""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"CustomerId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
