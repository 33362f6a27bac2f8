from dataclasses import dataclass

from travel_agent.provider.domain.enum import Provider


@dataclass(frozen=True)
class ReservationId:
    """プロバイダが払い出す予約ID（中身は不透明）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("ReservationId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Reservation:
    """外部プロバイダでの予約結果"""

    provider: Provider
    id: ReservationId
