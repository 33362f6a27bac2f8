from dataclasses import dataclass

from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.domain.value_object import ReservationId


@dataclass(frozen=True)
class CompensationError:
    """失敗した補償処理の記録（診断情報としてのみ扱う）"""

    provider: Provider
    reservation_id: ReservationId
    cause: Exception

    def to_dict(self) -> dict:
        return {
            "provider": self.provider.value,
            "reservation_id": str(self.reservation_id),
            "error": str(self.cause),
        }
