from dataclasses import dataclass

from travel_agent.booking.domain.saga import CompensationError
from travel_agent.provider.domain.client import RemoteBookingClient
from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.domain.value_object import Reservation
from travel_agent.shared.utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Compensation:
    """成功済みの外部予約を取り消すための記録"""

    client: RemoteBookingClient
    reservation: Reservation

    @property
    def provider(self) -> Provider:
        return self.reservation.provider

    def run(self) -> None:
        self.client.cancel(self.reservation.id)


class CompensationStack:
    """補償処理のスタック

    成功した手順ごとに push し、失敗時は取得と逆順（LIFO）に drain する。
    1件の取り消しが失敗しても残りは必ず実行する。
    """

    def __init__(self) -> None:
        self._entries: list[Compensation] = []

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, client: RemoteBookingClient, reservation: Reservation) -> None:
        self._entries.append(Compensation(client=client, reservation=reservation))

    def pending(self) -> list[Compensation]:
        """実行予定の補償処理を実行順に返す"""
        return list(reversed(self._entries))

    def drain(self) -> list[CompensationError]:
        """積まれた補償処理を逆順に全て実行し、失敗したものを返す"""
        errors: list[CompensationError] = []
        while self._entries:
            # pop してから実行し、同じ補償を二度実行しない
            compensation = self._entries.pop()
            extra = {
                "provider": compensation.provider.value,
                "reservation_id": str(compensation.reservation.id),
            }
            try:
                compensation.run()
            except Exception as e:
                logger.error("Compensation failed", extra={**extra, "error": str(e)})
                errors.append(
                    CompensationError(
                        provider=compensation.provider,
                        reservation_id=compensation.reservation.id,
                        cause=e,
                    )
                )
            else:
                logger.info("Compensation succeeded", extra=extra)
        return errors
