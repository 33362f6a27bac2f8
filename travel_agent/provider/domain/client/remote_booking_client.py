from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from travel_agent.provider.domain.enum import Provider
from travel_agent.provider.domain.value_object import Reservation, ReservationId

S = TypeVar("S")


class RemoteBookingClient(ABC, Generic[S]):
    """外部予約プロバイダのクライアントインターフェース

    Domain 層で定義し、HTTP などの具象実装は Infrastructure 層で行う。
    テストではインメモリ実装に差し替える。
    """

    provider: Provider

    @abstractmethod
    def book(self, spec: S) -> Reservation:
        """予約を作成する

        Raises:
            UpstreamRejectedException: プロバイダが予約を拒否した
            UpstreamUnavailableException: ネットワークエラー
            UpstreamTimeoutException: 時間内に応答がなかった
        """
        raise NotImplementedError

    @abstractmethod
    def cancel(self, reservation_id: ReservationId) -> None:
        """予約を取り消す（補償トランザクション用）

        Raises:
            ReservationNotFoundException: 予約が存在しない
            UpstreamUnavailableException: プロバイダに到達できない
        """
        raise NotImplementedError
