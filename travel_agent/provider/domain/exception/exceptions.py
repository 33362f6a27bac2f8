from travel_agent.provider.domain.enum import Provider
from travel_agent.shared.domain import DomainException


class UpstreamException(DomainException):
    """外部プロバイダ呼び出しの基底例外"""

    def __init__(self, provider: Provider, message: str) -> None:
        super().__init__(f"[{provider.value}] {message}")
        self.provider = provider


class UpstreamUnavailableException(UpstreamException):
    """ネットワークエラーなどでプロバイダに到達できない場合"""

    pass


class UpstreamTimeoutException(UpstreamException):
    """制限時間内にプロバイダから応答がなかった場合"""

    pass


class UpstreamRejectedException(UpstreamException):
    """プロバイダが 2xx 以外を返した場合"""

    def __init__(
        self, provider: Provider, message: str, status_code: int | None = None
    ) -> None:
        super().__init__(provider, message)
        self.status_code = status_code


class ReservationNotFoundException(UpstreamException):
    """取り消し対象の予約がプロバイダに存在しない場合"""

    pass
