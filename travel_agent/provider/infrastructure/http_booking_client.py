import os
from abc import abstractmethod
from typing import TypeVar

import requests

from travel_agent.provider.domain.client import RemoteBookingClient
from travel_agent.provider.domain.exception import (
    ReservationNotFoundException,
    UpstreamRejectedException,
    UpstreamTimeoutException,
    UpstreamUnavailableException,
)
from travel_agent.provider.domain.value_object import Reservation, ReservationId

S = TypeVar("S")

DEFAULT_TIMEOUT_SECONDS = 5.0


class HttpBookingClient(RemoteBookingClient[S]):
    """REST API を使用した RemoteBookingClient の共通実装

    - POST {base_url}{resource_path} で予約を作成
    - DELETE {base_url}{resource_path}/{id} で予約を取り消す
    - requests の例外はドメイン例外に変換する
    """

    resource_path: str
    base_url_env: str

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        base_url = base_url or os.getenv(self.base_url_env)
        if not base_url:
            raise ValueError(f"{self.base_url_env} is not configured")
        self.base_url = base_url.rstrip("/")
        if timeout is None:
            timeout = float(
                os.getenv("REMOTE_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            )
        self.timeout = timeout
        self.session = session or requests.Session()

    @abstractmethod
    def _to_payload(self, spec: S) -> dict:
        """入力データをプロバイダの API 形式に変換する"""
        raise NotImplementedError

    def book(self, spec: S) -> Reservation:
        """予約を作成する"""
        url = f"{self.base_url}{self.resource_path}"
        try:
            response = self.session.post(
                url, json=self._to_payload(spec), timeout=self.timeout
            )
        except requests.Timeout as e:
            raise UpstreamTimeoutException(
                self.provider, f"No response within {self.timeout}s: POST {url}"
            ) from e
        except requests.RequestException as e:
            raise UpstreamUnavailableException(self.provider, str(e)) from e

        if not _is_success(response):
            raise UpstreamRejectedException(
                self.provider,
                f"Booking rejected with status {response.status_code}: "
                f"{response.text}",
                status_code=response.status_code,
            )

        reservation_id = _read_reservation_id(response)
        if not reservation_id:
            raise UpstreamRejectedException(
                self.provider,
                "Booking response did not contain a reservation id",
                status_code=response.status_code,
            )
        return Reservation(provider=self.provider, id=ReservationId(reservation_id))

    def cancel(self, reservation_id: ReservationId) -> None:
        """予約を取り消す"""
        url = f"{self.base_url}{self.resource_path}/{reservation_id}"
        try:
            response = self.session.delete(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamUnavailableException(self.provider, str(e)) from e

        if response.status_code == 404:
            raise ReservationNotFoundException(
                self.provider, f"Reservation not found: {reservation_id}"
            )
        if not _is_success(response):
            raise UpstreamUnavailableException(
                self.provider,
                f"Cancel of {reservation_id} failed with status "
                f"{response.status_code}",
            )


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


def _read_reservation_id(response: requests.Response) -> str | None:
    """レスポンスから予約IDを取り出す

    本文は ID そのもの（数値・文字列）か、"id" を持つオブジェクトのどちらか。
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or None

    if isinstance(body, dict):
        body = body.get("id")
    if body is None or isinstance(body, (bool, list, dict)):
        return None
    return str(body)
