import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "travel-agent"


def get_logger(service_name: str | None = None) -> Logger:
    """構造化ロガーを返す

    サービス名は引数、POWERTOOLS_SERVICE_NAME、既定値の順に決まる。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
