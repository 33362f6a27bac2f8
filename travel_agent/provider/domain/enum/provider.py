from enum import Enum


class Provider(str, Enum):
    """外部予約プロバイダ"""

    TAXI = "taxi"
    FLIGHT = "flight"
