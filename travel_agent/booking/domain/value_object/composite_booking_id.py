from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class CompositeBookingId:
    """複合予約ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("CompositeBookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> CompositeBookingId:
        """新しい ID を払い出す

        同一内容のリクエストでも毎回別の ID になる（重複排除はしない）。
        """
        return cls(value=str(uuid.uuid4()))
