from pydantic import BaseModel

from travel_agent.booking.domain.entity import CompositeBooking
from travel_agent.booking.domain.exception import BookingFailedException


class CompositeBookingData(BaseModel):
    """複合予約データのレスポンスモデル"""

    booking_id: str
    customer_id: int
    hotel_id: int
    taxi_reservation_id: str
    flight_reservation_id: str
    status: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: CompositeBookingData


class CompensationErrorData(BaseModel):
    """失敗した補償処理のレスポンスモデル"""

    provider: str
    reservation_id: str
    error: str


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    stage: str | None = None
    compensation_errors: list[CompensationErrorData] | None = None
    details: list | None = None


def to_response(booking: CompositeBooking) -> dict:
    """CompositeBooking エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        data=CompositeBookingData(**booking.to_dict())
    ).model_dump()


def to_failure_response(failure: BookingFailedException) -> dict:
    """BookingFailedException をレスポンス辞書に変換する"""
    return ErrorResponse(
        error_code=failure.error_code,
        message=str(failure.cause),
        stage=failure.stage.value,
        compensation_errors=[
            CompensationErrorData(**error.to_dict())
            for error in failure.compensation_errors
        ],
    ).model_dump(exclude_none=True)


def error_response(
    error_code: str, message: str, details: list | None = None
) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)
