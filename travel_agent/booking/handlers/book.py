from functools import lru_cache

from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from travel_agent.booking.applications.book_composite import BookCompositeService
from travel_agent.booking.domain.exception import BookingFailedException
from travel_agent.booking.domain.factory import CompositeBookingFactory
from travel_agent.booking.handlers.request_models import (
    BookCompositeRequest,
    FlightSpecRequest,
    TaxiSpecRequest,
)
from travel_agent.booking.handlers.response_models import (
    error_response,
    to_failure_response,
    to_response,
)
from travel_agent.booking.infrastructure.dynamodb_composite_booking_repository import (
    DynamoDBCompositeBookingRepository,
)
from travel_agent.customer.applications.find_customer import FindCustomerService
from travel_agent.customer.domain.exception import CustomerNotFoundException
from travel_agent.customer.domain.value_object import CustomerId
from travel_agent.customer.infrastructure.dynamodb_customer_repository import (
    DynamoDBCustomerRepository,
)
from travel_agent.hotel.applications.find_hotel import FindHotelService
from travel_agent.hotel.domain.value_object import HotelId
from travel_agent.hotel.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from travel_agent.provider.domain.booking_spec import FlightSpec, TaxiSpec
from travel_agent.provider.infrastructure.flight_client import FlightClient
from travel_agent.provider.infrastructure.taxi_client import TaxiClient
from travel_agent.shared.domain import ResourceNotFoundException
from travel_agent.shared.utils import api_response, get_logger

logger = get_logger()


@lru_cache(maxsize=1)
def _build_customer_service() -> FindCustomerService:
    return FindCustomerService(repository=DynamoDBCustomerRepository())


@lru_cache(maxsize=1)
def _build_booking_service() -> BookCompositeService:
    return BookCompositeService(
        hotel_lookup=FindHotelService(repository=DynamoDBHotelRepository()),
        taxi_client=TaxiClient(),
        flight_client=FlightClient(),
        repository=DynamoDBCompositeBookingRepository(),
        factory=CompositeBookingFactory(),
    )


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """複合予約 Lambda Handler

    リクエストを検証し、顧客を確認してから Saga を実行する。
    成功は 201、見つからないリソースは 404、予約失敗は 400 を返す。
    """
    logger.info("Received composite booking request")

    try:
        request = BookCompositeRequest.model_validate_json(event.body or "")
    except ValidationError as e:
        logger.info("Invalid composite booking request")
        return api_response(
            400,
            error_response(
                "VALIDATION_ERROR",
                "Invalid request body",
                details=e.errors(include_url=False, include_context=False),
            ),
        )

    customer_id = CustomerId(value=request.customer_id)
    hotel_id = HotelId(value=request.hotel_id)

    try:
        _build_customer_service().find(customer_id)
        booking = _build_booking_service().book(
            customer_id=customer_id,
            hotel_id=hotel_id,
            taxi_spec=_to_taxi_spec(request.taxi),
            flight_spec=_to_flight_spec(request.flight),
        )
    except CustomerNotFoundException as e:
        return api_response(404, error_response("CUSTOMER_NOT_FOUND", str(e)))
    except BookingFailedException as e:
        status_code = 404 if isinstance(e.cause, ResourceNotFoundException) else 400
        return api_response(status_code, to_failure_response(e))
    except Exception:
        logger.exception("Failed to create composite booking")
        return api_response(
            500, error_response("INTERNAL_ERROR", "Internal server error")
        )

    logger.info("Composite booking created", extra={"booking_id": str(booking.id)})
    return api_response(201, to_response(booking))


def _to_taxi_spec(request: TaxiSpecRequest) -> TaxiSpec:
    """リクエストボディから TaxiSpec を構築する"""
    return {
        "registration": request.registration,
        "seats": request.seats,
    }


def _to_flight_spec(request: FlightSpecRequest) -> FlightSpec:
    """リクエストボディから FlightSpec を構築する"""
    return {
        "flight_number": request.flight_number,
        "departure_location": request.departure_location,
        "arrival_location": request.arrival_location,
        "departure_date": request.departure_date.isoformat(),
    }
