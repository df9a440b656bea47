from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.booking.applications.create_booking import CreateBookingService
from flight_booking.booking.applications.list_bookings import ListBookingsService
from flight_booking.booking.domain.factory import BookingFactory
from flight_booking.booking.handlers import routes as booking_routes
from flight_booking.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from flight_booking.flight.applications.list_flights import ListFlightsService
from flight_booking.flight.handlers import routes as flight_routes
from flight_booking.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from flight_booking.passenger.applications.register_passenger import (
    RegisterPassengerService,
)
from flight_booking.passenger.domain.factory import PassengerFactory
from flight_booking.passenger.handlers import routes as passenger_routes
from flight_booking.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from flight_booking.shared.config import Settings
from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    InvalidIdentifierException,
    MissingReferenceException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)
from flight_booking.shared.handlers.http_response import api_response, error_response
from flight_booking.shared.infrastructure.dynamodb_store import DynamoDBStore

logger = Logger()

app = APIGatewayHttpResolver()
app.include_router(flight_routes.router)
app.include_router(passenger_routes.router)
app.include_router(booking_routes.router)


# =============================================================================
# 依存関係の組み立て（Composition Root）
# =============================================================================
_services: dict | None = None


def build_services(store: DynamoDBStore) -> dict:
    """ストアハンドルから各ユースケースのサービスを組み立てる"""
    flights = DynamoDBFlightRepository(store)
    passengers = DynamoDBPassengerRepository(store)
    bookings = DynamoDBBookingRepository(store)

    return {
        "list_flights": ListFlightsService(repository=flights),
        "register_passenger": RegisterPassengerService(
            repository=passengers, factory=PassengerFactory()
        ),
        "create_booking": CreateBookingService(
            booking_repository=bookings,
            flight_repository=flights,
            passenger_repository=passengers,
            factory=BookingFactory(),
        ),
        "list_bookings": ListBookingsService(
            booking_repository=bookings,
            flight_repository=flights,
            passenger_repository=passengers,
        ),
    }


def _get_services() -> dict:
    """実行環境ごとに1度だけストアへ接続する

    TABLE_NAME 未設定やテーブルに到達できない場合は例外がそのまま送出され、
    リクエストは処理されない。
    """
    global _services
    if _services is None:
        store = DynamoDBStore.from_settings(Settings.from_env())
        store.verify()
        _services = build_services(store)
    return _services


# =============================================================================
# ルート
# =============================================================================
@app.get("/")
def index() -> Response:
    return api_response(200, {"message": "Flight Booking API is running."})


# =============================================================================
# エラーハンドリング（ドメイン例外 → HTTP ステータス）
# =============================================================================
@app.not_found
def handle_not_found(ex: NotFoundError) -> Response:
    path = app.current_event.path
    logger.warning("Route not found", extra={"path": path})
    return error_response(404, f"Not Found - {path}")


@app.exception_handler(ValidationException)
def handle_validation_error(ex: ValidationException) -> Response:
    logger.warning("Validation failed", extra={"errors": ex.errors})
    return error_response(400, ex.message, ex.errors)


@app.exception_handler(BusinessRuleViolationException)
def handle_business_rule_violation(ex: BusinessRuleViolationException) -> Response:
    logger.warning("Business rule violated", extra={"reason": str(ex)})
    return error_response(400, "Validation Error", [str(ex)])


@app.exception_handler(MissingReferenceException)
def handle_missing_reference(ex: MissingReferenceException) -> Response:
    logger.warning("Missing reference", extra={"reason": str(ex)})
    return error_response(400, str(ex))


@app.exception_handler(InvalidIdentifierException)
def handle_invalid_identifier(ex: InvalidIdentifierException) -> Response:
    logger.warning(
        "Invalid identifier", extra={"field": ex.field, "identifier": ex.value}
    )
    return error_response(400, str(ex))


@app.exception_handler(ResourceNotFoundException)
def handle_reference_not_found(ex: ResourceNotFoundException) -> Response:
    logger.warning("Referenced resource not found", extra={"reason": str(ex)})
    return error_response(404, str(ex))


@app.exception_handler(DuplicateResourceException)
def handle_duplicate(ex: DuplicateResourceException) -> Response:
    logger.warning("Duplicate resource", extra={"reason": str(ex)})
    return error_response(409, str(ex))


@app.exception_handler(StoreException)
def handle_store_error(ex: StoreException) -> Response:
    logger.exception("Store operation failed")
    return error_response(500, str(ex))


@app.exception_handler(Exception)
def handle_unexpected_error(ex: Exception) -> Response:
    logger.exception("Unhandled error")
    return error_response(500, "Something went wrong on the server!")


# =============================================================================
# Lambda エントリーポイント
# =============================================================================
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_HTTP)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """Flight Booking API Lambda Handler（API Gateway HTTP API プロキシ統合）"""
    app.append_context(**_get_services())
    return app.resolve(event, context)
