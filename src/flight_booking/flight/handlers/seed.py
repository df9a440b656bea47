from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from flight_booking.flight.applications.seed_flights import SeedFlightsService
from flight_booking.flight.domain.factory import FlightDetails, FlightFactory
from flight_booking.flight.handlers.request_models import (
    FlightDetailsRequest,
    SeedFlightsRequest,
)
from flight_booking.flight.handlers.response_models import to_response
from flight_booking.flight.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from flight_booking.shared.config import Settings
from flight_booking.shared.handlers.validation import validate_payload
from flight_booking.shared.infrastructure.dynamodb_store import DynamoDBStore

logger = Logger()


# =============================================================================
# 依存関係の組み立て（Composition Root）
# =============================================================================
_service: SeedFlightsService | None = None


def _get_service() -> SeedFlightsService:
    """初回呼び出し時にストアへ接続し、以降は使い回す"""
    global _service
    if _service is None:
        store = DynamoDBStore.from_settings(Settings.from_env())
        store.verify()
        _service = SeedFlightsService(
            repository=DynamoDBFlightRepository(store), factory=FlightFactory()
        )
    return _service


# =============================================================================
# ヘルパー関数
# =============================================================================
def _to_flight_details(request: FlightDetailsRequest) -> FlightDetails:
    """リクエストボディから FlightDetails を構築する"""
    return {
        "flight_number": request.flight_number,
        "origin": request.origin,
        "destination": request.destination,
        "departure_time": request.departure_time,
        "arrival_time": request.arrival_time,
        "price": request.price,
    }


# =============================================================================
# Lambda エントリーポイント
# =============================================================================
@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """フライト初期データ投入 Lambda Handler（管理用、直接 Invoke する）"""
    logger.info("Received seed flights request")

    request = validate_payload(SeedFlightsRequest, event or {})
    flights = (
        None
        if request.flights is None
        else [_to_flight_details(f) for f in request.flights]
    )

    created = _get_service().seed(flights, replace=request.replace)
    return {"count": len(created), "flights": to_response(created)}
