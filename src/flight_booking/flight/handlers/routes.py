from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from flight_booking.flight.applications.list_flights import ListFlightsService
from flight_booking.flight.handlers.response_models import to_response
from flight_booking.shared.handlers.http_response import api_response

logger = Logger(child=True)

router = Router()


@router.get("/flights")
def list_flights() -> Response:
    """フライト一覧（出発時刻の昇順）"""
    service: ListFlightsService = router.context["list_flights"]

    logger.info("Listing flights")
    flights = service.list()
    return api_response(200, to_response(flights))
