from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from flight_booking.booking.applications.create_booking import CreateBookingService
from flight_booking.booking.applications.list_bookings import ListBookingsService
from flight_booking.booking.handlers.request_models import CreateBookingRequest
from flight_booking.booking.handlers.response_models import (
    to_list_response,
    to_response,
)
from flight_booking.shared.handlers.http_response import api_response
from flight_booking.shared.handlers.validation import parse_body, validate_payload

logger = Logger(child=True)

router = Router()


@router.post("/bookings")
def create_booking() -> Response:
    """予約作成"""
    service: CreateBookingService = router.context["create_booking"]

    request = validate_payload(CreateBookingRequest, parse_body(router.current_event))
    logger.info(
        "Creating booking",
        extra={"flight_id": request.flight_id, "passenger_id": request.passenger_id},
    )

    view = service.create(
        flight_id=request.flight_id,
        passenger_id=request.passenger_id,
        seat_number=request.seat_number,
    )
    return api_response(201, to_response(view))


@router.get("/bookings")
def list_bookings() -> Response:
    """予約一覧（作成日時の降順）"""
    service: ListBookingsService = router.context["list_bookings"]

    logger.info("Listing bookings")
    views = service.list()
    return api_response(200, to_list_response(views))
