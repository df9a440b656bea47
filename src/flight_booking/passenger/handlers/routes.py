from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.event_handler.api_gateway import Router

from flight_booking.passenger.applications.register_passenger import (
    RegisterPassengerService,
)
from flight_booking.passenger.domain.factory import PassengerDetails
from flight_booking.passenger.handlers.request_models import RegisterPassengerRequest
from flight_booking.passenger.handlers.response_models import to_response
from flight_booking.shared.handlers.http_response import api_response
from flight_booking.shared.handlers.validation import parse_body, validate_payload

logger = Logger(child=True)

router = Router()


@router.post("/passengers")
def register_passenger() -> Response:
    """搭乗者登録"""
    service: RegisterPassengerService = router.context["register_passenger"]

    request = validate_payload(
        RegisterPassengerRequest, parse_body(router.current_event)
    )
    logger.info("Registering passenger", extra={"email": request.email})

    details: PassengerDetails = {
        "full_name": request.full_name,
        "email": request.email,
        "phone": request.phone,
    }
    passenger = service.register(details)
    return api_response(201, to_response(passenger))
