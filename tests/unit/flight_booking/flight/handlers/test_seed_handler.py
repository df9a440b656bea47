from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from flight_booking.flight.handlers import seed


@dataclass
class _LambdaContext:
    function_name: str = "seed-flights"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:seed-flights"
    aws_request_id: str = "request-id"
    tenant_id: str | None = None


@pytest.fixture
def service(monkeypatch, create_flight):
    mock_service = MagicMock()
    mock_service.seed.return_value = [create_flight()]
    monkeypatch.setattr(seed, "_service", mock_service)
    return mock_service


class TestSeedHandler:
    """フライト初期データ投入 Lambda Handler のテスト"""

    def test_seed_default_flights(self, service):
        result = seed.lambda_handler({}, _LambdaContext())

        assert result["count"] == 1
        assert result["flights"][0]["flight_number"] == "AA101"
        service.seed.assert_called_once_with(None, replace=True)

    def test_seed_given_flights(self, service):
        event = {
            "replace": False,
            "flights": [
                {
                    "flight_number": "ua202",
                    "origin": "Vancouver Intl (YVR)",
                    "destination": "Los Angeles Intl (LAX)",
                    "departure_time": "2025-07-15T09:30:00Z",
                    "arrival_time": "2025-07-15T12:15:00Z",
                    "price": 350.00,
                }
            ],
        }

        seed.lambda_handler(event, _LambdaContext())

        flights, = service.seed.call_args.args
        assert flights[0]["flight_number"] == "UA202"
        assert service.seed.call_args.kwargs == {"replace": False}
