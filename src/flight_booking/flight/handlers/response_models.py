from pydantic import BaseModel, ConfigDict, Field

from flight_booking.flight.domain.entity import Flight


class FlightData(BaseModel):
    """フライトのレスポンスモデル"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    flight_number: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    price: float
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class FlightSummary(BaseModel):
    """予約一覧に埋め込むフライト概要"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    flight_number: str
    origin: str
    destination: str
    departure_time: str


def to_flight_data(flight: Flight) -> FlightData:
    """Flight エンティティをレスポンスモデルに変換する"""
    return FlightData(
        id=str(flight.id),
        flight_number=str(flight.flight_number),
        origin=flight.origin,
        destination=flight.destination,
        departure_time=str(flight.departure_time),
        arrival_time=str(flight.arrival_time),
        price=float(flight.price),
        created_at=str(flight.created_at),
        updated_at=str(flight.updated_at),
    )


def to_flight_summary(flight: Flight) -> FlightSummary:
    """Flight エンティティを概要モデルに変換する"""
    return FlightSummary(
        id=str(flight.id),
        flight_number=str(flight.flight_number),
        origin=flight.origin,
        destination=flight.destination,
        departure_time=str(flight.departure_time),
    )


def to_response(flights: list[Flight]) -> list[dict]:
    """フライト一覧をレスポンス配列に変換する"""
    return [
        to_flight_data(flight).model_dump(mode="json", by_alias=True)
        for flight in flights
    ]
