from .entity_id import EntityId
from .iso_date_time import IsoDateTime
from .price import Price

__all__ = ["EntityId", "IsoDateTime", "Price"]
