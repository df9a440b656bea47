from .entity import Entity
from .exception import (
    BusinessRuleViolationException,
    ConfigurationException,
    DomainException,
    DuplicateResourceException,
    InvalidIdentifierException,
    MissingReferenceException,
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)
from .repository import Repository
from .value_object import EntityId, IsoDateTime, Price

__all__ = [
    "Entity",
    "Repository",
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "MissingReferenceException",
    "InvalidIdentifierException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "StoreException",
    "ConfigurationException",
    "EntityId",
    "IsoDateTime",
    "Price",
]
