from .exceptions import (
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

__all__ = [
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "MissingReferenceException",
    "InvalidIdentifierException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "StoreException",
    "ConfigurationException",
]
