from .exceptions import (
    BusinessRuleViolationException,
    CancellationNotAllowedException,
    DomainException,
    DuplicateResourceException,
    NotificationFailureException,
    OptimisticLockException,
    PersistenceFailureException,
    ReferenceCollisionExhaustedException,
    ResourceNotFoundException,
    ValidationFailedException,
    Violation,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "ValidationFailedException",
    "Violation",
    "CancellationNotAllowedException",
    "ReferenceCollisionExhaustedException",
    "PersistenceFailureException",
    "NotificationFailureException",
]
