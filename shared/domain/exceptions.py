"""
Domain Exceptions

Services raise these instead of HTTP errors so they stay usable from
management commands and Celery tasks. The API layer maps each family
onto a status code.
"""


class DomainError(Exception):
    """Base class for business rule violations"""

    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(DomainError):
    default_message = "Invalid input"


class EntityNotFound(DomainError):
    default_message = "Resource not found"


class ConflictError(DomainError):
    default_message = "Conflict"
