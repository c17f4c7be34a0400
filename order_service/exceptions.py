"""
exceptions.py — Error Taxonomy of the Order Service

All errors raised by the service layer derive from OrderServiceError so the
HTTP layer can map them to responses in one place.

    - InvalidOrderError: caller input is missing or incomplete (client error).
    - DuplicateOrderError: an equal order is already persisted (client error).
    - StorageFailureError: the order store could not complete a request (server error).
"""


class OrderServiceError(Exception):
    """Base class for all order service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidOrderError(OrderServiceError):
    pass


class DuplicateOrderError(OrderServiceError):
    pass


class StorageFailureError(OrderServiceError):
    pass
