"""Error taxonomy for catalog and stock operations.

Each error carries the HTTP status it maps to so routers can translate a
failed result without inspecting messages.
"""


class ProvisioningError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProvisioningError):
    """Missing or malformed input; nothing was written."""

    status_code = 400


class ConflictError(ProvisioningError):
    """A product with the same SKU already exists in scope."""

    status_code = 409


class NotFoundError(ProvisioningError):
    status_code = 404


class PersistenceError(ProvisioningError):
    """Storage failure. The public message never includes driver detail."""

    status_code = 500

    def __init__(self, message: str = "Product creation failed"):
        super().__init__(message)


__all__ = [
    "ConflictError",
    "NotFoundError",
    "PersistenceError",
    "ProvisioningError",
    "ValidationError",
]
