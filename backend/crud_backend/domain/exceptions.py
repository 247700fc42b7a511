"""Domain-specific exceptions — framework-independent.

Every exception carries the HTTP status it maps to and the message that is
safe to show a client. Store failures keep their underlying cause on
``__cause__`` for server-side logging only.
"""


class CrudError(Exception):
    """Base class for all errors raised by the CRUD layers."""

    http_status: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def client_message(self) -> str:
        return self.message


class InvalidInputError(CrudError):
    """Raised for a malformed path parameter or request body."""

    http_status = 400


class AuthenticationError(CrudError):
    """Raised when the bearer-token gate rejects a request."""

    http_status = 401


class EntityNotFoundError(CrudError):
    """Raised when a requested entity does not exist."""

    http_status = 404

    def __init__(self, entity_type: str, entity_id: int | str | tuple[int, ...]):
        self.entity_type = entity_type
        if isinstance(entity_id, tuple):
            entity_id = "/".join(str(part) for part in entity_id)
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")

    @property
    def client_message(self) -> str:
        return f"{self.entity_type} not found"


class StoreError(CrudError):
    """Raised when the relational store rejects or fails an operation.

    The message returned to clients is generic; the original exception is
    chained and logged by the error handler.
    """

    http_status = 500

    def __init__(self, operation: str, entity_type: str):
        self.operation = operation
        self.entity_type = entity_type
        super().__init__(f"Failed to {operation} {entity_type}")
