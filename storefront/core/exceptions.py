# storefront/core/exceptions.py


class ClientError(Exception):
    """Base for errors caused by the request, rendered as ``{"error": message}``."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(ClientError):
    """Malformed or missing fields. Never mutates state."""

    status_code = 400


class NotFound(ClientError):
    """Referenced product or cart does not exist."""

    status_code = 404


class InvalidState(ClientError):
    """Operation requested against a session without an orderable cart."""

    status_code = 400


class CartAlreadyOrdered(InvalidState):
    """The bound cart was already turned into an order; its binding is stale."""

    def __init__(self, message: str = "order already placed"):
        super().__init__(message)


class SessionLockTimeout(RuntimeError):
    pass
