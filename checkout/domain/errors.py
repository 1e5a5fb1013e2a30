"""Domain errors raised by the services and mapped to HTTP responses in checkout.api.errors."""


class DomainError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(DomainError):
    """Missing required identifier or body field."""

    def __init__(self, message: str):
        super().__init__(message, 400)


class NotFoundError(DomainError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class AmbiguousStateError(DomainError):
    """More than one cart row matches a single session id."""

    def __init__(self, session_id: str, count: int):
        super().__init__(f"Too many carts ({count}) for session {session_id}. Please clear cookies.", 409)
        self.session_id = session_id
        self.count = count


class CartLockedError(DomainError):
    def __init__(self, cart_id: int):
        super().__init__(f"Cart {cart_id} is being modified by another request", 409)
        self.cart_id = cart_id


class StoreFailureError(DomainError):
    """Underlying store failure; the driver message is passed through."""

    def __init__(self, message: str):
        super().__init__(message, 503)
