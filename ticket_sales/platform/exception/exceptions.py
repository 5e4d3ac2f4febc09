class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class PermissionDeniedError(ForbiddenError, PermissionError):
    """Raised when a non-admin account attempts an admin-only operation.

    Also a builtin PermissionError, so `except PermissionError` catches it.
    """


class EventNotFoundError(NotFoundError):
    def __init__(self, event_name: str) -> None:
        super().__init__(f'Event not found: {event_name}')
        self.event_name = event_name


class AccountNotFoundError(NotFoundError):
    def __init__(self, login: str) -> None:
        super().__init__(f'Account not found: {login}')
        self.login = login


class SeatUnavailableError(ConflictError):
    def __init__(self, event_name: str, seat: str) -> None:
        super().__init__(f'Seat {seat} is not available for event {event_name}')
        self.event_name = event_name
        self.seat = seat


class DuplicateEventError(ConflictError):
    def __init__(self, event_name: str) -> None:
        super().__init__(f'Event already registered: {event_name}')
        self.event_name = event_name


class DuplicateAccountError(ConflictError):
    def __init__(self, login: str) -> None:
        super().__init__(f'Login already taken: {login}')
        self.login = login


class PaymentDeclinedError(DomainError):
    def __init__(self, payment_name: str) -> None:
        super().__init__(f'Payment declined ({payment_name})', 402)
        self.payment_name = payment_name
