"""Domain semantic exceptions."""


class RouteEstimateError(Exception):
    """Base route estimation error; the message is safe to show to users."""

    code = "ROUTE_ESTIMATE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(RouteEstimateError):
    """Raised when an address is missing or blank."""

    code = "INVALID_INPUT"


class DuplicateAddressError(RouteEstimateError):
    """Raised when origin and destination normalize to the same address."""

    code = "DUPLICATE_ADDRESS"


class TransientServiceError(RouteEstimateError):
    """Simulated upstream failure; the same request may succeed on retry."""

    code = "TRANSIENT_FAILURE"
