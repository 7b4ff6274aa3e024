"""Product API errors.

Raised by the operation layer and the request dependencies. The error
handlers in app.middleware translate them into JSON responses.
"""


class ProductAPIError(Exception):
    """Base class for errors that map to a JSON error response."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ProductAPIError):
    """The request body or query string has the wrong shape."""

    status_code = 400
    default_message = "Invalid request"


class AuthError(ProductAPIError):
    """The auth gate denied the request."""

    status_code = 401
    default_message = "Unauthorized"


class NotFoundError(ProductAPIError):
    """No product with the requested id."""

    status_code = 404
    default_message = "Product not found"
