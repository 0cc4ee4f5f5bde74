# orders/services/exceptions.py

"""
ORDER SERVICE ERRORS

Checkout messages are part of the HTTP contract: views map a failure to 400
when its message contains a known client-error phrase (see
orders.services.checkout.is_client_error), otherwise to 500.
"""


class CheckoutError(Exception):
    """Base checkout exception"""


class EmptyCartError(CheckoutError):
    pass


class CartValidationError(CheckoutError):
    pass


class EventRequiredError(CheckoutError):
    """Raised when an event-scoped product reaches the general checkout."""


class CheckoutNotFoundError(CheckoutError):
    """Raised when a referenced company, event or plan does not exist."""


class CheckoutInventoryError(CheckoutError):
    """Raised when event inventory cannot cover a cart line."""
