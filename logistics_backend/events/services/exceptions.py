# events/services/exceptions.py

"""
INVENTORY SERVICE ERRORS
"""


class InventoryError(Exception):
    """Base exception for event inventory failures."""


class InventoryUnavailableError(InventoryError):
    """Raised when a counter cannot cover the requested quantity."""


class InventoryCounterMissingError(InventoryError):
    """Raised when no counter row exists for (event, product)."""


class InventoryReferenceError(InventoryError):
    """Raised when an item lacks the reference its product type needs."""
