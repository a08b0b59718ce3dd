"""
Common Error Constants and Cart Exceptions

Centralized error messages to avoid string duplication.
"""

# Cart errors
ERROR_CART_CORRUPT = "Stored cart is corrupted"
ERROR_CART_NOT_ARRAY = "Cart blob must be a JSON array"
ERROR_CART_ITEM_NOT_OBJECT = "Cart entry must be a JSON object"
ERROR_CART_DUPLICATE_ID = "Cart contains duplicate item id"
ERROR_CART_BAD_QUANTITY = "Cart item quantity must be a positive integer"
ERROR_CART_BAD_PRICE = "Cart item price must be a finite, non-negative number"

# Input errors
ERROR_INVALID_ITEM_ID = "id must be an integer"
ERROR_INVALID_ITEM_NAME = "name must be a string"
ERROR_INVALID_ITEM_PRICE = "price must be a non-negative number"

# Generic errors
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_INTERNAL = "Internal server error"


class CartError(Exception):
    """Base class for cart failures."""


class CorruptCartState(CartError):
    """The session held a cart blob that could not be decoded.

    The original decoding error, if any, is chained as ``__cause__``.
    """

    def __init__(self, reason: str = ERROR_CART_CORRUPT):
        super().__init__(reason)
        self.reason = reason


class InvalidCartItem(CartError, ValueError):
    """Caller passed an id/name/price the cart cannot hold."""
