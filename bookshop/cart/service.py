"""Cart store over a visitor's session."""
from typing import List, Optional

from bookshop.config import CART_SESSION_KEY
from bookshop.errors import (
    CorruptCartState,
    InvalidCartItem,
    ERROR_INVALID_ITEM_ID,
    ERROR_INVALID_ITEM_NAME,
    ERROR_INVALID_ITEM_PRICE,
)
from bookshop.logging import get_logger, summarize_blob
from bookshop.services.money import is_number, to_decimal
from .models import Cart, CartItem
from .serializer import JsonCartSerializer, Serializer
from .storage import SessionStore

logger = get_logger(__name__)


def _validate_item_id(item_id) -> None:
    if not isinstance(item_id, int) or isinstance(item_id, bool):
        raise InvalidCartItem(ERROR_INVALID_ITEM_ID)


class CartStore:
    """
    Manages one visitor's cart held in session storage.

    Nothing is cached between calls: every operation loads the blob,
    applies one change and writes the result back. Concurrent requests on
    the same session race and the last write wins.
    """

    def __init__(
        self,
        session: SessionStore,
        serializer: Optional[Serializer] = None,
        key: str = CART_SESSION_KEY,
    ):
        self.session = session
        self.serializer = serializer or JsonCartSerializer()
        self.key = key

    def load(self) -> Cart:
        """Read the cart; a missing entry is an empty cart.

        Raises:
            CorruptCartState: the stored blob could not be decoded.
        """
        data = self.session.get(self.key)
        if data is None:
            return Cart()

        try:
            return Cart(items=self.serializer.decode(data))
        except CorruptCartState as e:
            logger.warning(f"Corrupted cart blob under {self.key!r}: {e.reason} ({summarize_blob(data)})")
            raise

    def save(self, cart: Cart) -> None:
        self.session.set(self.key, self.serializer.encode(cart.items))

    def get_for_display(self) -> List[CartItem]:
        """Cart lines in insertion order, for rendering."""
        return list(self.load().items)

    def add(self, item_id: int, name: str, price) -> None:
        """Add one unit; an existing line keeps its original name and price."""
        _validate_item_id(item_id)
        if not isinstance(name, str):
            raise InvalidCartItem(ERROR_INVALID_ITEM_NAME)
        if not is_number(price) or not to_decimal(price).is_finite() or to_decimal(price) < 0:
            raise InvalidCartItem(ERROR_INVALID_ITEM_PRICE)

        cart = self.load()
        item = cart.add(item_id, name, price)
        self.save(cart)
        logger.debug(f"Cart add id={item_id} quantity={item.quantity} lines={len(cart)}")

    def remove_one(self, item_id: int) -> None:
        """Take one unit out.

        The cart is written back even when ``item_id`` is not present, so
        every call performs exactly one write.
        """
        _validate_item_id(item_id)

        cart = self.load()
        item = cart.remove_one(item_id)
        self.save(cart)
        if item is None:
            logger.debug(f"Cart remove id={item_id} not in cart")
        else:
            remaining = item.quantity if cart.find(item_id) else 0
            logger.debug(f"Cart remove id={item_id} quantity={remaining} lines={len(cart)}")

    def clear(self) -> None:
        """Drop the cart entry from the session entirely."""
        self.session.remove(self.key)
        logger.debug("Cart cleared")
