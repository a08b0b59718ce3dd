"""
Cart blob codec.

The session holds the cart as UTF-8 JSON: an array of
``{"Id", "Name", "Price", "Quantity"}`` objects in insertion order.
``encode`` and ``decode`` are pure; they never touch the session.
"""
from typing import List, Protocol

import simplejson

from bookshop.errors import (
    CorruptCartState,
    ERROR_CART_BAD_PRICE,
    ERROR_CART_CORRUPT,
    ERROR_CART_DUPLICATE_ID,
    ERROR_CART_ITEM_NOT_OBJECT,
    ERROR_CART_NOT_ARRAY,
)
from .models import CartItem


class Serializer(Protocol):
    """Turns cart lines into session bytes and back."""

    def encode(self, items: List[CartItem]) -> bytes: ...

    def decode(self, data: bytes) -> List[CartItem]: ...


def _reject_constant(name: str):
    raise ValueError(f"{ERROR_CART_BAD_PRICE}, got {name}")


class JsonCartSerializer:
    """JSON wire format for the session cart.

    Prices go through simplejson as Decimal both ways, so they are written
    and read back digit for digit.
    """

    encoding = "utf-8"

    def encode(self, items: List[CartItem]) -> bytes:
        payload = [item.to_dict() for item in items]
        return simplejson.dumps(
            payload, use_decimal=True, ensure_ascii=False, separators=(",", ":"),
        ).encode(self.encoding)

    def decode(self, data: bytes) -> List[CartItem]:
        """Parse a stored blob.

        Raises:
            CorruptCartState: the blob is not a well-formed cart. The
                underlying parse error is chained.
        """
        try:
            raw = simplejson.loads(
                data.decode(self.encoding),
                use_decimal=True,
                parse_constant=_reject_constant,
            )
        except (UnicodeDecodeError, ValueError) as e:
            raise CorruptCartState(f"{ERROR_CART_CORRUPT}: {e}") from e

        if not isinstance(raw, list):
            raise CorruptCartState(ERROR_CART_NOT_ARRAY)

        items: List[CartItem] = []
        seen_ids = set()
        for position, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise CorruptCartState(f"{ERROR_CART_ITEM_NOT_OBJECT} (index {position})")
            try:
                item = CartItem.from_dict(entry)
            except KeyError as e:
                raise CorruptCartState(f"{ERROR_CART_CORRUPT}: missing field {e} (index {position})") from e
            except (TypeError, ValueError) as e:
                raise CorruptCartState(f"{ERROR_CART_CORRUPT}: {e} (index {position})") from e

            if item.id in seen_ids:
                raise CorruptCartState(f"{ERROR_CART_DUPLICATE_ID}: {item.id}")
            seen_ids.add(item.id)
            items.append(item)

        return items


def encode(items: List[CartItem]) -> bytes:
    """Encode with the default JSON serializer."""
    return _default.encode(items)


def decode(data: bytes) -> List[CartItem]:
    """Decode with the default JSON serializer."""
    return _default.decode(data)


_default = JsonCartSerializer()
