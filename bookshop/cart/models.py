"""Cart models with Decimal price snapshots."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator, List, Optional

from bookshop.errors import ERROR_CART_BAD_PRICE, ERROR_CART_BAD_QUANTITY
from bookshop.services.money import is_number, to_decimal


@dataclass
class CartItem:
    """Single line of the cart.

    ``name`` and ``price`` are copied from the catalog when the item is
    first added and never refreshed afterwards.
    """
    id: int
    name: str
    price: Decimal
    quantity: int = 1

    def __post_init__(self):
        self.price = to_decimal(self.price)

    def to_dict(self) -> dict:
        """Convert to the stored wire shape."""
        return {
            "Id": self.id,
            "Name": self.name,
            "Price": self.price,
            "Quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from the stored wire shape.

        Raises:
            KeyError: a field is missing
            TypeError: a field has the wrong JSON type
            ValueError: quantity is below 1, or price is negative or not finite
        """
        item_id = data["Id"]
        name = data["Name"]
        price = data["Price"]
        quantity = data["Quantity"]

        if not isinstance(item_id, int) or isinstance(item_id, bool):
            raise TypeError(f"Id must be an integer, got {type(item_id).__name__}")
        if not isinstance(name, str):
            raise TypeError(f"Name must be a string, got {type(name).__name__}")
        if not is_number(price):
            raise TypeError(f"Price must be a number, got {type(price).__name__}")
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise TypeError(f"Quantity must be an integer, got {type(quantity).__name__}")
        price = to_decimal(price)
        if not price.is_finite() or price < 0:
            raise ValueError(f"{ERROR_CART_BAD_PRICE}, got {price}")
        if quantity < 1:
            raise ValueError(f"{ERROR_CART_BAD_QUANTITY}, got {quantity}")

        return cls(id=item_id, name=name, price=price, quantity=quantity)


@dataclass
class Cart:
    """Ordered cart lines, first-added first."""
    items: List[CartItem] = field(default_factory=list)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_items(self) -> int:
        """Total number of units in the cart."""
        return sum(item.quantity for item in self.items)

    def find(self, item_id: int) -> Optional[CartItem]:
        """Return the line for ``item_id`` or None."""
        return next((item for item in self.items if item.id == item_id), None)

    def add(self, item_id: int, name: str, price) -> CartItem:
        """Merge one unit of ``item_id`` into the cart."""
        existing_item = self.find(item_id)
        if existing_item:
            existing_item.quantity += 1
            return existing_item

        item = CartItem(id=item_id, name=name, price=price, quantity=1)
        self.items.append(item)
        return item

    def remove_one(self, item_id: int) -> Optional[CartItem]:
        """Take one unit of ``item_id`` out; drop the line when it hits zero.

        Returns the affected line, or None if ``item_id`` is not in the cart.
        """
        existing_item = self.find(item_id)
        if existing_item is None:
            return None

        if existing_item.quantity > 1:
            existing_item.quantity -= 1
        else:
            self.items.remove(existing_item)
        return existing_item
