"""
Tests for cart models and the session blob codec
"""

import json
from decimal import Decimal

import pytest
import simplejson

from bookshop.cart import Cart, CartItem, JsonCartSerializer, decode, encode
from bookshop.errors import CorruptCartState


class TestCartItem:
    """Tests for CartItem dataclass."""

    def test_create_cart_item(self):
        """Test creating a cart item."""
        item = CartItem(id=1, name="Book 1", price=100)

        assert item.id == 1
        assert item.quantity == 1
        assert item.price == Decimal("100")

    def test_float_price_keeps_precision(self):
        """Test float prices go through str, not binary float."""
        item = CartItem(id=1, name="Book 1", price=19.99)

        assert item.price == Decimal("19.99")

    def test_to_dict(self):
        """Test serialization to the wire shape."""
        item = CartItem(id=1, name="Book 1", price=100, quantity=2)

        assert item.to_dict() == {"Id": 1, "Name": "Book 1", "Price": 100, "Quantity": 2}

    def test_to_dict_fractional_price(self):
        item = CartItem(id=3, name="Book 3", price=Decimal("12.50"))

        assert item.to_dict()["Price"] == 12.5

    def test_from_dict(self):
        """Test deserialization from the wire shape."""
        item = CartItem.from_dict({"Id": 7, "Name": "Dune", "Price": 250.0, "Quantity": 3})

        assert item == CartItem(id=7, name="Dune", price=Decimal("250"), quantity=3)

    def test_from_dict_rejects_zero_quantity(self):
        with pytest.raises(ValueError):
            CartItem.from_dict({"Id": 1, "Name": "Book 1", "Price": 100, "Quantity": 0})

    @pytest.mark.parametrize("price", [-5, Decimal("Infinity"), Decimal("NaN")])
    def test_from_dict_rejects_bad_price(self, price):
        with pytest.raises(ValueError):
            CartItem.from_dict({"Id": 1, "Name": "Book 1", "Price": price, "Quantity": 1})

    def test_from_dict_rejects_bool_id(self):
        with pytest.raises(TypeError):
            CartItem.from_dict({"Id": True, "Name": "Book 1", "Price": 100, "Quantity": 1})


class TestCart:
    """Tests for Cart merge/decrement rules."""

    def test_create_empty_cart(self):
        """Test creating an empty cart."""
        cart = Cart()

        assert cart.is_empty
        assert cart.total_items == 0
        assert len(cart) == 0

    def test_add_merges_same_id(self):
        """Test adding an existing id bumps quantity instead of appending."""
        cart = Cart()
        cart.add(1, "Book 1", 100)
        cart.add(1, "Book 1", 100)

        assert len(cart) == 1
        assert cart.items[0].quantity == 2

    def test_add_keeps_original_snapshot(self):
        """Test re-adding keeps the name and price captured first."""
        cart = Cart()
        cart.add(1, "Book 1", 100)
        cart.add(1, "Renamed", 999)

        assert cart.items[0].name == "Book 1"
        assert cart.items[0].price == Decimal("100")

    def test_insertion_order_preserved(self):
        cart = Cart()
        cart.add(2, "Book 2", 200)
        cart.add(1, "Book 1", 100)
        cart.add(2, "Book 2", 200)

        assert [item.id for item in cart] == [2, 1]
        assert cart.total_items == 3

    def test_remove_one_decrements(self):
        cart = Cart(items=[CartItem(id=1, name="Book 1", price=100, quantity=2)])

        cart.remove_one(1)

        assert cart.items == [CartItem(id=1, name="Book 1", price=100, quantity=1)]

    def test_remove_one_drops_last_unit(self):
        cart = Cart(items=[CartItem(id=1, name="Book 1", price=100, quantity=1)])

        removed = cart.remove_one(1)

        assert removed.id == 1
        assert cart.is_empty

    def test_remove_one_unknown_id(self):
        cart = Cart(items=[CartItem(id=1, name="Book 1", price=100)])

        assert cart.remove_one(42) is None
        assert len(cart) == 1


class TestJsonCartSerializer:
    """Tests for encode/decode of the session blob."""

    def test_round_trip(self):
        """Test decode(encode(items)) preserves order and fields."""
        items = [
            CartItem(id=2, name="Book 2", price=200, quantity=1),
            CartItem(id=1, name="Книга 1", price=Decimal("99.90"), quantity=4),
        ]

        assert decode(encode(items)) == items

    def test_encode_wire_format(self):
        """Test the blob is a UTF-8 JSON array with PascalCase fields."""
        blob = encode([CartItem(id=1, name="Book 1", price=100, quantity=2)])

        assert json.loads(blob.decode("utf-8")) == [
            {"Id": 1, "Name": "Book 1", "Price": 100, "Quantity": 2}
        ]

    def test_encode_empty(self):
        assert encode([]) == b"[]"

    def test_decode_accepts_decimal_prices(self):
        """Test prices written as 100.0 by other writers decode cleanly."""
        blob = b'[{"Id":1,"Name":"Book 1","Price":100.0,"Quantity":2}]'

        items = decode(blob)

        assert items[0].price == Decimal("100")
        assert items[0].quantity == 2

    @pytest.mark.parametrize(
        "blob",
        [
            b"not json",
            b"\xff\xfe",
            b'{"Id": 1}',
            b"[1, 2]",
            b'[{"Id": 1, "Name": "Book 1", "Price": 100}]',
            b'[{"Id": "1", "Name": "Book 1", "Price": 100, "Quantity": 1}]',
            b'[{"Id": 1, "Name": "Book 1", "Price": "100", "Quantity": 1}]',
            b'[{"Id": 1, "Name": "Book 1", "Price": 100, "Quantity": 0}]',
            b'[{"Id": 1, "Name": "Book 1", "Price": -5, "Quantity": 1}]',
            b'[{"Id": 1, "Name": "Book 1", "Price": Infinity, "Quantity": 1}]',
            b'[{"Id": 1, "Name": "Book 1", "Price": -Infinity, "Quantity": 1}]',
            b'[{"Id": 1, "Name": "Book 1", "Price": NaN, "Quantity": 1}]',
            b'[{"Id": 1, "Name": "A", "Price": 1, "Quantity": 1},'
            b' {"Id": 1, "Name": "B", "Price": 2, "Quantity": 1}]',
        ],
    )
    def test_decode_malformed_raises(self, blob):
        """Test every kind of malformed blob surfaces as CorruptCartState."""
        with pytest.raises(CorruptCartState):
            JsonCartSerializer().decode(blob)

    def test_decode_chains_parse_error(self):
        with pytest.raises(CorruptCartState) as exc_info:
            decode(b"[{")

        assert isinstance(exc_info.value.__cause__, simplejson.JSONDecodeError)

    def test_round_trip_keeps_full_price_precision(self):
        """Test prices finer than a float survive encode/decode exactly."""
        items = [CartItem(id=1, name="Book 1", price=Decimal("0.12345678901234567891"))]

        restored = decode(encode(items))

        assert restored == items
        assert str(restored[0].price) == "0.12345678901234567891"

    def test_encode_writes_price_digits_verbatim(self):
        blob = encode([CartItem(id=1, name="Book 1", price=Decimal("12.50"))])

        assert blob == b'[{"Id":1,"Name":"Book 1","Price":12.50,"Quantity":1}]'
