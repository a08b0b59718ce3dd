"""
Cart Router

Session cart endpoints: view, add, remove one unit, and the payment
success hook that empties the cart after checkout.
"""
from typing import List

from fastapi import APIRouter, Depends

from bookshop.cart import CartItem, CartStore
from bookshop.logging import get_logger
from bookshop.services.money import to_json_number
from .deps import get_cart_store
from .models import AddToCartRequest, CartResponse, RemoveFromCartRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _format_cart_response(items: List[CartItem]) -> dict:
    return {
        "items": [
            {
                "id": item.id,
                "name": item.name,
                "price": to_json_number(item.price),
                "quantity": item.quantity,
            }
            for item in items
        ],
        "total_items": sum(item.quantity for item in items),
    }


@router.get("/cart", response_model=CartResponse)
def get_cart(store: CartStore = Depends(get_cart_store)):
    """Current cart lines in the order they were added."""
    return _format_cart_response(store.get_for_display())


@router.post("/cart/add", response_model=CartResponse)
def add_to_cart(request: AddToCartRequest, store: CartStore = Depends(get_cart_store)):
    """Add one unit of a book; repeats bump the quantity."""
    store.add(request.id, request.name, request.price)
    return _format_cart_response(store.get_for_display())


@router.post("/cart/remove", response_model=CartResponse)
def remove_from_cart(request: RemoveFromCartRequest, store: CartStore = Depends(get_cart_store)):
    """Take one unit out; the line disappears when its quantity reaches zero."""
    store.remove_one(request.id)
    return _format_cart_response(store.get_for_display())


@router.post("/payment/success")
def payment_success(store: CartStore = Depends(get_cart_store)):
    """Checkout finished: drop the cart from the session."""
    store.clear()
    logger.info("Payment success, cart cleared")
    return {"success": True}


@router.delete("/cart")
def reset_cart(store: CartStore = Depends(get_cart_store)):
    """Throw the cart away, e.g. after a corrupted cart was reported."""
    store.clear()
    return {"success": True}
