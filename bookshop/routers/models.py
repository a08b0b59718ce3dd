"""
Cart API Pydantic Models
"""
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


# ==================== REQUESTS ====================

class AddToCartRequest(BaseModel):
    id: int
    name: str
    price: Decimal = Field(ge=0)


class RemoveFromCartRequest(BaseModel):
    id: int


# ==================== RESPONSES ====================

class CartItemResponse(BaseModel):
    id: int
    name: str
    price: float
    quantity: int


class CartResponse(BaseModel):
    items: List[CartItemResponse]
    total_items: int
