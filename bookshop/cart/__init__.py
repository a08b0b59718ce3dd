"""Cart package: models, serializer, session storage, and store facade."""
from .models import CartItem, Cart
from .serializer import JsonCartSerializer, Serializer, encode, decode
from .service import CartStore
from .storage import SessionStore, InMemorySessionStore, RequestSessionStore, RedisSessionStore

__all__ = [
    "CartItem",
    "Cart",
    "CartStore",
    "JsonCartSerializer",
    "Serializer",
    "encode",
    "decode",
    "SessionStore",
    "InMemorySessionStore",
    "RequestSessionStore",
    "RedisSessionStore",
]
