"""
BookShop Core Module

This package contains the session cart infrastructure:
- cart: session-backed cart store, models, serializer
- db: Upstash Redis client for the redis session backend
- errors: error constants and cart exceptions
- logging: centralized logging setup

Note: Imports are lazy so that importing the package does not pull in
FastAPI or the Redis client.
"""

__all__ = [
    "CartStore",
    "get_redis",
]


def __getattr__(name):
    """Lazy attribute access for clean module loading."""
    if name == "CartStore":
        from bookshop.cart import CartStore
        return CartStore
    if name == "get_redis":
        from bookshop.db import get_redis
        return get_redis
    raise AttributeError(f"module 'bookshop' has no attribute '{name}'")
