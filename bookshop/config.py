"""
Environment-driven settings.

All values are read once at import time.
"""
import os

ENV = os.environ.get("BOOKSHOP_ENV", "local")

# Signs the session cookie (starlette SessionMiddleware)
SESSION_SECRET = os.environ.get("SESSION_SECRET", "dev-secret")
SESSION_COOKIE = os.environ.get("SESSION_COOKIE", "bookshop_session")

# "cookie" keeps the cart inside the signed cookie, "redis" keeps it in Upstash
SESSION_BACKEND = os.environ.get("SESSION_BACKEND", "cookie").lower()
SESSION_TTL_SECONDS = int(os.environ.get("SESSION_TTL_SECONDS", "86400"))

# Session key the serialized cart lives under
CART_SESSION_KEY = os.environ.get("CART_SESSION_KEY", "Cart")

SESSION_BACKENDS = ("cookie", "redis")
