"""
Shared Dependencies for Routers

Builds a per-request CartStore over the configured session backend.
Heavy imports (Redis client) are only pulled in when that backend is used.
"""
import secrets

from fastapi import Request

from bookshop import config
from bookshop.cart import CartStore, RequestSessionStore, SessionStore
from bookshop.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)

SESSION_ID_KEY = "sid"


def _visitor_session_id(request: Request) -> str:
    """Return the visitor's session id, minting one on first visit."""
    sid = request.session.get(SESSION_ID_KEY)
    if not sid:
        sid = secrets.token_urlsafe(24)
        request.session[SESSION_ID_KEY] = sid
        logger.debug(f"New visitor session {sanitize_id_for_logging(sid)}")
    return sid


def get_session_store(request: Request) -> SessionStore:
    """Session capability for the current request."""
    if config.SESSION_BACKEND == "redis":
        from bookshop.db import get_redis
        from bookshop.cart import RedisSessionStore
        return RedisSessionStore(
            get_redis(),
            _visitor_session_id(request),
            ttl=config.SESSION_TTL_SECONDS,
        )
    return RequestSessionStore(request.session)


def get_cart_store(request: Request) -> CartStore:
    """FastAPI dependency: cart store bound to this request's session."""
    return CartStore(get_session_store(request))
