"""
BookShop - Main FastAPI Application

Single entry point for the session cart API.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from bookshop import config
from bookshop.errors import CorruptCartState, InvalidCartItem
from bookshop.logging import get_logger
from bookshop.routers import cart_router

logger = get_logger(__name__)

if config.SESSION_BACKEND not in config.SESSION_BACKENDS:
    raise ValueError(f"SESSION_BACKEND must be one of {config.SESSION_BACKENDS}, got {config.SESSION_BACKEND!r}")


# ==================== FASTAPI APP ====================

app = FastAPI(
    title="BookShop",
    description="Book shop session cart API",
    version="1.0.0",
)

app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET,
    session_cookie=config.SESSION_COOKIE,
    max_age=config.SESSION_TTL_SECONDS,
    https_only=config.ENV == "production",
)

app.include_router(cart_router, prefix="/api")


# ==================== ERROR HANDLERS ====================

@app.exception_handler(CorruptCartState)
async def corrupt_cart_handler(request: Request, exc: CorruptCartState):
    """The stored cart could not be read; the client decides whether to reset it."""
    logger.error(f"Corrupt cart on {request.url.path}: {exc.reason}")
    return JSONResponse(status_code=409, content={"detail": exc.reason})


@app.exception_handler(InvalidCartItem)
async def invalid_cart_item_handler(request: Request, exc: InvalidCartItem):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "bookshop"}
