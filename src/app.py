"""Storefront FastAPI application.

Serves the shop (products, carts, checkout, order history) and the admin
dashboard over HTTP. Every request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset / "test" → in-memory repositories
#   - "production"   → PostgreSQL at DATABASE_URL
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.domain import storefront  # noqa: E402
from storefront.utils.logging import bind_request_context, clear_request_context, get_logger

storefront.init()

logger = get_logger(__name__)

# Paths served without a domain context
_PASSTHROUGH_PATHS = ("/health", "/docs", "/redoc", "/openapi.json")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Apparel shop: catalogue, cart checkout, orders and admin dashboard",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind request details for logging."""
    if request.url.path.startswith(_PASSTHROUGH_PATHS):
        return await call_next(request)

    bind_request_context(
        request_id=request.headers.get("x-request-id", str(uuid.uuid4())),
        user_id=request.headers.get("x-user-id"),
        path=request.url.path,
    )
    try:
        with storefront.domain_context():
            response = await call_next(request)
        logger.info("Request handled", method=request.method, status_code=response.status_code)
        return response
    finally:
        clear_request_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    admin_router,
    cart_router,
    order_router,
    product_router,
    profile_router,
)

app.include_router(product_router)
app.include_router(profile_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(admin_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"storefront": {"name": storefront.name}},
        }
    )
