"""
FastAPI application for the storefront.

A thin presentation layer over the orchestration services. Each endpoint
resolves its service through a module-level getter (overridable with
reset_api_state for tests), calls one orchestration operation and returns
its result as JSON.

Run with:
    uv run uvicorn api.main:app --reload

Then visit http://localhost:8000/docs for interactive API documentation.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional, Union

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from shared.config import get_store_policy
from shared.models import Cart, Coupon
from storefront.accounts import AccountService
from storefront.availability import StoreHours
from storefront.checkout import CheckoutService
from storefront.coupons import calculate_discount, get_coupons
from storefront.pages import PageService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("storefront_api")


# =============================================================================
# Request / Response Models
# =============================================================================

class ConversionResponse(BaseModel):
    amount: float
    currency: str
    converted: float


class ShippingResponse(BaseModel):
    destination: str
    info: str


class OrderRequest(BaseModel):
    """Cart plus payment credentials; credentials are passed through as-is."""
    cart: Cart
    credentials: dict[str, Any] = Field(default_factory=dict)


class EmailRequest(BaseModel):
    email: str


class SignupResponse(BaseModel):
    registered: bool


class StoreStatus(BaseModel):
    online: bool
    discount: float


class CouponRequest(BaseModel):
    price: Any
    code: Any


class CouponResponse(BaseModel):
    result: Union[float, str]


# =============================================================================
# Service Wiring
# =============================================================================

# Module-level instances (would use proper DI in production)
_checkout: Optional[CheckoutService] = None
_accounts: Optional[AccountService] = None
_store_hours: Optional[StoreHours] = None
_pages: Optional[PageService] = None


def get_checkout() -> CheckoutService:
    global _checkout
    if _checkout is None:
        _checkout = CheckoutService()
    return _checkout


def get_accounts() -> AccountService:
    global _accounts
    if _accounts is None:
        _accounts = AccountService()
    return _accounts


def get_store_hours() -> StoreHours:
    global _store_hours
    if _store_hours is None:
        _store_hours = StoreHours()
    return _store_hours


def get_pages() -> PageService:
    global _pages
    if _pages is None:
        _pages = PageService()
    return _pages


def reset_api_state(
    checkout: Optional[CheckoutService] = None,
    accounts: Optional[AccountService] = None,
    store_hours: Optional[StoreHours] = None,
    pages: Optional[PageService] = None,
) -> None:
    """Reset API state (for testing)."""
    global _checkout, _accounts, _store_hours, _pages
    _checkout = checkout
    _accounts = accounts
    _store_hours = store_hours
    _pages = pages


# Application lifespan
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    policy = get_store_policy()
    logger.info(
        f"Starting Storefront API (open {policy.open_hour}:00-{policy.close_hour}:00)"
    )
    yield
    logger.info("Shutting down")


app = FastAPI(
    title="Storefront API",
    description="Checkout, account and store-status operations over mock collaborators.",
    version="1.0.0",
    lifespan=lifespan,
)


# =============================================================================
# Health Check
# =============================================================================

@app.get("/health", tags=["Health"])
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "storefront"}


# =============================================================================
# Pages
# =============================================================================

@app.get("/", response_class=HTMLResponse, tags=["Pages"])
def home(pages: PageService = Depends(get_pages)):
    """Render the home page (records a page view)."""
    return pages.render_page()


# =============================================================================
# Checkout
# =============================================================================

@app.get("/currency/convert", response_model=ConversionResponse, tags=["Checkout"])
def convert_currency(
    amount: float,
    currency: str,
    checkout: CheckoutService = Depends(get_checkout),
):
    """Convert an amount into another currency."""
    try:
        converted = checkout.convert(amount, currency)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return ConversionResponse(amount=amount, currency=currency, converted=converted)


@app.get("/shipping/{destination}", response_model=ShippingResponse, tags=["Checkout"])
def shipping(destination: str, checkout: CheckoutService = Depends(get_checkout)):
    """Shipping cost and time to a destination."""
    return ShippingResponse(destination=destination, info=checkout.shipping_info(destination))


@app.post("/orders", tags=["Checkout"])
async def submit_order(
    request: OrderRequest,
    checkout: CheckoutService = Depends(get_checkout),
):
    """
    Submit an order.

    A declined payment is a normal response: `{"success": false, "error": ...}`.
    """
    result = await checkout.submit_order(request.cart, request.credentials)
    return result.to_dict()


# =============================================================================
# Accounts
# =============================================================================

@app.post("/accounts/signup", response_model=SignupResponse, tags=["Accounts"])
def sign_up(request: EmailRequest, accounts: AccountService = Depends(get_accounts)):
    """Register an email address; invalid addresses return registered=false."""
    return SignupResponse(registered=accounts.sign_up(request.email))


@app.post("/accounts/login", tags=["Accounts"])
def login(request: EmailRequest, accounts: AccountService = Depends(get_accounts)):
    """Email a one-time login code."""
    accounts.login(request.email)
    return {"code_sent": True}


# =============================================================================
# Store
# =============================================================================

@app.get("/store/status", response_model=StoreStatus, tags=["Store"])
def store_status(hours: StoreHours = Depends(get_store_hours)):
    """Whether the store is open right now, and today's seasonal discount."""
    return StoreStatus(online=hours.is_online(), discount=hours.get_discount())


@app.get("/coupons", response_model=list[Coupon], tags=["Store"])
def list_coupons():
    return get_coupons()


@app.post("/coupons/apply", response_model=CouponResponse, tags=["Store"])
def apply_coupon(request: CouponRequest):
    """Apply a coupon code; bad input yields an "Invalid ..." message."""
    return CouponResponse(result=calculate_discount(request.price, request.code))
