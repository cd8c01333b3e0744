"""Pydantic request/response schemas for the storefront API.

These are external contracts, kept separate from the internal Protean
commands and the cart dataclasses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class NotificationSchema(BaseModel):
    title: str
    description: str
    variant: str = "default"


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    price: float
    category: str
    category_name: str
    sizes: list[str] = []
    color: str | None = None
    brand: str | None = None
    image_url: str | None = None
    stock_quantity: int = 0
    in_stock: bool = False
    rating: float = 0.0
    is_featured: bool = False


class ProductIdResponse(BaseModel):
    product_id: str


class AddProductRequest(BaseModel):
    name: str
    description: str | None = None
    price: float = Field(ge=0)
    category: str
    sizes: list[str] = []
    color: str | None = None
    brand: str | None = None
    image_url: str | None = None
    stock_quantity: int = Field(ge=0, default=0)
    rating: float = Field(ge=0, le=5, default=0.0)
    is_featured: bool = False

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Denim Jacket",
                    "price": 100.0,
                    "category": "jackets",
                    "sizes": ["S", "M", "L"],
                    "stock_quantity": 12,
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    price: float | None = Field(ge=0, default=None)
    category: str | None = None
    sizes: list[str] | None = None
    color: str | None = None
    brand: str | None = None
    stock_quantity: int | None = Field(ge=0, default=None)
    rating: float | None = Field(ge=0, le=5, default=None)
    is_featured: bool | None = None


class SetProductImageRequest(BaseModel):
    image_url: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartItemSchema(BaseModel):
    product_id: str
    name: str
    price: float
    quantity: int
    image: str | None = None
    size: str | None = None
    line_total: float


class CheckoutSummarySchema(BaseModel):
    subtotal: float
    shipping: float
    tax: float
    total: float
    currency: str
    formatted_total: str


class CartResponse(BaseModel):
    items: list[CartItemSchema]
    total: float
    item_count: int
    summary: CheckoutSummarySchema


class AddToCartRequest(BaseModel):
    product_id: str
    size: str | None = None
    quantity: int = Field(ge=1, default=1)


class UpdateCartQuantityRequest(BaseModel):
    quantity: int


class ShippingSchema(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    county: str = "Nairobi"
    postal_code: str = ""
    country: str = "Kenya"


class CheckoutRequest(BaseModel):
    shipping: ShippingSchema
    payment_method: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "shipping": {
                        "first_name": "Amina",
                        "last_name": "Otieno",
                        "email": "amina@example.com",
                        "address": "12 Moi Avenue",
                        "city": "Nairobi",
                        "county": "Nairobi",
                    },
                    "payment_method": "mpesa",
                }
            ]
        }
    }


class CheckoutResponse(BaseModel):
    order_id: str
    reference: str
    notification: NotificationSchema


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineSchema(BaseModel):
    id: str
    product_id: str
    product_name: str
    price: float
    quantity: int
    size: str | None = None


class OrderResponse(BaseModel):
    id: str
    reference: str
    user_id: str
    total_amount: float
    formatted_total: str
    status: str
    payment_method: str | None = None
    currency: str
    created_at: datetime | None = None
    item_count: int
    items: list[OrderLineSchema]


class UpdateOrderStatusRequest(BaseModel):
    status: str


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------
class RecordMpesaPaymentRequest(BaseModel):
    mpesa_number: str


class PaymentIdResponse(BaseModel):
    payment_id: str


class PaymentResponse(BaseModel):
    id: str
    order_id: str
    order_reference: str
    order_total: float | None = None
    customer_id: str | None = None
    amount: float
    payment_method: str
    mpesa_number: str | None = None
    status: str
    confirmed_by: str | None = None
    confirmed_at: datetime | None = None
    created_at: datetime | None = None


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
class RegisterProfileRequest(BaseModel):
    user_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None


class ProfileIdResponse(BaseModel):
    profile_id: str


class ProfileResponse(BaseModel):
    id: str
    user_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: str
    created_at: datetime | None = None


class DashboardStatsResponse(BaseModel):
    total_orders: int
    total_revenue: float
    total_users: int
