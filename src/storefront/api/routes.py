"""FastAPI routes for the shop and its admin dashboard.

The auth provider verifies users before requests reach the API and passes the
user id in the ``X-User-Id`` header. Requests without it are anonymous.
"""

from fastapi import APIRouter, Depends, Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.admin.console import AdminConsole
from storefront.api.schemas import (
    AddProductRequest,
    AddToCartRequest,
    CartItemSchema,
    CartResponse,
    CheckoutRequest,
    CheckoutResponse,
    CheckoutSummarySchema,
    DashboardStatsResponse,
    NotificationSchema,
    OrderLineSchema,
    OrderResponse,
    PaymentIdResponse,
    PaymentResponse,
    ProductIdResponse,
    ProductResponse,
    ProfileIdResponse,
    ProfileResponse,
    RecordMpesaPaymentRequest,
    RegisterProfileRequest,
    SetProductImageRequest,
    StatusResponse,
    UpdateCartQuantityRequest,
    UpdateOrderStatusRequest,
    UpdateProductRequest,
)
from storefront.cart.selection import add_product_to_cart
from storefront.cart.state import CartState
from storefront.cart.store import CartRegistry, CartStore
from storefront.catalogue.queries import featured_products, get_product, list_products
from storefront.checkout.errors import AuthenticationRequired, RemoteWriteFailed
from storefront.checkout.pricing import format_amount, summarize
from storefront.checkout.shipping import ShippingForm
from storefront.checkout.submission import OrderSubmission
from storefront.identity.management import RegisterProfile
from storefront.identity.profiles import list_profiles
from storefront.identity.session import Actor, ProfileSession
from storefront.notifications import Notification, NotificationChannel
from storefront.orders.history import OrderView, all_orders, dashboard_stats, get_order, orders_for_user
from storefront.payments.confirmation import RecordMpesaPayment
from storefront.payments.listing import list_payments

# Carts live in process memory, one per browser session
carts = CartRegistry()


def _notification(notification: Notification | None) -> dict:
    if notification is None:
        return {}
    return NotificationSchema(
        title=notification.title,
        description=notification.description,
        variant=notification.variant,
    ).model_dump()


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        category=product.category,
        category_name=product.category_name,
        sizes=product.size_options,
        color=product.color,
        brand=product.brand,
        image_url=product.image_url,
        stock_quantity=product.stock_quantity or 0,
        in_stock=product.in_stock,
        rating=product.rating or 0.0,
        is_featured=bool(product.is_featured),
    )


def _cart_response(state) -> CartResponse:
    summary = summarize(state)
    return CartResponse(
        items=[
            CartItemSchema(
                product_id=item.product_id,
                name=item.name,
                price=item.unit_price,
                quantity=item.quantity,
                image=item.image,
                size=item.size,
                line_total=item.line_total,
            )
            for item in state.items
        ],
        total=state.total,
        item_count=state.item_count,
        summary=CheckoutSummarySchema(
            subtotal=summary.subtotal,
            shipping=summary.shipping,
            tax=summary.tax,
            total=summary.total,
            currency=summary.currency,
            formatted_total=format_amount(summary.total, summary.currency),
        ),
    )


def _order_response(order: OrderView) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        reference=order.reference,
        user_id=order.user_id,
        total_amount=order.total_amount,
        formatted_total=format_amount(order.total_amount, order.currency),
        status=order.status,
        payment_method=order.payment_method,
        currency=order.currency,
        created_at=order.created_at,
        item_count=order.item_count,
        items=[
            OrderLineSchema(
                id=line.id,
                product_id=line.product_id,
                product_name=line.product_name,
                price=line.price,
                quantity=line.quantity,
                size=line.size,
            )
            for line in order.items
        ],
    )


async def current_actor(x_user_id: str | None = Header(default=None)) -> Actor | None:
    return ProfileSession(x_user_id).current_actor()


async def require_actor(actor: Actor | None = Depends(current_actor)) -> Actor:
    if actor is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return actor


async def require_admin(actor: Actor = Depends(require_actor)) -> Actor:
    if not actor.is_admin:
        raise HTTPException(status_code=403, detail="Access denied")
    return actor


def _load_order_for(actor: Actor, order_id: str) -> OrderView:
    try:
        order = get_order(order_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found")
    if order.user_id != actor.user_id and not actor.is_admin:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def browse_products(category: str | None = None) -> list[ProductResponse]:
    return [_product_response(product) for product in list_products(category)]


@product_router.get("/featured", response_model=list[ProductResponse])
async def browse_featured_products(limit: int = 8) -> list[ProductResponse]:
    return [_product_response(product) for product in featured_products(limit)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def product_detail(product_id: str) -> ProductResponse:
    try:
        product = get_product(product_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    return _product_response(product)


# ---------------------------------------------------------------------------
# Profile Router
# ---------------------------------------------------------------------------
profile_router = APIRouter(prefix="/profiles", tags=["profiles"])


@profile_router.post("", status_code=201, response_model=ProfileIdResponse)
async def register_profile(body: RegisterProfileRequest) -> ProfileIdResponse:
    """Called by the auth provider once a user has signed up."""
    command = RegisterProfile(
        user_id=body.user_id,
        email=body.email,
        first_name=body.first_name,
        last_name=body.last_name,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProfileIdResponse(profile_id=result)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/{session_id}", response_model=CartResponse)
async def view_cart(session_id: str) -> CartResponse:
    store = carts.peek(session_id)
    return _cart_response(store.state if store is not None else CartState.empty())


@cart_router.post("/{session_id}/items", response_model=CartResponse)
async def add_cart_item(session_id: str, body: AddToCartRequest) -> CartResponse:
    try:
        product = get_product(body.product_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")

    store = carts.get(session_id)
    notifier = NotificationChannel()
    if not add_product_to_cart(store, product, notifier, size=body.size, quantity=body.quantity):
        if store.state.is_empty:
            carts.discard(session_id)
        raise HTTPException(status_code=400, detail=_notification(notifier.last))
    return _cart_response(store.state)


@cart_router.put("/{session_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item_quantity(
    session_id: str, product_id: str, body: UpdateCartQuantityRequest
) -> CartResponse:
    store = carts.peek(session_id)
    if store is None:
        return _cart_response(CartState.empty())
    return _cart_response(store.update_quantity(product_id, body.quantity))


@cart_router.delete("/{session_id}/items/{product_id}", response_model=CartResponse)
async def remove_cart_item(session_id: str, product_id: str) -> CartResponse:
    store = carts.peek(session_id)
    if store is None:
        return _cart_response(CartState.empty())
    return _cart_response(store.remove_item(product_id))


@cart_router.delete("/{session_id}", response_model=CartResponse)
async def clear_cart(session_id: str) -> CartResponse:
    store = carts.peek(session_id)
    if store is not None:
        store.clear()
        carts.discard(session_id)
    return _cart_response(CartState.empty())


@cart_router.post("/{session_id}/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout_cart(
    session_id: str,
    body: CheckoutRequest,
    x_user_id: str | None = Header(default=None),
) -> CheckoutResponse:
    """Place an order for everything in the cart.

    The cart is emptied only when the order and all of its items were written.
    """
    notifier = NotificationChannel()
    submission = OrderSubmission(
        cart=carts.peek(session_id) or CartStore(),
        session=ProfileSession(x_user_id),
        notifier=notifier,
    )
    result = submission.submit(ShippingForm.from_dict(body.shipping.model_dump()), body.payment_method)

    if not result.ok:
        detail = _notification(notifier.last)
        if isinstance(result.error, AuthenticationRequired):
            detail["redirect_to"] = result.redirect_to
            raise HTTPException(status_code=401, detail=detail)
        if isinstance(result.error, RemoteWriteFailed):
            detail["order_id"] = result.error.order_id
            raise HTTPException(status_code=502, detail=detail)
        detail["errors"] = getattr(result.error, "errors", {})
        raise HTTPException(status_code=400, detail=detail)

    carts.discard(session_id)
    return CheckoutResponse(
        order_id=result.order_id,
        reference=result.reference,
        notification=NotificationSchema(**_notification(notifier.last)),
    )


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def order_history(actor: Actor = Depends(require_actor)) -> list[OrderResponse]:
    return [_order_response(order) for order in orders_for_user(actor.user_id)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def order_detail(order_id: str, actor: Actor = Depends(require_actor)) -> OrderResponse:
    return _order_response(_load_order_for(actor, order_id))


@order_router.post("/{order_id}/payments", status_code=201, response_model=PaymentIdResponse)
async def submit_mpesa_payment(
    order_id: str,
    body: RecordMpesaPaymentRequest,
    actor: Actor = Depends(require_actor),
) -> PaymentIdResponse:
    """Record the M-Pesa number an order was paid from, for an admin to confirm."""
    order = _load_order_for(actor, order_id)
    command = RecordMpesaPayment(order_id=order.id, mpesa_number=body.mpesa_number)
    result = current_domain.process(command, asynchronous=False)
    return PaymentIdResponse(payment_id=result)


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin", tags=["admin"])


async def admin_console(
    x_user_id: str | None = Header(default=None),
    actor: Actor = Depends(require_admin),
) -> AdminConsole:
    return AdminConsole(ProfileSession(x_user_id), NotificationChannel())


def _outcome(console: AdminConsole, succeeded: bool) -> StatusResponse:
    if not succeeded:
        raise HTTPException(status_code=400, detail=_notification(console.notifier.last))
    return StatusResponse()


@admin_router.get("/stats", response_model=DashboardStatsResponse)
async def admin_stats(actor: Actor = Depends(require_admin)) -> DashboardStatsResponse:
    stats = dashboard_stats()
    return DashboardStatsResponse(
        total_orders=stats.total_orders,
        total_revenue=stats.total_revenue,
        total_users=stats.total_users,
    )


@admin_router.get("/orders", response_model=list[OrderResponse])
async def admin_orders(actor: Actor = Depends(require_admin)) -> list[OrderResponse]:
    return [_order_response(order) for order in all_orders()]


@admin_router.put("/orders/{order_id}/status", response_model=StatusResponse)
async def admin_update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    console: AdminConsole = Depends(admin_console),
) -> StatusResponse:
    return _outcome(console, console.update_order_status(order_id, body.status))


@admin_router.get("/payments", response_model=list[PaymentResponse])
async def admin_payments(
    status: str | None = None, actor: Actor = Depends(require_admin)
) -> list[PaymentResponse]:
    return [PaymentResponse(**vars(payment)) for payment in list_payments(status)]


@admin_router.post("/payments/{payment_id}/confirm", response_model=StatusResponse)
async def admin_confirm_payment(payment_id: str, console: AdminConsole = Depends(admin_console)) -> StatusResponse:
    return _outcome(console, console.confirm_payment(payment_id))


@admin_router.post("/payments/{payment_id}/reject", response_model=StatusResponse)
async def admin_reject_payment(payment_id: str, console: AdminConsole = Depends(admin_console)) -> StatusResponse:
    return _outcome(console, console.reject_payment(payment_id))


@admin_router.get("/users", response_model=list[ProfileResponse])
async def admin_users(actor: Actor = Depends(require_admin)) -> list[ProfileResponse]:
    return [
        ProfileResponse(
            id=str(profile.id),
            user_id=profile.user_id,
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            role=profile.role,
            created_at=profile.created_at,
        )
        for profile in list_profiles()
    ]


@admin_router.post("/users/{user_id}/promote", response_model=StatusResponse)
async def admin_promote_user(user_id: str, console: AdminConsole = Depends(admin_console)) -> StatusResponse:
    return _outcome(console, console.promote_to_admin(user_id))


@admin_router.post("/users/{user_id}/revoke", response_model=StatusResponse)
async def admin_revoke_user(user_id: str, console: AdminConsole = Depends(admin_console)) -> StatusResponse:
    return _outcome(console, console.remove_admin(user_id))


@admin_router.delete("/users/{user_id}", response_model=StatusResponse)
async def admin_delete_user(user_id: str, console: AdminConsole = Depends(admin_console)) -> StatusResponse:
    return _outcome(console, console.delete_user(user_id))


@admin_router.get("/products", response_model=list[ProductResponse])
async def admin_products(actor: Actor = Depends(require_admin)) -> list[ProductResponse]:
    return [_product_response(product) for product in list_products()]


@admin_router.post("/products", status_code=201, response_model=ProductIdResponse)
async def admin_add_product(
    body: AddProductRequest, console: AdminConsole = Depends(admin_console)
) -> ProductIdResponse:
    details = body.model_dump(exclude={"name", "price", "category", "sizes"})
    _outcome(
        console,
        console.add_product(body.name, body.price, body.category, sizes=body.sizes, **details),
    )
    return ProductIdResponse(product_id=console.last_result)


@admin_router.put("/products/{product_id}", response_model=StatusResponse)
async def admin_update_product(
    product_id: str,
    body: UpdateProductRequest,
    console: AdminConsole = Depends(admin_console),
) -> StatusResponse:
    changes = body.model_dump(exclude_none=True)
    return _outcome(console, console.update_product(product_id, **changes))


@admin_router.put("/products/{product_id}/image", response_model=StatusResponse)
async def admin_set_product_image(
    product_id: str,
    body: SetProductImageRequest,
    console: AdminConsole = Depends(admin_console),
) -> StatusResponse:
    return _outcome(console, console.set_product_image(product_id, body.image_url))


@admin_router.delete("/products/{product_id}", response_model=StatusResponse)
async def admin_delete_product(product_id: str, console: AdminConsole = Depends(admin_console)) -> StatusResponse:
    return _outcome(console, console.delete_product(product_id))
