"""FastAPI endpoints for the storefront.

Thin adapters: authenticate the caller, translate the body into a command,
process it, and serialize the resulting record.
"""

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from storefront.admin.listings import (
    OrderListing,
    ProductListing,
    describe_order,
    describe_product,
    list_customer_orders,
    list_orders,
    list_products,
)
from storefront.api.dependencies import admin_user, any_user, current_user
from storefront.api.schemas import (
    AuthResponse,
    BuyNowRequest,
    CreateAdminRequest,
    CreateProductRequest,
    DeletedCountResponse,
    DeleteProductsRequest,
    LoginRequest,
    OrderItemResponse,
    OrderResponse,
    OrderStatusRequest,
    ProductResponse,
    RegisterRequest,
    UpdateProductRequest,
    UserResponse,
    UserSummary,
)
from storefront.order.administration import ChangeOrderStatus, DeleteOrder
from storefront.order.cancellation import CancelOrder
from storefront.order.order import Order
from storefront.order.purchase import BuyNow
from storefront.product.creation import CreateProduct
from storefront.product.details import UpdateProduct
from storefront.product.product import Product
from storefront.product.removal import DeleteProduct, DeleteProducts
from storefront.shared.identifiers import ensure_identifier
from storefront.shared.lookup import load
from storefront.user.authentication import authenticate, issue_token
from storefront.user.registration import CreateAdminUser, RegisterUser
from storefront.user.user import User

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])
product_router = APIRouter(prefix="/api/products", tags=["products"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])
admin_router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(admin_user)])


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------
def _user_summary(user: User | None) -> UserSummary | None:
    if user is None:
        return None
    return UserSummary(id=str(user.id), name=user.name, email=user.email, role=user.role)


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
    )


def _product_response(listing: ProductListing) -> ProductResponse:
    product = listing.product
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        price=product.price,
        category=product.category,
        description=product.description or "",
        emoji=product.emoji,
        in_stock=product.in_stock,
        created_by=str(product.created_by) if product.created_by else None,
        seller=_user_summary(listing.seller),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _order_response(listing: OrderListing) -> OrderResponse:
    order = listing.order
    return OrderResponse(
        id=str(order.id),
        customer_id=str(order.customer_id),
        customer=_user_summary(listing.customer),
        items=[
            OrderItemResponse(
                product_id=str(item.product_id),
                product_name=listing.product_names.get(str(item.product_id)),
                name=item.name,
                price=item.price,
                qty=item.qty,
                emoji=item.emoji,
            )
            for item in order.items
        ],
        total=order.total,
        status=order.status,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def _load_order(order_id) -> OrderResponse:
    order = load(Order, order_id)
    return _order_response(describe_order(order))


def _load_product(product_id) -> ProductResponse:
    product = load(Product, product_id)
    return _product_response(describe_product(product))


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------
@auth_router.post("/register", status_code=201, response_model=AuthResponse)
async def register(body: RegisterRequest) -> AuthResponse:
    command = RegisterUser(name=body.name, email=body.email, password=body.password)
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)
    return AuthResponse(token=issue_token(user), user=_user_response(user))


@auth_router.post("/login", response_model=AuthResponse)
async def login(body: LoginRequest) -> AuthResponse:
    user = authenticate(body.email, body.password)
    return AuthResponse(token=issue_token(user), user=_user_response(user))


@auth_router.get("/me", response_model=UserResponse)
async def me(user: User = Depends(current_user)) -> UserResponse:
    return _user_response(user)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
@product_router.get("", response_model=list[ProductResponse])
async def get_products() -> list[ProductResponse]:
    return [_product_response(listing) for listing in list_products()]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _load_product(ensure_identifier(product_id, "product_id", "product ID"))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest, user: User = Depends(any_user)) -> ProductResponse:
    command = CreateProduct(
        actor_id=str(user.id),
        actor_role=user.role,
        name=body.name,
        price=body.price,
        category=body.category,
        description=body.description,
        emoji=body.emoji,
        in_stock=body.in_stock,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _load_product(product_id)


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, user: User = Depends(any_user)
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        actor_id=str(user.id),
        actor_role=user.role,
        name=body.name,
        price=body.price,
        category=body.category,
        description=body.description,
        emoji=body.emoji,
        in_stock=body.in_stock,
    )
    current_domain.process(command, asynchronous=False)
    return _load_product(product_id)


@product_router.delete("/{product_id}", status_code=204, response_class=Response)
async def delete_product(product_id: str, user: User = Depends(any_user)) -> Response:
    command = DeleteProduct(product_id=product_id, actor_id=str(user.id), actor_role=user.role)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.post("/buy-now", status_code=201, response_model=OrderResponse)
async def buy_now(body: BuyNowRequest, user: User = Depends(any_user)) -> OrderResponse:
    command = BuyNow(
        actor_id=str(user.id),
        actor_role=user.role,
        product_id=body.product_id,
        qty=body.qty,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _load_order(order_id)


@order_router.get("/my", response_model=list[OrderResponse])
async def my_orders(user: User = Depends(any_user)) -> list[OrderResponse]:
    return [_order_response(listing) for listing in list_customer_orders(user.id)]


@order_router.put("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str, user: User = Depends(any_user)) -> OrderResponse:
    command = CancelOrder(order_id=order_id, actor_id=str(user.id), actor_role=user.role)
    current_domain.process(command, asynchronous=False)
    return _load_order(order_id)


def _change_status(order_id: str, body: OrderStatusRequest, user: User) -> OrderResponse:
    command = ChangeOrderStatus(
        order_id=order_id,
        status=body.status,
        actor_id=str(user.id),
        actor_role=user.role,
    )
    current_domain.process(command, asynchronous=False)
    return _load_order(order_id)


def _delete_order(order_id: str, user: User) -> Response:
    command = DeleteOrder(order_id=order_id, actor_id=str(user.id), actor_role=user.role)
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


# Older clients manage orders under /api/orders; same behaviour as /api/admin/orders
@order_router.get("", response_model=list[OrderResponse])
async def all_orders(user: User = Depends(admin_user)) -> list[OrderResponse]:
    return [_order_response(listing) for listing in list_orders()]


@order_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str, body: OrderStatusRequest, user: User = Depends(admin_user)
) -> OrderResponse:
    return _change_status(order_id, body, user)


@order_router.delete("/{order_id}", status_code=204, response_class=Response)
async def delete_order(order_id: str, user: User = Depends(admin_user)) -> Response:
    return _delete_order(order_id, user)


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
@admin_router.get("/products", response_model=list[ProductResponse])
async def admin_list_products(q: str | None = Query(None, max_length=200)) -> list[ProductResponse]:
    return [_product_response(listing) for listing in list_products(q)]


@admin_router.post("/products/delete-many", response_model=DeletedCountResponse)
async def admin_delete_products(body: DeleteProductsRequest, user: User = Depends(admin_user)) -> DeletedCountResponse:
    command = DeleteProducts(product_ids=body.ids, actor_id=str(user.id), actor_role=user.role)
    deleted = current_domain.process(command, asynchronous=False)
    return DeletedCountResponse(deleted_count=deleted)


@admin_router.get("/orders", response_model=list[OrderResponse])
async def admin_list_orders(q: str | None = Query(None, max_length=200)) -> list[OrderResponse]:
    return [_order_response(listing) for listing in list_orders(q)]


@admin_router.put("/orders/{order_id}/status", response_model=OrderResponse)
async def admin_update_order_status(
    order_id: str, body: OrderStatusRequest, user: User = Depends(admin_user)
) -> OrderResponse:
    return _change_status(order_id, body, user)


@admin_router.delete("/orders/{order_id}", status_code=204, response_class=Response)
async def admin_delete_order(order_id: str, user: User = Depends(admin_user)) -> Response:
    return _delete_order(order_id, user)


@admin_router.post("/users/admin", status_code=201, response_model=UserResponse)
async def admin_create_admin(body: CreateAdminRequest) -> UserResponse:
    command = CreateAdminUser(name=body.name, email=body.email, password=body.password)
    user_id = current_domain.process(command, asynchronous=False)
    return _user_response(current_domain.repository_for(User).get(user_id))
