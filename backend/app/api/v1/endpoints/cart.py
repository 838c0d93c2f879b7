# backend/app/api/v1/endpoints/cart.py
"""
Este archivo contiene los endpoints para el carrito de compras.

Se encarga de exponer las operaciones de consultar el carrito, añadir
productos, cambiar cantidades o eliminar productos, y procesar el checkout.
Los errores de negocio llegan como ApiError y los traduce el manejador
registrado en app.main.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.api import deps
from app.db.models.cart_model import Cart
from app.db.models.user_model import User
from app.schemas.cart_schema import CartItemCreate, CartItemUpdate, CartItemResponse, CartResponse
from app.services.cart_service import CartService, get_cart_total_cost

logger = logging.getLogger(__name__)

# Router para el carrito de compras
router = APIRouter()


def to_cart_response(cart: Cart) -> CartResponse:
    """Convierte el modelo de la BD (SQLAlchemy) al esquema de respuesta."""
    return CartResponse(
        email=cart.email,
        payment_option=cart.payment_option,
        cart_items=[CartItemResponse.model_validate(item) for item in cart.cart_items],
        total_cost=float(get_cart_total_cost(cart)),
    )


@router.get("/{email}", response_model=CartResponse)
async def get_cart(
    user: User = Depends(deps.get_current_user),
    db: AsyncSession = Depends(deps.get_db),
    cart_service: CartService = Depends(deps.get_cart_service)
):
    """
    Obtiene el carrito de un usuario. 404 si el usuario no tiene carrito.
    """
    cart = await cart_service.get_cart_by_user(db, user)
    return to_cart_response(cart)


@router.post("/{email}", response_model=CartResponse)
async def add_product_to_cart(
    item: CartItemCreate,
    user: User = Depends(deps.get_current_user),
    db: AsyncSession = Depends(deps.get_db),
    cart_service: CartService = Depends(deps.get_cart_service)
):
    """
    Añade un producto al carrito del usuario, creando el carrito si hace falta.
    """
    cart = await cart_service.add_product_to_cart(db, user, item.product_id, item.quantity)
    return to_cart_response(cart)


@router.put("/{email}", response_model=CartResponse)
async def update_product_in_cart(
    item: CartItemUpdate,
    user: User = Depends(deps.get_current_user),
    db: AsyncSession = Depends(deps.get_db),
    cart_service: CartService = Depends(deps.get_cart_service)
):
    """
    Cambia la cantidad de un producto del carrito.
    Con cantidad 0 el producto se elimina y se responde 204 sin cuerpo.
    """
    if item.quantity == 0:
        await cart_service.delete_product_from_cart(db, user, item.product_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    cart = await cart_service.update_product_in_cart(db, user, item.product_id, item.quantity)
    return to_cart_response(cart)


@router.put("/{email}/checkout", status_code=status.HTTP_204_NO_CONTENT)
async def checkout(
    user: User = Depends(deps.get_current_user),
    db: AsyncSession = Depends(deps.get_db),
    cart_service: CartService = Depends(deps.get_cart_service)
):
    """
    Procesa el checkout: descuenta el total del monedero y vacía el carrito.
    """
    await cart_service.checkout(db, user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
