# backend/app/services/cart_service.py
"""
Servicio de Carrito de Compras para la aplicación.

Implementa la lógica de negocio del carrito de un usuario sobre la base de
datos: consulta, alta de productos, cambio de cantidades, baja de productos
y checkout contra el saldo del monedero.

Cada operación sigue el mismo esquema: leer el carrito una sola vez,
validar las precondiciones, mutar y persistir. Los fallos se señalan con
excepciones ApiError que la capa HTTP traduce a respuestas.
"""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.exceptions import ApiError, BadRequestError, InternalError, NotFoundError
from app.crud import cart_crud, product_crud, user_crud
from app.db.models.cart_model import Cart, CartItem
from app.db.models.product_model import ProductId
from app.db.models.user_model import User

logger = logging.getLogger(__name__)

MSG_NO_CART = "User does not have a cart"
MSG_NO_CART_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
MSG_CART_CREATION_FAILED = "User cart Creation failed."
MSG_PRODUCT_ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
MSG_PRODUCT_NOT_IN_DB = "Product doesn't exist in database"
MSG_PRODUCT_NOT_IN_CART = "Product not in cart"
MSG_EMPTY_CART = "Cart is empty"
MSG_ADDRESS_NOT_SET = "Address not set"
MSG_INSUFFICIENT_BALANCE = "Insufficient balance"


def find_cart_item(cart: Cart, product_id: ProductId) -> Optional[CartItem]:
    """Devuelve la línea del carrito para el producto, o None si no está."""
    for item in cart.cart_items:
        if item.refers_to(product_id):
            return item
    return None


def get_cart_total_cost(cart: Cart) -> Decimal:
    """
    Calcula el coste total del carrito: suma de coste unitario por cantidad.
    """
    total = Decimal(0)
    for item in cart.cart_items:
        total += Decimal(str(item.product.cost)) * item.quantity
    return total


class CartService:
    """
    Servicio para gestionar el carrito de compras de un usuario.

    La configuración se inyecta en el constructor; de ella salen la opción de
    pago por defecto de los carritos nuevos y la dirección por defecto con la
    que se detecta que el usuario aún no ha configurado su envío.
    """
    def __init__(self, settings: Settings):
        self.settings = settings

    async def _require_cart(self, db: AsyncSession, user: User, error: ApiError) -> Cart:
        """Obtiene el carrito del usuario o lanza el error indicado si no existe."""
        cart = await cart_crud.get_cart_by_email(db, user.email)
        if cart is None:
            logger.warning(f"⚠️ CARRITO: '{user.email}' no tiene carrito ({error.status_code})")
            raise error
        return cart

    async def get_cart_by_user(self, db: AsyncSession, user: User) -> Cart:
        """
        Obtiene el carrito del usuario.

        Raises:
            NotFoundError: si el usuario no tiene carrito.
        """
        return await self._require_cart(db, user, NotFoundError(MSG_NO_CART))

    async def add_product_to_cart(self, db: AsyncSession, user: User, product_id: ProductId, quantity: int) -> Cart:
        """
        Añade un producto nuevo al carrito, creando el carrito si no existe.

        Añadir es siempre una inserción: si el producto ya está en el carrito
        hay que usar la actualización o el borrado.

        Raises:
            InternalError: si falla la creación del carrito.
            BadRequestError: si el producto ya está en el carrito o no existe.
        """
        # El rollback expira todas las instancias de la sesión, incluido el usuario
        email = user.email
        cart = await cart_crud.get_cart_by_email(db, email)
        if cart is None:
            try:
                cart = await cart_crud.create_cart(
                    db,
                    email=email,
                    payment_option=self.settings.DEFAULT_PAYMENT_OPTION,
                )
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(f"❌ ERROR: No se pudo crear el carrito de '{email}': {e}")
                raise InternalError(MSG_CART_CREATION_FAILED) from e
            logger.info(f"🛒 CARRITO: Creado carrito para '{email}'")

        if find_cart_item(cart, product_id) is not None:
            raise BadRequestError(MSG_PRODUCT_ALREADY_IN_CART)

        product = await product_crud.get_product_by_id(db, product_id)
        if product is None:
            raise BadRequestError(MSG_PRODUCT_NOT_IN_DB)

        cart.cart_items.append(
            CartItem(product_id=product.product_id, product=product, quantity=quantity)
        )
        cart = await cart_crud.save_cart(db, cart)
        logger.info(f"✅ CARRITO: Añadido '{product.product_id}' x{quantity} al carrito de '{email}'")
        return cart

    async def update_product_in_cart(self, db: AsyncSession, user: User, product_id: ProductId, quantity: int) -> Cart:
        """
        Cambia la cantidad de un producto que ya está en el carrito.

        Raises:
            BadRequestError: si no hay carrito, el producto no existe o no está en el carrito.
        """
        cart = await self._require_cart(db, user, BadRequestError(MSG_NO_CART_FOR_UPDATE))

        product = await product_crud.get_product_by_id(db, product_id)
        if product is None:
            raise BadRequestError(MSG_PRODUCT_NOT_IN_DB)

        item = find_cart_item(cart, product_id)
        if item is None:
            raise BadRequestError(MSG_PRODUCT_NOT_IN_CART)

        item.quantity = quantity
        cart = await cart_crud.save_cart(db, cart)
        logger.info(f"🔄 CARRITO: '{product.product_id}' ahora x{quantity} en el carrito de '{user.email}'")
        return cart

    async def delete_product_from_cart(self, db: AsyncSession, user: User, product_id: ProductId) -> None:
        """
        Elimina un producto del carrito. El carrito se conserva aunque quede vacío.

        Raises:
            BadRequestError: si no hay carrito o el producto no está en él.
        """
        cart = await self._require_cart(db, user, BadRequestError(MSG_NO_CART))

        item = find_cart_item(cart, product_id)
        if item is None:
            raise BadRequestError(MSG_PRODUCT_NOT_IN_CART)

        cart.cart_items.remove(item)
        await cart_crud.save_cart(db, cart)
        logger.info(f"🗑️ CARRITO: Eliminado '{product_id}' del carrito de '{user.email}'")

    async def checkout(self, db: AsyncSession, user: User) -> None:
        """
        Paga el carrito con el saldo del monedero y lo vacía.

        Se guarda primero el usuario y después el carrito. No hay transacción
        compensatoria: si falla el segundo guardado el saldo queda descontado
        y el carrito conserva sus líneas.

        Raises:
            NotFoundError: si el usuario no tiene carrito.
            BadRequestError: carrito vacío, dirección sin configurar o saldo insuficiente.
        """
        cart = await self._require_cart(db, user, NotFoundError(MSG_NO_CART))

        if not cart.cart_items:
            raise BadRequestError(MSG_EMPTY_CART)

        if not user.has_set_non_default_address(self.settings.DEFAULT_ADDRESS):
            raise BadRequestError(MSG_ADDRESS_NOT_SET)

        total_cost = get_cart_total_cost(cart)
        wallet_money = Decimal(str(user.wallet_money))
        if total_cost > wallet_money:
            logger.warning(f"⚠️ CHECKOUT: Saldo insuficiente para '{user.email}' ({wallet_money} < {total_cost})")
            raise BadRequestError(MSG_INSUFFICIENT_BALANCE)

        user.wallet_money = wallet_money - total_cost
        await user_crud.save_user(db, user)

        cart.cart_items.clear()
        try:
            await cart_crud.save_cart(db, cart)
        except SQLAlchemyError as e:
            logger.error(
                f"❌ ERROR: Saldo de '{user.email}' descontado ({total_cost}) pero no se pudo vaciar el carrito: {e}"
            )
            raise

        logger.info(f"💳 CHECKOUT: '{user.email}' pagó {total_cost}, saldo restante {user.wallet_money}")
