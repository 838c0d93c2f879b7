# backend/app/crud/cart_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo Cart.

Este módulo proporciona funciones para buscar, crear y guardar carritos.
Las líneas del carrito (CartItem) se gestionan a través de la colección
Cart.cart_items y se persisten junto con el carrito.
"""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models.cart_model import Cart, CartItem

def _cart_query():
    """Consulta base del carrito con líneas y productos precargados."""
    return select(Cart).options(
        selectinload(Cart.cart_items).selectinload(CartItem.product)
    )

async def _reload_cart(db: AsyncSession, cart_id: int) -> Cart:
    """
    Vuelve a leer el carrito tras un commit, sobrescribiendo el estado en memoria.
    """
    result = await db.execute(
        _cart_query()
        .filter(Cart.cart_id == cart_id)
        .execution_options(populate_existing=True)
    )
    return result.scalars().one()

async def get_cart_by_email(db: AsyncSession, email: str) -> Optional[Cart]:
    """
    Busca el carrito de un usuario por su email de forma asíncrona.
    Las líneas y sus productos vienen precargados.
    """
    result = await db.execute(_cart_query().filter(Cart.email == email))
    return result.scalars().first()

async def create_cart(db: AsyncSession, email: str, payment_option: str) -> Cart:
    """
    Crea un carrito vacío para el email dado.
    """
    db_cart = Cart(
        email=email,
        cart_items=[],
        payment_option=payment_option,
    )
    db.add(db_cart)
    await db.commit()
    return await _reload_cart(db, db_cart.cart_id)

async def save_cart(db: AsyncSession, cart: Cart) -> Cart:
    """
    Persiste los cambios de un carrito existente, incluidas altas y bajas de líneas.
    """
    db.add(cart)
    await db.commit()
    return await _reload_cart(db, cart.cart_id)
