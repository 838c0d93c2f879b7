# backend/app/crud/product_crud.py

"""
Operaciones CRUD para el modelo Product.

El catálogo es de solo lectura para el carrito: la operación importante es
get_product_by_id. create_product existe para los scripts de carga de datos.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.product_model import Product, ProductId

import logging

logger = logging.getLogger(__name__)

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_product_by_id(db: AsyncSession, product_id: ProductId) -> Optional[Product]:
    """Obtiene un producto por su identificador de forma asíncrona."""
    return await db.get(Product, str(product_id))

# ========================================
# OPERACIONES DE ESCRITURA (CREATE)
# ========================================

async def create_product(
    db: AsyncSession,
    product_id: ProductId,
    name: str,
    cost: float,
    category: Optional[str] = None,
    rating: Optional[float] = None,
    image: Optional[str] = None,
) -> Product:
    """Crea un producto en el catálogo."""
    db_product = Product(
        product_id=str(product_id),
        name=name,
        category=category,
        cost=cost,
        rating=rating,
        image=image,
    )
    db.add(db_product)
    await db.commit()
    await db.refresh(db_product)
    logger.info(f"🆕 PRODUCTO: Creado producto '{db_product.product_id}' ({db_product.name})")
    return db_product
