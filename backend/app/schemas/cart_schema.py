# backend/app/schemas/cart_schema.py
"""
Esquemas Pydantic para la gestión del carrito de la compra.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .product_schema import ProductResponse


class CartItemCreate(BaseModel):
    """Esquema para añadir un producto al carrito."""
    product_id: str = Field(..., min_length=1, description="Identificador del producto")
    quantity: int = Field(..., gt=0, description="Cantidad solicitada")


class CartItemUpdate(BaseModel):
    """Esquema para cambiar la cantidad de un producto. Cantidad 0 lo elimina."""
    product_id: str = Field(..., min_length=1, description="Identificador del producto")
    quantity: int = Field(..., ge=0, description="Nueva cantidad")


class CartItemResponse(BaseModel):
    """Una línea del carrito con su producto."""
    product: ProductResponse
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartResponse(BaseModel):
    """Esquema que representa el estado completo del carrito."""
    email: str
    payment_option: str
    cart_items: List[CartItemResponse] = []
    total_cost: float = 0.0

    model_config = ConfigDict(from_attributes=True)
