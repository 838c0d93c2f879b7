# backend/app/schemas/product_schema.py
"""
Esquemas Pydantic para el modelo Product.

El carrito solo expone productos en sus respuestas, por lo que aquí solo
vive el esquema de respuesta.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, validator


class ProductResponse(BaseModel):
    """Esquema de respuesta de un producto del catálogo."""
    product_id: str
    name: str
    category: Optional[str] = None
    cost: float
    rating: Optional[float] = None
    image: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

    @validator('cost', pre=True, allow_reuse=True)
    def decimal_to_float(cls, value):
        """La base de datos devuelve Numeric como Decimal."""
        if isinstance(value, Decimal):
            return float(value)
        return value
