# backend/app/db/models/product_model.py
"""
Modelo de producto del catálogo.

El catálogo lo gestiona otro sistema; el carrito solo lo lee para validar
que un producto existe y para conocer su coste unitario.
"""

from sqlalchemy import Column, String, Text, Numeric, Float

from app.db.database import Base

# Identificador canónico de producto. Todas las comparaciones son por valor.
ProductId = str


class Product(Base):
    __tablename__ = "products"

    product_id = Column(String(50), primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    category = Column(String(100), nullable=True)
    cost = Column(Numeric(10, 2), nullable=False)
    rating = Column(Float, nullable=True)
    image = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Product(id={self.product_id}, name='{self.name}', cost={self.cost})>"

