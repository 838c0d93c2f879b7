# backend/app/db/models/cart_model.py
"""
Este archivo contiene los modelos del carrito de compras.

Un carrito por email de usuario. Sus líneas (CartItem) referencian un producto
y una cantidad; como mucho hay una línea por producto dentro de un carrito.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from app.db.database import Base
from app.db.models.product_model import Product, ProductId


class Cart(Base):
    __tablename__ = "carts"

    cart_id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    payment_option = Column(String(50), nullable=False)

    # Las líneas se cargan siempre junto al carrito y se borran al sacarlas de la lista
    cart_items = relationship(
        "CartItem",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItem.item_id",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Cart(id={self.cart_id}, email='{self.email}', items={len(self.cart_items)})>"


class CartItem(Base):
    __tablename__ = "cart_items"

    item_id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Integer, ForeignKey("carts.cart_id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(50), ForeignKey("products.product_id"), nullable=False)
    quantity = Column(Integer, nullable=False)

    cart = relationship("Cart", back_populates="cart_items")
    product = relationship(Product, lazy="selectin")

    def refers_to(self, product_id: ProductId) -> bool:
        """Compara por valor el producto de la línea con el identificador dado."""
        return self.product_id == str(product_id)

    def __repr__(self):
        return f"<CartItem(id={self.item_id}, cart_id={self.cart_id}, product_id='{self.product_id}', quantity={self.quantity})>"
