# backend/app/db/models/user_model.py
"""
Se encarga de definir el modelo de usuario para la aplicación.

Los usuarios se crean y gestionan fuera de este servicio. El carrito solo
descuenta el saldo del monedero durante el checkout.
"""

from sqlalchemy import Column, Integer, String, Text, Numeric

from app.db.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255))
    email = Column(String(255), unique=True, index=True, nullable=False)
    wallet_money = Column(Numeric(12, 2), nullable=False, default=0)
    # Mismo valor que Settings.DEFAULT_ADDRESS por defecto
    address = Column(Text, nullable=False, default="ADDRESS_NOT_SET", server_default="ADDRESS_NOT_SET")

    def has_set_non_default_address(self, default_address: str) -> bool:
        """Indica si el usuario ha configurado una dirección de envío propia."""
        return self.address != default_address

    def __repr__(self):
        return f"<User(id={self.user_id}, email='{self.email}')>"
