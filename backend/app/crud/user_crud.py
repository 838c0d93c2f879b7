# backend/app/crud/user_crud.py
"""
Este archivo contiene las operaciones CRUD para el modelo User.

Los usuarios los da de alta otro sistema; aquí solo se buscan y se guardan
los cambios de saldo.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from app.db.models.user_model import User

async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """
    Busca un usuario por su dirección de correo electrónico de forma asíncrona.
    """
    result = await db.execute(select(User).filter(User.email == email))
    return result.scalars().first()

async def create_user(db: AsyncSession, name: str, email: str, wallet_money: float = 0, address: Optional[str] = None) -> User:
    """
    Crea un usuario. Solo lo usan los scripts de carga de datos.
    """
    db_user = User(name=name, email=email, wallet_money=wallet_money)
    if address is not None:
        db_user.address = address
    db.add(db_user)
    await db.commit()
    await db.refresh(db_user)
    return db_user

async def save_user(db: AsyncSession, user: User) -> User:
    """
    Persiste los cambios de un usuario (p. ej. el saldo del monedero).
    """
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
