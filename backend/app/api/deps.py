# backend/app/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza todas las dependencias que pueden ser inyectadas
en los endpoints de la API: sesión de base de datos, configuración, servicio
de carrito y usuario de la petición.
"""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.database import AsyncSessionLocal
from app.core.config import settings, Settings
from app.core.exceptions import NotFoundError
from app.crud import user_crud
from app.db.models.user_model import User
from app.services.cart_service import CartService

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with AsyncSessionLocal() as session:
        yield session

def get_settings():
    """
    Dependencia de FastAPI para obtener el objeto de configuración.
    """
    return settings

def get_cart_service(settings: Settings = Depends(get_settings)) -> CartService:
    """
    Dependencia para obtener el servicio de carrito.
    """
    return CartService(settings)

async def get_current_user(email: str, db: AsyncSession = Depends(get_db)) -> User:
    """
    Resuelve el usuario de la petición a partir del email de la ruta.

    La autenticación la resuelve una capa externa; aquí solo se comprueba
    que el usuario existe.
    """
    user = await user_crud.get_user_by_email(db, email)
    if user is None:
        raise NotFoundError("User not found")
    return user
