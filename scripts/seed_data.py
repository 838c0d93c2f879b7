# scripts/seed_data.py

"""
Script de carga de datos de ejemplo.

Propósito:
Crea las tablas si no existen y da de alta un pequeño catálogo de productos
y un par de usuarios para probar el carrito en local. Los registros que ya
existen no se tocan, así que el script se puede ejecutar varias veces.

Requisitos Previos:
-   Un archivo `.env` configurado (o SQLALCHEMY_DATABASE_URI en el entorno).
-   La base de datos en ejecución.
"""
import asyncio
import logging
import os
import sys

# Añadir el directorio backend/ al PYTHONPATH
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "backend"))
sys.path.insert(0, project_root)

from app.core.logging import setup_logging
from app.crud import product_crud, user_crud
from app.db.database import AsyncSessionLocal, engine, init_models

logger = logging.getLogger("seed_data")

# --- Datos de ejemplo ---
PRODUCTS = [
    {"product_id": "BW0jAAeDJmlZCF8i", "name": "UNIFACTOR Mens Running Shoes", "category": "Fashion", "cost": 50, "rating": 5},
    {"product_id": "KCRwjF7lN97HnEaY", "name": "YONEX Smash Badminton Racquet", "category": "Sports", "cost": 100, "rating": 5},
    {"product_id": "PmInA797xJhMIPti", "name": "Tan Leatherette Weekender Duffle", "category": "Fashion", "cost": 150, "rating": 4},
]

USERS = [
    {"name": "crio-user", "email": "crio-user@gmail.com", "wallet_money": 500, "address": "ITPL Main Rd, Bengaluru"},
    {"name": "crio-user-2", "email": "crio-user-2@gmail.com", "wallet_money": 50},
]


async def main():
    setup_logging()
    logger.info("--- Iniciando carga de datos ---")
    try:
        await init_models()
        async with AsyncSessionLocal() as db:
            for data in PRODUCTS:
                if await product_crud.get_product_by_id(db, data["product_id"]) is None:
                    await product_crud.create_product(db, **data)

            for data in USERS:
                if await user_crud.get_user_by_email(db, data["email"]) is None:
                    await user_crud.create_user(db, **data)
                    logger.info(f"🆕 USUARIO: Creado '{data['email']}'")
    finally:
        await engine.dispose()
        logger.info("--- Carga de datos finalizada ---")


if __name__ == "__main__":
    asyncio.run(main())
