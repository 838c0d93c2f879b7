"""
Fixtures compartidas de los tests.

Cada test usa una base de datos SQLite en memoria nueva (aiosqlite +
StaticPool), con un catálogo mínimo y dos usuarios: uno con dirección y
saldo suficiente, otro con la dirección por defecto.
"""
import os

# Antes de importar la aplicación: el motor global no debe apuntar a PostgreSQL
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api import deps
from app.core.config import Settings
from app.crud import product_crud, user_crud
from app.db.database import init_models
from app.main import app
from app.services.cart_service import CartService

from .constants import NO_ADDRESS_EMAIL, PRODUCT_50, PRODUCT_100, USER_EMAIL


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def cart_service(settings) -> CartService:
    return CartService(settings)


@pytest_asyncio.fixture
async def engine():
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        await product_crud.create_product(session, PRODUCT_100, "YONEX Smash Badminton Racquet", 100, category="Sports")
        await product_crud.create_product(session, PRODUCT_50, "UNIFACTOR Mens Running Shoes", 50, category="Fashion")
        await user_crud.create_user(session, "crio-user", USER_EMAIL, wallet_money=500, address="ITPL Main Rd, Bengaluru")
        await user_crud.create_user(session, "crio-user-2", NO_ADDRESS_EMAIL, wallet_money=500)
        yield session


@pytest_asyncio.fixture
async def user(db):
    return await user_crud.get_user_by_email(db, USER_EMAIL)


@pytest_asyncio.fixture
async def user_without_address(db):
    return await user_crud.get_user_by_email(db, NO_ADDRESS_EMAIL)


@pytest_asyncio.fixture
async def client(db, session_factory):
    """Cliente HTTP contra la app con get_db apuntando a la base de datos de test."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
