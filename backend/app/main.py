# backend/app/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación: logging, rutas de la API,
traducción de errores de negocio a respuestas JSON y eventos del ciclo de
vida de la aplicación.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings  # Configuración centralizada de la aplicación
from app.core.exceptions import ApiError
from app.core.logging import setup_logging
from app.api.v1.api_router import api_router_v1  # Router principal de la API v1

logger = logging.getLogger(__name__)

# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API del carrito de compras y checkout contra el monedero del usuario"
)

# ========================================
# MANEJO DE ERRORES DE NEGOCIO
# ========================================

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    """Traduce una ApiError a {"code": ..., "message": ...} con su código de estado."""
    if exc.status_code >= 500:
        logger.error(f"❌ ERROR: {request.method} {request.url.path} -> {exc.status_code} {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.status_code, "message": exc.message},
    )

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

app.include_router(api_router_v1, prefix=settings.API_V1_STR)


@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Cart Service API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@app.on_event("startup")
async def startup_event():
    """
    Evento ejecutado al iniciar la aplicación.

    Configura el logging y, si CREATE_TABLES_ON_STARTUP está activo, crea
    las tablas que falten en la base de datos.
    """
    setup_logging()

    if settings.CREATE_TABLES_ON_STARTUP:
        from app.db.database import init_models

        await init_models()
        logger.info("✅ Tablas de la base de datos verificadas")

    logger.info(f"🚀 {settings.PROJECT_NAME} v{settings.PROJECT_VERSION} iniciada")
