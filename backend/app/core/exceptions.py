# backend/app/core/exceptions.py
"""
Excepciones de negocio de la aplicación.

Todas las capas señalan los errores con una ApiError que lleva el código de
estado HTTP y un mensaje opcional. La capa HTTP (app.main) las traduce a una
respuesta JSON con la forma {"code": ..., "message": ...}.
"""

from http import HTTPStatus
from typing import Optional

from fastapi import status


class ApiError(Exception):
    """Error estructurado con código de estado HTTP y mensaje legible."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, status_code: Optional[int] = None, message: Optional[str] = None):
        if status_code is not None:
            self.status_code = status_code
        # Sin mensaje se usa la frase estándar del código (p. ej. "Bad Request")
        self.message = message or HTTPStatus(self.status_code).phrase
        super().__init__(self.message)

    def __repr__(self):
        return f"<{self.__class__.__name__}(status_code={self.status_code}, message='{self.message}')>"


class NotFoundError(ApiError):
    """404: la entidad esperada no existe."""
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: Optional[str] = None):
        super().__init__(message=message)


class BadRequestError(ApiError):
    """400: fallo de validación de la petición."""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: Optional[str] = None):
        super().__init__(message=message)


class InternalError(ApiError):
    """500: fallo en la capa de almacenamiento."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None):
        super().__init__(message=message)
