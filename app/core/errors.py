from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status
import logging

logger = logging.getLogger("app.errors")


class ServiceError(Exception):
    """Error de negocio que la capa HTTP traduce a una respuesta"""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "service_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Dato de entrada faltante o inválido"""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"


class NotFoundError(ServiceError):
    """El identificador referenciado no existe"""
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"


def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.error_code,
            "detail": exc.message,
        },
    )


def server_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "error": "internal_error",
            "detail": "Ocurrió un error inesperado.",
        },
    )
