"""Глобальные обработчики ошибок API.

Все ошибки возвращаются в формате webhook-платформы:
{"ok": false, "reply": "<текст для пользователя>"}.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from numerology_calculator.errors import NumerologyError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Регистрирует все обработчики ошибок в приложении"""
    _register_numerology_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_numerology_error_handler(app: FastAPI) -> None:

    @app.exception_handler(NumerologyError)
    async def numerology_error_handler(request: Request, exc: NumerologyError):
        logger.warning(f"{exc.code} on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Невалидный JSON и неверная форма тела запроса"""
        errors = exc.errors()
        if any(e.get("type") == "json_invalid" for e in errors):
            logger.warning(f"JSON parse error on {request.url.path}: {errors}")
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"ok": False, "reply": "Invalid JSON format"},
            )

        logger.warning(f"Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(errors),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Внутренние детали наружу не отдаются"""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"ok": False, "reply": "Internal server error"},
        )


def _build_validation_error_response(errors) -> dict:
    return {
        "ok": False,
        "reply": "Invalid request body",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }
