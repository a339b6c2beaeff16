"""FastAPI приложение: function calling и webhook для нумерологии"""
import io
import json
import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from config import settings
from numerology_calculator import (
    MalformedDateError,
    MissingDateError,
    NumerologyCalculator,
    extract_function_dob,
    extract_webhook_dob,
    parse_dob,
)
from numerology_calculator.models import DateOfBirth
from reports import ReportGenerator
from api.error_handlers import register_error_handlers

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, settings.log_level.upper(), logging.INFO)
)
logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = [
    "Origin", "X-Requested-With", "Content-Type", "Accept",
    "Authorization", "key", "value",
]

WEBHOOK_MISSING_REPLY = "Please send your DOB in DD-MM-YYYY format (e.g., 15-08-1985)."
WEBHOOK_INVALID_REPLY = "Invalid DOB. Use DD-MM-YYYY (e.g., 15-08-1985)."
FUNCTION_MISSING_REPLY = "Missing 'dob'. Please send DOB as DD-MM-YYYY."

# Инициализация
calculator = NumerologyCalculator()
report_generator = ReportGenerator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Numerology webhook running on {settings.api_host}:{settings.api_port}")
    yield
    logger.info("Numerology webhook shutting down")


app = FastAPI(
    title="Numerology Webhook API",
    description="API для расчета базового числа, числа судьбы и сетки по дате рождения",
    version="1.0.0",
    lifespan=lifespan,
)

register_error_handlers(app)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=CORS_METHODS,
    allow_headers=CORS_HEADERS,
)


def cors_headers(request: Request) -> Dict[str, str]:
    """Заголовки Access-Control-Allow-* для ответа на OPTIONS"""
    if "*" in settings.cors_origins:
        allow_origin = "*"
    else:
        allow_origin = request.headers.get("origin", "")
        if allow_origin not in settings.cors_origins:
            allow_origin = settings.cors_origins[0] if settings.cors_origins else ""
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
        "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
    }


# Регистрируется последним: внешний слой, OPTIONS не доходит до CORSMiddleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Логирует каждый запрос и отвечает 200 на любой OPTIONS"""
    started = time.perf_counter()
    logger.info(f"{request.method} {request.url.path}")
    logger.debug(f"Headers: {json.dumps(dict(request.headers), indent=2)}")
    logger.debug(f"Raw body length: {request.headers.get('content-length', 'unknown')}")

    if request.method == "OPTIONS":
        logger.info("OPTIONS request handled")
        return Response(status_code=200, headers=cors_headers(request))

    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


def build_payload(dob: str, parsed: DateOfBirth) -> Dict[str, Any]:
    """Ответ с коротким текстом и результатом расчета (и вложенным, и плоским)"""
    result = calculator.calculate(parsed)
    data = result.model_dump()
    payload = {
        "ok": True,
        "reply": report_generator.generate_reply(dob, result),
        "data": data,
        **data,
    }
    logger.debug(f"Response body: {payload}")
    return payload


@app.get("/health")
async def health():
    """Проверка работоспособности"""
    return {
        "ok": True,
        "service": settings.service_name,
        "ts": int(time.time() * 1000),
    }


@app.post("/functions/calc_numerology")
async def calc_numerology(body: Optional[Dict[str, Any]] = Body(default=None)):
    """Function calling: dob, arguments.dob или input.dob"""
    body = body or {}
    logger.debug(f"Parsed request body: {body}")

    dob = extract_function_dob(body)
    if not dob or not isinstance(dob, str):
        raise MissingDateError(
            FUNCTION_MISSING_REPLY,
            extra={"receivedShape": list(body.keys())},
        )

    return build_payload(dob, parse_dob(dob))


@app.post("/hooks/numerology")
async def numerology_webhook(body: Any = Body(default=None)):
    """Webhook: явный dob или дата из текста сообщения. Всегда HTTP 200.

    Тело не-объект (массив, строка, не-JSON) считается пустым.
    """
    if not isinstance(body, dict):
        body = {}
    logger.debug(f"Parsed request body: {body}")

    dob = extract_webhook_dob(body)
    if not dob:
        return {"ok": False, "reply": WEBHOOK_MISSING_REPLY}

    try:
        parsed = parse_dob(dob)
    except MalformedDateError:
        return {"ok": False, "reply": WEBHOOK_INVALID_REPLY}

    return build_payload(dob, parsed)


@app.get("/api/calculate/report")
async def calculate_report(dob: str):
    """Расчет с текстовым отчетом"""
    result = calculator.calculate(parse_dob(dob))
    return {
        "ok": True,
        "report": report_generator.generate_text_report(dob, result),
        "data": result.model_dump(),
    }


@app.get("/api/calculate/visual")
async def calculate_visual(dob: str):
    """Сетка в виде PNG"""
    result = calculator.calculate(parse_dob(dob))
    visual = report_generator.generate_visual_grid(result)
    return StreamingResponse(
        io.BytesIO(visual),
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=grid.png"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
