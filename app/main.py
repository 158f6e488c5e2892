from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.deps import get_network
from api.v1 import chat, token_balance
from app.balance.errors import MalformedRequestError, ServiceError
from app.config import get_settings
from app.core.logging import configure_logging
from app.core.middleware import RequestContextMiddleware

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request"


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Token Balance Chat Service", version="0.1.0")
    app.add_middleware(RequestContextMiddleware)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if exc.http_status >= 500:
            logger.error("request failed code=%s: %s", exc.code, exc.message)
        return JSONResponse(status_code=exc.http_status, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        err = MalformedRequestError(_validation_message(exc))
        return JSONResponse(status_code=err.http_status, content={"error": err.message})

    @app.get("/healthz")
    async def healthz():
        s = get_settings()
        network = get_network()
        return {
            "ok": True,
            "network": network.name,
            "chainId": network.chain_id,
            "llm_model": s.LLM_MODEL,
            "llm_configured": bool(s.OPENAI_API_KEY),
        }

    app.include_router(token_balance.router, prefix="/v1")
    app.include_router(chat.router, prefix="/v1")
    return app


app = create_app()
