import logging
import time
from typing import Any, Optional, Sequence

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import orders_router
from config import Settings, settings
from errors import OrderError, ValidationDetails, ValidationFailed
from repositories.order_store import OrderStore

logger = logging.getLogger("orders-api")


def configure_logging(dev_logging: bool) -> None:
    if dev_logging:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _field_name(loc: Sequence[Any]) -> str:
    parts = [part for part in loc if isinstance(part, str) and part != "body"]
    return parts[0] if parts else "body"


def request_validation_details(exc: RequestValidationError) -> ValidationDetails:
    details: ValidationDetails = {}
    for error in exc.errors():
        details.setdefault(_field_name(error.get("loc", ())), []).append(error.get("msg", "invalid value"))
    return details


async def order_error_handler(request: Request, exc: OrderError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await order_error_handler(request, ValidationFailed(request_validation_details(exc)))


def create_app(
    order_store: Optional[OrderStore] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title="Orders API")
    app.state.order_store = order_store if order_store is not None else OrderStore()

    if app_settings.allowed_origins == ["*"]:
        allow_origins = ["*"]
        logger.warning(
            "CORS is set to allow all origins with credentials; set ALLOWED_ORIGINS to explicit values outside local dev."
        )
    else:
        allow_origins = app_settings.allowed_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(OrderError, order_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(orders_router)

    if app_settings.dev_logging:

        @app.middleware("http")
        async def log_requests(request, call_next):
            logger.info("Incoming: %s %s", request.method, request.url.path)
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("Response: %s (took %.2fms)", response.status_code, elapsed_ms)
            return response

    return app


configure_logging(settings.dev_logging)
app = create_app()


def run() -> None:
    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
