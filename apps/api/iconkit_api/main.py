"""FastAPI entrypoint for iconkit."""

from __future__ import annotations

import logging
import os
import sys

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .routers.icons import router as icons_router

from packages.iconkit_core.render.errors import InvalidConfigError

logging.basicConfig(
    level=os.environ.get("ICONKIT_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("iconkit_api")

app = FastAPI(title="iconkit API", version="0.1.0")
app.include_router(icons_router)


@app.exception_handler(InvalidConfigError)
async def _invalid_config_handler(request: Request, exc: InvalidConfigError):
    logger.warning("[API] Invalid icon config on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error_code": exc.error_code},
    )


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError):
    # input omitted: NaN is not JSON-encodable
    details = [
        {"loc": err.get("loc"), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    logger.warning("[API] Rejected request body on %s: %d errors", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(details), "error_code": "invalid_config"},
    )


@app.get("/healthz")
def healthz() -> dict[str, str]:
    logger.debug("[HEALTH] Health check requested")
    return {"status": "ok"}
