import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from sheetproxy.config import Settings, get_settings
from sheetproxy.context import AppContext
from sheetproxy.credentials import credential_source
from sheetproxy.exceptions import ConfigurationError
from sheetproxy.log import setup_logging
from sheetproxy.routers.sheets import router as sheets_router

logger = logging.getLogger(__name__)


# --- Exception handlers ---

async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# --- FastAPI app ---

def liveness() -> str:
    return "Sheets proxy is running"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    api = FastAPI(title="Sheetproxy", version="0.1.0")
    api.state.context = AppContext.from_settings(settings)

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api.add_api_route("/", liveness, methods=["GET"], response_class=PlainTextResponse)
    api.include_router(sheets_router)

    api.add_exception_handler(ConfigurationError, configuration_error_handler)
    api.add_exception_handler(Exception, unhandled_error_handler)
    return api


app = create_app()


def run():
    settings = get_settings()
    setup_logging(settings.log_level)
    if not settings.spreadsheet_id:
        logger.warning("SPREADSHEET_ID is not set; sheet routes will answer 500")
    logger.info("Credential source: %s", type(credential_source(settings)).__name__)
    logger.info("Server listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "sheetproxy.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
