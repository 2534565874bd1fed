import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.routing import Mount

from wolfram_query.config import get_settings
from wolfram_query.exceptions import ConfigurationError
from wolfram_query.mcp_server import mcp
from wolfram_query.models.common import ErrorResponse
from wolfram_query.routers.wolfram import router as wolfram_router


# --- FastAPI app ---

api = FastAPI(title="Wolfram Query", version="0.1.0")
api.include_router(wolfram_router)


# --- Exception handlers ---

@api.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    body = ErrorResponse(error_code="configuration_error", message=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump())


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=mcp_app.lifespan,
)


def run():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "wolfram_query.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
