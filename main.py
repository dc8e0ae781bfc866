"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for color tools operations
"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
import uvicorn
from fastapi_mcp import FastApiMCP

from colorkit import __version__
from config import get_settings
from routers import colorTools_router
from schemas import ErrorResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Tools MCP Server",
    description="A FastAPI server for color conversion, contrast and mixing",
    version=__version__,
)


@app.exception_handler(HTTPException)
async def http_error(request: Request, exc: HTTPException):
    """Render tool errors in the ErrorResponse shape"""
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=str(exc.detail)).model_dump())


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


app.include_router(colorTools_router)


def run() -> None:
    """Serve the API, with the MCP endpoint mounted when enabled."""
    if settings.mcp_enabled:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
        logger.info("MCP endpoint mounted")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
