"""
Purpose:
- FastAPI application factory and router mounts.
- Settings and the Gemini client are built once here and kept on app.state.
- `run()` serves the app with Uvicorn on settings.host:settings.port (3000 by default).
"""

from __future__ import annotations
import logging
from typing import Optional
import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from .core.log import configure_logging
from .core.settings import Settings
from .vlm.gemini_client import GeminiClient
from .api.pages import STATIC_DIR, router as pages_router
from .api.upload import router as upload_router

logger = logging.getLogger(__name__)

def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Car Info API", version="0.1.0")
    app.state.settings = settings
    app.state.gemini = GeminiClient(settings, transport=transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.include_router(pages_router)
    app.include_router(upload_router)
    logger.info("Using model %s", settings.gemini_model)
    return app

app = create_app()

def run() -> None:
    settings: Settings = app.state.settings
    logger.info("App is running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())

if __name__ == "__main__":
    run()
