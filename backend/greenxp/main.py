# backend/greenxp/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from greenxp.config import settings
from greenxp.db import healthcheck
from greenxp.errors import register_error_handlers
from greenxp.routers.missions import router as missions_router
from greenxp.routers.user_missions import router as user_missions_router
from greenxp.routers.users import router as users_router


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def build_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="GreenXP API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def banner():
        return "GreenXP API is running!"

    # Health
    @app.get("/health")
    def health():
        return healthcheck()

    app.include_router(missions_router)
    app.include_router(user_missions_router)
    app.include_router(users_router)

    return app


app = build_app()
