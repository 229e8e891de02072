"""Identity API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.identity.infrastructure.persistence_postgres.mappings import start_all_mappers
from apps.identity.infrastructure.persistence_postgres.session import dispose_engine
from apps.identity.infrastructure.social import build_social_identity_resolver
from apps.identity.presentation.http.controllers import health_router, users_router
from apps.identity.presentation.http.errors import register_exception_handlers
from apps.identity.setup.config import Settings, get_settings
from apps.identity.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    settings: Settings = app.state.settings
    # Startup
    logger.info("Starting %s (%s)", settings.app_name, settings.environment)

    # ORM 매핑 시작
    start_all_mappers()
    logger.info("ORM mappings initialized")

    yield

    # Shutdown
    logger.info("Shutting down %s", settings.app_name)
    await dispose_engine()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    settings = settings or get_settings()
    setup_logging("DEBUG" if settings.environment == "local" else "INFO")

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Account registration, sign-in and profile API",
        docs_url=f"{settings.api_v1_prefix}/users/docs",
        openapi_url=f"{settings.api_v1_prefix}/users/openapi.json",
        redoc_url=f"{settings.api_v1_prefix}/users/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # 소셜 제공자 목록은 기동 시 한 번만 구성
    app.state.social_identity_resolver = build_social_identity_resolver(settings)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)  # /health (prefix 없음)
    app.include_router(users_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.identity.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "local",
    )
