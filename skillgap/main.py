import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from skillgap.config import build_sqlalchemy_db_url, settings
from skillgap.database import Base, engine
from skillgap import models  # noqa: F401  (registers ORM tables on Base.metadata)
from skillgap.api.routes.careers import router as careers_router
from skillgap.api.routes.health import router as health_router
from skillgap.api.routes.seed import router as seed_router
from skillgap.api.routes.skills import router as skills_router
from skillgap.routers import analysis, auth, recommendations, users
from skillgap.services.cache import CacheStore
from skillgap.services.llm_client import build_llm_client


logger = logging.getLogger("uvicorn.error")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    # Errors echo the rejected input, which may hold lone surrogates; ASCII-escaped JSON carries them.
    body = json.dumps({"detail": jsonable_encoder(exc.errors())})
    return Response(content=body, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, media_type="application/json")


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One cache and one gateway client per process; handlers get them via dependencies.
        app.state.cache = CacheStore(maxsize=settings.cache_max_entries)
        app.state.llm_client = build_llm_client(settings)
        logger.info("AI enrichment model=%s enabled=%s", settings.ai_primary_model, app.state.llm_client.available)
        yield
        app.state.cache.flush()

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, validation_error_handler)

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(auth.router, prefix="/auth", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(analysis.router)
    application.include_router(recommendations.router)
    application.include_router(careers_router, prefix=settings.api_prefix)
    application.include_router(skills_router, prefix=settings.api_prefix)
    application.include_router(seed_router, prefix=settings.api_prefix)

    # Shared MySQL schemas are managed outside the app; sqlite is created on the fly.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
