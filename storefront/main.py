from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.core.config import Settings, settings as default_settings
from storefront.core.logging import configure_logging
from storefront.core.security import build_password_context
from storefront.db.session import create_db_and_tables, create_db_engine
from storefront.routers import auth, cart, products

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_db_engine(app.state.settings.DATABASE_URL)
    create_db_and_tables(engine)
    app.state.engine = engine
    logger.info("startup", project=app.state.settings.PROJECT_NAME)
    yield
    engine.dispose()
    logger.info("shutdown")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        lifespan=lifespan,
        description="Users, products and shopping carts",
    )
    app.state.settings = settings
    app.state.pwd_context = build_password_context(settings.BCRYPT_ROUNDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled_exception", method=request.method, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.PROJECT_NAME}. Visit /docs for Swagger UI."}

    app.include_router(auth.router, tags=["auth"])
    app.include_router(products.router, tags=["products"])
    app.include_router(cart.router, tags=["cart"])

    return app


app = create_app()
