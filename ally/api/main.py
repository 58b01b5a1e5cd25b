from fastapi import FastAPI

from ally.api.routes_health import router as health_router
from ally.api.routes_oauth import router as oauth_router
from ally.core.config import settings
from ally.core.errors import register_error_handlers
from ally.core.logger import init_logging


def create_app() -> FastAPI:
    init_logging()

    # Interactive docs stay off in production
    is_production = settings.ENV.lower() == "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        debug=False,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    register_error_handlers(app)
    app.include_router(oauth_router)
    app.include_router(health_router)
    return app


app = create_app()
