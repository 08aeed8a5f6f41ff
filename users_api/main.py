import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .dependencies import build_user_service
from .logging_config import setup_logging
from .routes import users as users_routes

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)

    @app.on_event("startup")
    def on_startup() -> None:
        app.state.user_service = build_user_service(settings.user_store)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled application error", exc_info=exc)
        return JSONResponse({"detail": "Internal server error"}, status_code=500)

    @app.get("/")
    def read_root():
        return {"message": f"{settings.app_name} is up"}

    app.include_router(users_routes.router)
    return app


app = create_app()
