import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from usertodo import config
from usertodo.database import Database
from usertodo.errors import ResourceNotFound, StoreError, public_message
from usertodo.routers import todos, users
from usertodo.schemas.envelope import RouteMissEnvelope
from usertodo.utils.request_log import configure_logging, log_requests
from usertodo.utils.responses import failure

logger = logging.getLogger("usertodo")


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(database: Optional[Database] = None, *, expose_store_errors: Optional[bool] = None) -> FastAPI:
    """Build the API around ``database`` (a new one on ``DATABASE_URL`` if omitted).

    The schema is created here; if the store is unreachable the app still
    starts and individual requests fail with a store error later.
    """
    configure_logging(config.LOG_LEVEL)
    if database is None:
        database = Database(config.DATABASE_URL)
    if expose_store_errors is None:
        expose_store_errors = config.EXPOSE_STORE_ERRORS

    database.init_schema()

    app = FastAPI(
        title="Users & Todos API",
        responses={404: {"model": RouteMissEnvelope, "description": "Route not found"}},
    )
    app.state.database = database
    app.state.expose_store_errors = expose_store_errors

    app.middleware("http")(log_requests)

    @app.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
    def home():
        return "Hello World!"

    app.include_router(users.router)
    app.include_router(todos.router)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.kind.value, exc.message)
        return failure(public_message(exc, request.app.state.expose_store_errors), 500)

    @app.exception_handler(ResourceNotFound)
    async def not_found_handler(request: Request, exc: ResourceNotFound):
        return failure(exc.message, 404)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return failure(_validation_message(exc), 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # no route for this method+path
        if exc.status_code in (404, 405):
            return failure("Route not found", 404, path=request.url.path)
        return failure(str(exc.detail), exc.status_code)

    # Generic error handler to return JSON errors for unexpected exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return failure("Internal server error", 500)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    logger.info("Server running on http://localhost:%s", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
