#main file:
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.settings import settings
from .database import engine, Base
from .errors import AppError
from .routers import ai, auth, exercises, images, meal_plan, user_status, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Server running in %s mode on port %s", settings.ENVIRONMENT, settings.PORT)
    yield


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if tuple(first.get("loc", ())) == ("body", "messages"):
        return "Messages array is required"
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"{location}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if exc.status_code == 404 and detail == "Not Found":
            detail = f"Not Found - {request.url.path}"
        return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def register_frontend(app: FastAPI) -> None:
    if not settings.is_production:
        @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
        def index():
            return "Server is ready"
        return

    build_dir = Path(settings.FRONTEND_BUILD_DIR).resolve()
    index_file = build_dir / "index.html"

    @app.api_route("/{full_path:path}", methods=["POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
    def unmatched_write(full_path: str):
        raise StarletteHTTPException(status_code=404)

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_frontend(full_path: str):
        if full_path.startswith("api/"):
            raise StarletteHTTPException(status_code=404)
        candidate = (build_dir / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(build_dir):
            return FileResponse(candidate)
        return FileResponse(index_file)


def create_app() -> FastAPI:
    app=FastAPI(title="FitTrack API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(user_status.router)
    app.include_router(meal_plan.router)
    app.include_router(ai.router)
    app.include_router(images.router)
    app.include_router(exercises.router)

    @app.get("/api/health", tags=["health"])
    def health():
        return {"status": "ok"}

    register_frontend(app)
    register_error_handlers(app)
    return app


app = create_app()
