"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import auth, bids, courses
from app.core.config import settings
from app.core.context import AppContext
from app.core.errors import AppError
from app.core.logging import get_logger, setup_logging
from app.db.mongo import create_client, ping


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else "INFO")
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)

    client = create_client(settings)
    try:
        await ping(client)
    except Exception as exc:
        logger.error("MongoDB ping failed", error=str(exc))
        client.close()
        raise
    logger.info("Pinged deployment, connected to MongoDB", db=settings.MONGO_DB)

    context = AppContext(settings=settings, db=client[settings.MONGO_DB], client=client)
    app.state.context = context
    yield
    logger.info("Application shutting down")
    context.close()


app = FastAPI(
    title="Achieve IT API",
    description="Course bidding marketplace backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render domain errors as ``{"message": ...}`` with their status code."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(auth.router)
app.include_router(courses.router)
app.include_router(bids.router)


@app.get("/", tags=["Health"])
async def root() -> str:
    return "Hello from Achieve IT Server...."


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
