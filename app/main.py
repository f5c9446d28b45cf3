import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.core.logging import setup_logging
from app.core.database import create_db_and_tables, dispose_engine
from app.core.errors import AppError

# Import Routers
from app.routers import core, organizations, inventories, playbooks, jobs

settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manages the simulator lifecycle.

    On Startup:
    - Creates database tables if missing.

    On Shutdown:
    - Releases every pooled database connection.
    """
    logger.info(f"{settings.APP_NAME} starting up...")
    create_db_and_tables()
    logger.info(f"{settings.APP_NAME} listening on port {settings.PORT}")

    yield

    logger.info(f"{settings.APP_NAME} shutting down...")
    dispose_engine()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.VERSION,
    lifespan=lifespan
)

# Global Exception Handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Maps validation and not-found errors onto their status codes."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Reports unparseable bodies and path parameters as 400 instead of 422."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "invalid request"
    return JSONResponse(status_code=400, content={"error": message})

@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures, answered inside the CORS layer so browsers can read them."""
    logger.exception("Storage failure")
    return JSONResponse(status_code=500, content={"error": "internal_error", "details": str(exc)})

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Catches anything the handlers above do not."""
    logger.exception("Unhandled exception")
    return JSONResponse(status_code=500, content={"error": "internal_error", "details": str(exc)})

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(core.router)
app.include_router(organizations.router)
app.include_router(inventories.router)
app.include_router(playbooks.router)
app.include_router(jobs.router)
