"""
Job Portal - Main Application

FastAPI backend with:
- SQLite (default) or PostgreSQL for all data
- JWT authentication for employees and students
- Tables created on startup if missing

Run: uvicorn job_portal.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from job_portal import __version__
from job_portal.api.routes import api_router
from job_portal.core.config import get_settings
from job_portal.core.errors import ServerError
from job_portal.db.database import engine, check_db_connection
from job_portal.db.schema import init_schema

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    init_schema(engine)
    logger.info("%s API ready", settings.app_name)
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    Job board for part-time work and internships.

    ## Features
    - **Authentication**: register as employee or student, JWT login/logout
    - **Profiles**: own profile, public employer/student cards
    - **Jobs**: post, search, filter and delete listings
    - **Applications**: apply once per job, employer approves or rejects
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Bad or missing fields are a 400, not FastAPI's default 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Unhandled database failures: log everything, tell the client nothing."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    error = ServerError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.app_name} API"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check with database status."""
    return {
        "status": "healthy",
        "database": "connected" if check_db_connection() else "disconnected"
    }
