"""
Profile API - FastAPI Application
Main application entry point
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
import logging

from profile_api.config import settings
from profile_api.core import APIError
from profile_api.database import init_db, close_db
from profile_api.api import auth, users, images

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler
    Runs on startup and shutdown
    """
    # Startup
    logger.info("Starting Profile API...")

    init_db()
    logger.info("Database initialized successfully")

    settings.upload_path.mkdir(parents=True, exist_ok=True)
    logger.info(f"Serving uploads from {settings.upload_path.resolve()}")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down Profile API...")
    close_db()


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="User registration, login, profile photos and per-user image storage",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS restricted to the frontend origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    """Render application errors with their status code"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed request fields are client errors (400)"""
    problems = [
        f"{'.'.join(str(part) for part in error['loc'][1:]) or error['loc'][0]}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": problems}
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle uncaught exceptions"""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Server error"}
    )


# Include routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(images.router)

# Uploaded files, referenced by User.photo as 'uploads/<file>'
app.mount(
    f"/{settings.UPLOAD_URL_PREFIX.strip('/')}",
    StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
    name="uploads"
)


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "redoc": "/redoc"
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "profile-api"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "profile_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
