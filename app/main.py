import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from .core.config import settings
from .core.database import engine, Base
from .middleware import log_requests
from .routes import activities
# Import all models so their tables are registered on Base
from . import models

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create all tables
Base.metadata.create_all(bind=engine)

app = FastAPI(title="Activity Tracker API", version="1.0.0")

app.middleware("http")(log_requests)

# CORS middleware - added after the logging middleware so it wraps it
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check route BEFORE routers
@app.get("/health")
async def health_check():
    return {"status": "healthy"}

app.include_router(activities.router,
                   prefix="/api/activities", tags=["activities"])


# Global exception handler to preserve CORS headers
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled exceptions and answer 500 with CORS headers present"""
    error_detail = str(exc)
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {error_detail}")
    logger.error(traceback.format_exc())

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": error_detail,
            "type": "internal_server_error"
        },
        headers={
            "Access-Control-Allow-Origin": settings.CORS_ORIGIN,
            "Access-Control-Allow-Credentials": "true"
        }
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and path parameters as 400"""
    logger.warning(f"Malformed request on {request.method} {request.url.path}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())}
    )
