"""
FastAPI application entry point
"""
import logging

from app import config

# Load environment variables FIRST, before any other imports
config.init_env()

logging.basicConfig(level=config.log_level())
logging.getLogger("chat").setLevel(logging.INFO)

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.errors import InternalError, ValidationError
from app.routes import chat

log = logging.getLogger("chat")

SERVICE_NAME = "Markdown Chat Mock API"
SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle: announce endpoints on boot."""
    base = f"http://localhost:{config.port()}"
    log.info(f"Server is running on port {config.port()}")
    log.info(f"Health check: {base}/health")
    log.info(f"Chat endpoint: {base}/api/chat")
    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Mock chat backend returning canned markdown responses",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

# CORS middleware - allow frontend to communicate
# Wildcard origins never get credentials.
_origins = config.cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials="*" not in _origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error handlers ──

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies (not JSON, non-string message) count as a missing message."""
    return await validation_error_handler(request, ValidationError())


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.error("Unhandled error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Something broke!", "details": str(exc)},
    )


# Include routers
app.include_router(chat.router, prefix="/api", tags=["chat"])


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": {
            "health": "/health",
            "chat": "/api/chat (POST)",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}


def run():
    import uvicorn
    uvicorn.run("app.main:app", host=config.host(), port=config.port())


if __name__ == "__main__":
    run()
