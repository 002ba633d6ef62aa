"""FastAPI application entry point."""
from pathlib import Path
from contextlib import asynccontextmanager
from dotenv import load_dotenv

# Load .env from project root (parent of server_py directory)
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import configurations and middleware
from core.config import get_settings
from core.logging import setup_logging, log_info, log_warning
from middleware.logging import LoggingMiddleware
from utils.response import method_not_allowed

# Import API routers
from api.v1 import generate

# Setup logging
setup_logging()
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup configuration and shutdown."""
    log_info(f"{settings.app_name} v{settings.app_version} starting", "app")
    log_info(f"Environment: {settings.environment}", "app")
    log_info(f"Server: http://{settings.host}:{settings.port}", "app")
    log_info(
        f"Completion endpoint: {settings.openai_base_url} "
        f"(default model {settings.openai_model}, schema {settings.schema_variant})",
        "app",
    )
    if not settings.openai_api_key:
        log_warning("OPENAI_API_KEY not set — generation requests will fail", "app")
    yield
    log_info("Application shutting down", "app")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Generate user stories, tests and a UI data model from design inputs",
    lifespan=lifespan,
)

# Preflight OPTIONS must reach the POST-only route, so no CORS middleware

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# Include API routers
app.include_router(generate.router, prefix="/api")    # Requirements bundle generation


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_exception(request: Request, exc: StarletteHTTPException):
    """Answer 405s from the router with the same plain-text body as the route."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        response = method_not_allowed()
        if exc.headers:
            response.headers.update(exc.headers)
        return response
    return await http_exception_handler(request, exc)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.app_version}


def main():
    """Run the API with uvicorn."""
    import uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
