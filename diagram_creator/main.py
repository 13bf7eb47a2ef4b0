from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import uvicorn

from diagram_creator import __version__
from diagram_creator.core.config import settings
from diagram_creator.core.logging import setup_logging
from diagram_creator.controllers import diagram_controller
from diagram_creator.models.enums import DIAGRAM_TYPES

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup", environment=settings.environment)
    yield
    logger.info("Application shutdown")


app = FastAPI(
    title="Mermaid Diagram Creator API",
    description="Generates Mermaid diagram definitions from structured diagram data",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "local" else None,
    redoc_url="/redoc" if settings.environment == "local" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(diagram_controller.router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {
        "message": "Mermaid Diagram Creator API is running",
        "version": __version__,
        "environment": settings.environment,
        "diagram_types": list(DIAGRAM_TYPES.values()),
        "docs_url": "/docs" if settings.environment == "local" else "Documentation disabled in production"
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "environment": settings.environment,
    }


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.detail,
            "success": False,
            "status_code": exc.status_code
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal server error",
            "success": False,
            "status_code": 500
        }
    )


def run():
    uvicorn.run(
        "diagram_creator.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
        log_config=None
    )


if __name__ == "__main__":
    run()
