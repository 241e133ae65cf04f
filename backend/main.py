"""
Subjects API - main entry point.
Creates FastAPI app, sets up lifespan, CORS, metrics middleware,
registers all routes.
"""

import time
import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import logger, get_version_info, get_cors_origins
from app.database import client
from app.services.metrics import log_api_metric, cleanup_old_metrics
from app.routes import register_all_routes

# Keeps fire-and-forget tasks referenced until they finish
_background_tasks = set()


def _spawn(coro):
    task = asyncio.create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup logging, metrics cleanup, client shutdown"""
    logger.info("🚀 FastAPI app starting up...")
    logger.info("REGISTERED ROUTES: %s", [r.path for r in app.routes])

    _spawn(cleanup_old_metrics())
    logger.info("=" * 60)

    yield

    logger.info("🛑 FastAPI app shutting down...")
    client.close()


# Create the main app with lifespan
app = FastAPI(title="Subjects API", lifespan=lifespan)

# Create a router with the /api prefix
api_router = APIRouter(prefix="/api")


@api_router.get("/version")
async def get_version():
    """Public version endpoint for deployment verification"""
    return get_version_info()


# Register all route modules on the api_router
register_all_routes(api_router)

# Include the api_router on the app
app.include_router(api_router)


# Root-level health check endpoint (for Kubernetes probes)
@app.get("/health")
async def root_health_check():
    """Health check for Kubernetes liveness/readiness probes"""
    return {"status": "healthy", "service": "Subjects API"}


# ============== METRICS TRACKING MIDDLEWARE ==============

@app.middleware("http")
async def metrics_tracking_middleware(request: Request, call_next):
    """Track API metrics for all requests"""
    start_time = time.time()

    error_type = None
    status_code = 500

    try:
        response = await call_next(request)
        status_code = response.status_code
    except Exception as e:
        error_type = type(e).__name__
        logger.error(f"Request failed: {request.method} {request.url.path}: {e}")
        raise
    finally:
        response_time_ms = int((time.time() - start_time) * 1000)

        _spawn(log_api_metric(
            endpoint=request.url.path,
            method=request.method,
            response_time_ms=response_time_ms,
            status_code=status_code,
            error_type=error_type,
            ip_address=request.client.host if request.client else None
        ))

    return response


# ============== CORS ==============

app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)
