"""
Vista Alegre Day Use API - Main Application Entry Point

Serves the single-property day-use booking flow:
- Calendar availability derived from weekday defaults and admin overrides
- Age-tiered booking submission with returning-guest recognition
- Admin capacity, pricing and payment management with CSV export
- EVA concierge chat relayed to a hosted language model
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dayuse.core.config import get_settings
from dayuse.core.logging import setup_logging, get_logger
from dayuse.core.metrics import metrics_endpoint
from dayuse.api.router import api_router
from dayuse.api.middleware import RequestLoggingMiddleware
from dayuse.services.chat_service import get_chat_relay
from dayuse.services.store import get_store, reset_store
from dayuse.services.strategy_factory import get_admission

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    store = get_store()
    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        global_limit=store.global_limit,
        admission=get_admission().name,
    )

    if not get_chat_relay().is_available():
        logger.warning("chat_unavailable", message="Chat replies will use the fallback text")

    yield

    reset_store()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Day-use booking API with per-date capacity and age-tier pricing",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware
app.add_middleware(RequestLoggingMiddleware)

# Routes
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    store = get_store()
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "configured_days": len(store.stored_dates()),
        "chat_available": get_chat_relay().is_available(),
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
