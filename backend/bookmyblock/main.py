"""
BookMyBlock API - Main Application Entry Point

One service backing three dashboards:
- Owner: events and screenings, theater applications, seat layouts
- Admin: theater application review
- User: theater catalogue aggregated from the owner endpoints, proximity by pincode
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import httpx

from bookmyblock.core.config import get_settings
from bookmyblock.core.errors import register_exception_handlers
from bookmyblock.core.logging import setup_logging, get_logger
from bookmyblock.core.metrics import metrics_endpoint
from bookmyblock.api.router import api_router
from bookmyblock.api.middleware import RequestLoggingMiddleware
from bookmyblock.infrastructure.kv_store import NamespacedStore, create_kv_store
from bookmyblock.infrastructure.pinning_client import PinningClient
from bookmyblock.services.auth_service import AuthService
from bookmyblock.services.pdf_service import PDFParsingService
from bookmyblock.services.seat_layout_service import SeatLayoutService
from bookmyblock.services.strategy_factory import get_token_verifier
from bookmyblock.services.theater_service import TheaterService
from bookmyblock.stores.event_store import EventStore
from bookmyblock.stores.theater_store import TheaterApplicationStore

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        auth_strategy=settings.AUTH_STRATEGY,
    )

    kv_store = await create_kv_store(settings)
    owner_client = httpx.AsyncClient(base_url=settings.OWNER_API_BASE_URL)
    http_client = httpx.AsyncClient()
    pinning = PinningClient(http_client, settings)

    app.state.event_store = EventStore(settings.DEFAULT_EVENT_CAPACITY)
    app.state.theater_store = TheaterApplicationStore()
    app.state.kv_store = kv_store
    app.state.theater_service = TheaterService(owner_client, settings, PDFParsingService(pinning))
    app.state.seat_layout_service = SeatLayoutService(NamespacedStore(kv_store, "seat-layouts"), pinning)
    app.state.auth_service = AuthService(get_token_verifier(settings), kv_store)

    yield

    await owner_client.aclose()
    await http_client.aclose()
    await kv_store.close()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Theater events, applications and seat layouts for the BookMyBlock dashboards",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

register_exception_handlers(app)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    kv_store = getattr(app.state, "kv_store", None)
    event_store = getattr(app.state, "event_store", None)
    theater_store = getattr(app.state, "theater_store", None)
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "storage": await kv_store.status() if kv_store else {"backend": "unavailable"},
        "events": len(event_store) if event_store is not None else 0,
        "theaterApplications": len(theater_store.all()) if theater_store is not None else 0,
    }


@app.get("/metrics", tags=["Health"])
async def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
