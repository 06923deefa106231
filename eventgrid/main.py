"""Event Grid layout and recurrence service."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventgrid.core.config import settings
from eventgrid.routes import layout, recurrence

# Configure logging
log_dir = Path.home() / ".logs" / "eventgrid"
log_dir.mkdir(parents=True, exist_ok=True)
log_file = log_dir / "latest.log"

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    filename=str(log_file),
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    logger.info("Starting Event Grid service")
    yield
    logger.info("Event Grid service shut down")


app = FastAPI(
    title=settings.app_name,
    description="Overlap layout and RRULE recurrence engine for calendar views",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for browser clients
origins = (
    ["*"]
    if settings.allowed_origins == "*"
    else [o.strip() for o in settings.allowed_origins.split(",")]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(layout.router)
app.include_router(recurrence.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}
