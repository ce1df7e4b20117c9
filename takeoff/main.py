from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import quantities, polygon, calculators

logger = logging.getLogger("takeoff")
logger.setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(
    title=settings.APP_NAME,
    description="Quantity take-off for footings, beams, columns, slabs, masonry and plaster",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(quantities.router, prefix="/api")
app.include_router(polygon.router, prefix="/api")
app.include_router(calculators.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "takeoff-engine"}


@app.on_event("startup")
def log_startup():
    logger.info("%s ready — log level %s, display locale %s",
                settings.APP_NAME, settings.LOG_LEVEL, settings.DISPLAY_LOCALE)
