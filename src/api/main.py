import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_settings
from src.rules.loader import load_rules
from src.rules.models import Rules

settings = get_settings()

# Logging setup
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _load_startup_rules() -> Rules:
    try:
        return load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)


rules = _load_startup_rules()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Rules loaded from %s (version %s)", settings.rules_path, rules.project.rules_version)
    yield


app = FastAPI(
    title="Block CSS API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import blocks, preview  # noqa: E402

app.include_router(blocks.router, prefix="/api/blocks", tags=["Blocks"])
app.include_router(preview.router, prefix="/api/preview", tags=["Preview"])


# CORS (Allow Editor)
app.add_middleware(
    CORSMiddleware,
    allow_origins=rules.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
