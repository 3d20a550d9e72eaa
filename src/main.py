from fastapi import FastAPI

from src.apps.api import router
from src.config.settings import get_settings
from src.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

# --- Application ---

app = FastAPI(
    title="ChangeSet Resolver API",
    version="0.1.0",
    description="Resolves the modules touched by a revision range for CI build/deploy fan-out",
)

app.include_router(router.router, prefix="/api")


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}
