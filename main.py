import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import get_settings
from src.core.logging_config import setup_logging
from src.routers import assessments as assessments_router

settings = get_settings()

# Configure logging VERY early
setup_logging(settings.log_level, settings.json_logs)
logger = logging.getLogger(__name__)

app = FastAPI(title="Ministry Assessment Scoring Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(assessments_router.router, prefix=settings.api_prefix, tags=["assessments"])


@app.get("/health", tags=["Health Check"])
async def health_check():
    """
    Basic liveness check.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    logger.info("Running in __main__ block (for local dev)")
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
