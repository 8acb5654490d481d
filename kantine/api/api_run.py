from fastapi import FastAPI
import logging

from kantine.api.routes import kantine

# Logging
logger = logging.getLogger("kantine_app")

# Initialize FastAPI app
app = FastAPI(title="Kantine menu for Slack")

# Include routers
app.include_router(kantine.router)


@app.on_event("startup")
def _log_startup():
    logger.info("Kantine API started")
