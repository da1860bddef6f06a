"""
HTTP entry point exposing command resolution, repair and dispatch.
"""

import logging

from fastapi import FastAPI

from cmdrepair.api.routers import router as api_router
from cmdrepair.container import container

# Create FastAPI app
app = FastAPI(title="cmdrepair API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=container.get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
