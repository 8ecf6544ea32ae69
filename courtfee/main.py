"""Court fee calculator FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from courtfee.api.fees import router as fees_router
from courtfee.api.health import router as health_router
from courtfee.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Court Fee Calculator",
    description="Computes court filing fees with itemized, citable breakdowns",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(fees_router, prefix="/v1", tags=["Fees"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "courtfee", "version": "0.1.0", "docs": "/docs"}
