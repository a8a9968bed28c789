"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import comparison
from src.config import settings

logging.getLogger("src").setLevel(settings.log_level)

app = FastAPI(
    title=settings.app_title,
    description="Buy vs rent net worth comparison",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comparison.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
