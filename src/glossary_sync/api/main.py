"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import get_settings
from ..routers import system, glossary


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    print("Starting DeepL Glossary Sync API...")
    print(f"DeepL configured: {bool(settings.deepl_api_key)}")
    yield
    # Shutdown
    print("Shutting down DeepL Glossary Sync API...")


# Initialize FastAPI app
app = FastAPI(
    title="DeepL Glossary Sync API",
    description="""
Keeps the glossaries maintained in the CMS page tree in sync with DeepL.

**Key Features:**
- Builds one glossary per DeepL supported language pair from the localized glossary records of a page.
- Replaces ready glossaries on DeepL and stores the new glossary ids locally.
- Lists, inspects and deletes glossaries registered with DeepL.
- Cache management for the supported language pairs.
    """,
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all routers
app.include_router(system.router)
app.include_router(glossary.router)


def create_app() -> FastAPI:
    """Factory function to create the FastAPI app."""
    return app
