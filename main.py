"""Main entry point for the DeepL Glossary Sync API."""

import uvicorn
from src.glossary_sync.config import get_settings


def main():
    """Run the glossary sync API server."""
    settings = get_settings()

    print(f"Starting DeepL Glossary Sync API...")
    print(f"Server will run on http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation available at http://{settings.api_host}:{settings.api_port}/docs")

    uvicorn.run(
        "src.glossary_sync.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
