"""Entry point for running the application with uvicorn."""

import logging

import uvicorn

from offer_letter.config import settings


def main() -> None:
    """Run the application."""
    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
    uvicorn.run(
        "offer_letter.api.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
