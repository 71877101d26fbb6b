"""
FitTrack API server entry point.

Usage:
    python run.py

Or with uvicorn directly:
    uvicorn fittrack.main:app --port 9000
"""

import logging

import uvicorn

from fittrack.core.settings import settings


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "fittrack.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
